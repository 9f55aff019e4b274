from .base import AsyncClientProtocol, SyncClientProtocol
from .client_async import AsyncEdboClient
from .client_sync import EdboClient
from .functions import (
    search_institutions,
    search_institutions_async,
    search_school,
    search_school_async,
    search_universities,
    search_universities_async,
    search_university,
    search_university_async,
)

__all__ = [
    "EdboClient",
    "AsyncEdboClient",
    "SyncClientProtocol",
    "AsyncClientProtocol",
    "search_universities",
    "search_universities_async",
    "search_university",
    "search_university_async",
    "search_institutions",
    "search_institutions_async",
    "search_school",
    "search_school_async",
]
