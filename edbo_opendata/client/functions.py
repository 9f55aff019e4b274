"""One-shot module-level helpers.

Each helper opens a client configured from ``settings.client`` (environment
variables prefixed with ``EDBO_``), performs one lookup and closes it again.
Pass ``client=`` to reuse an existing client instead; it is left open.

Examples:
    >>> from edbo_opendata import Region, SearchParams, UniversityCategory, search_universities
    >>> params = SearchParams().with_region(Region.LVIV_OBLAST).with_university_category(
    ...     UniversityCategory.HIGHER_EDUCATION_INSTITUTIONS
    ... )
    >>> universities = search_universities(params)  # doctest: +SKIP
"""

from __future__ import annotations

from typing import List, Optional

from edbo_opendata.core.config import settings
from edbo_opendata.models.institution import Institution
from edbo_opendata.models.university import University, UniversityBrief
from edbo_opendata.search import SearchParams

from .client_async import AsyncEdboClient
from .client_sync import EdboClient


def search_universities(params: SearchParams, *, client: Optional[EdboClient] = None) -> List[UniversityBrief]:
    if client is not None:
        return client.search_universities(params)
    with EdboClient.from_config(settings.client) as c:
        return c.search_universities(params)


def search_university(params: SearchParams, *, client: Optional[EdboClient] = None) -> University:
    if client is not None:
        return client.search_university(params)
    with EdboClient.from_config(settings.client) as c:
        return c.search_university(params)


def search_institutions(params: SearchParams, *, client: Optional[EdboClient] = None) -> List[Institution]:
    if client is not None:
        return client.search_institutions(params)
    with EdboClient.from_config(settings.client) as c:
        return c.search_institutions(params)


def search_school(params: SearchParams, *, client: Optional[EdboClient] = None) -> Institution:
    if client is not None:
        return client.search_school(params)
    with EdboClient.from_config(settings.client) as c:
        return c.search_school(params)


async def search_universities_async(
    params: SearchParams, *, client: Optional[AsyncEdboClient] = None
) -> List[UniversityBrief]:
    if client is not None:
        return await client.search_universities(params)
    async with AsyncEdboClient.from_config(settings.client) as c:
        return await c.search_universities(params)


async def search_university_async(params: SearchParams, *, client: Optional[AsyncEdboClient] = None) -> University:
    if client is not None:
        return await client.search_university(params)
    async with AsyncEdboClient.from_config(settings.client) as c:
        return await c.search_university(params)


async def search_institutions_async(
    params: SearchParams, *, client: Optional[AsyncEdboClient] = None
) -> List[Institution]:
    if client is not None:
        return await client.search_institutions(params)
    async with AsyncEdboClient.from_config(settings.client) as c:
        return await c.search_institutions(params)


async def search_school_async(params: SearchParams, *, client: Optional[AsyncEdboClient] = None) -> Institution:
    if client is not None:
        return await client.search_school(params)
    async with AsyncEdboClient.from_config(settings.client) as c:
        return await c.search_school(params)
