"""Client protocols and shared helpers for the EDBO registry clients.

Defines the sync/async client protocols that concrete clients satisfy, and an
`EdboClientCommonMixin` with parameter validation, query building, retry
backoff and response parsing shared by both clients.

Usage:
- `EdboClient` and `AsyncEdboClient` implement these protocols.
- The mixin never touches the network; the clients own the HTTP calls.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol, Type, TypeVar, runtime_checkable

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from edbo_opendata.core.config import EdboClientConfig
from edbo_opendata.core.logging_config import get_logger
from edbo_opendata.errors import EdboApiError, EdboParsingError, EdboRequestError
from edbo_opendata.models.dto import CategorySearchQuery, RecordQuery
from edbo_opendata.models.institution import Institution
from edbo_opendata.models.university import University, UniversityBrief
from edbo_opendata.search import SearchParams

UNIVERSITIES_ENDPOINT = "/api/universities"
UNIVERSITY_ENDPOINT = "/api/university"
INSTITUTIONS_ENDPOINT = "/api/institutions"
SCHOOL_ENDPOINT = "/api/school"

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class SyncClientProtocol(Protocol):
    """Protocol for blocking EDBO registry clients."""

    def search_universities(self, params: SearchParams) -> List[UniversityBrief]: ...

    def search_university(self, params: SearchParams) -> University: ...

    def search_institutions(self, params: SearchParams) -> List[Institution]: ...

    def search_school(self, params: SearchParams) -> Institution: ...

    def close(self) -> None: ...


@runtime_checkable
class AsyncClientProtocol(Protocol):
    """Protocol for asyncio EDBO registry clients."""

    async def search_universities(self, params: SearchParams) -> List[UniversityBrief]: ...

    async def search_university(self, params: SearchParams) -> University: ...

    async def search_institutions(self, params: SearchParams) -> List[Institution]: ...

    async def search_school(self, params: SearchParams) -> Institution: ...

    async def aclose(self) -> None: ...


def require(value: Optional[Any], field: str) -> Any:
    """Return `value`, or raise `EdboRequestError` naming `field` when it is None."""
    if value is None:
        raise EdboRequestError(f"{field} cannot be None")
    return value


class EdboClientCommonMixin:
    """Shared, transport-agnostic behaviour of the sync and async clients."""

    base_url: str
    _max_retries: int
    _backoff_initial: float
    _backoff_factor: float
    _backoff_max: float
    _user_agent: str
    _logger: logging.Logger

    def _configure(self, config: EdboClientConfig) -> None:
        self.base_url = config.base_url.rstrip("/")
        self._max_retries = config.max_retries
        self._backoff_initial = config.backoff_initial
        self._backoff_factor = config.backoff_factor
        self._backoff_max = config.backoff_max
        self._user_agent = config.user_agent
        self._logger = get_logger(type(self).__module__)

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self._user_agent}

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # ------------------------------------------------------------------
    # Parameter validation
    # ------------------------------------------------------------------

    @staticmethod
    def _universities_query(params: SearchParams) -> CategorySearchQuery:
        ut = require(params.university_category, "university_category")
        lc = require(params.region, "region")
        return CategorySearchQuery(ut=int(ut), lc=int(lc))

    @staticmethod
    def _institutions_query(params: SearchParams) -> CategorySearchQuery:
        ut = require(params.institution_category, "institution_category")
        lc = require(params.region, "region")
        return CategorySearchQuery(ut=int(ut), lc=int(lc))

    @staticmethod
    def _record_query(params: SearchParams, kind: str) -> RecordQuery:
        record_id = require(params.id, "id")
        if record_id < 1:
            raise EdboRequestError(f"{kind} ID must be positive")
        return RecordQuery(id=record_id)

    # ------------------------------------------------------------------
    # Retry policy
    # ------------------------------------------------------------------

    def _backoff_delay(self, attempt: int) -> float:
        return min(self._backoff_initial * (self._backoff_factor**attempt), self._backoff_max)

    def _should_retry_status(self, response: httpx.Response, attempt: int) -> bool:
        return response.status_code >= 500 and attempt < self._max_retries

    # ------------------------------------------------------------------
    # Response handling
    # ------------------------------------------------------------------

    def _check_status(self, operation: str, response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "%s.%s: registry answered %s", type(self).__name__, operation, e.response.status_code
            )
            raise EdboApiError(e.response.status_code, details=e.response.text) from e

    def _decode(self, operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            self._logger.error("%s.%s: response is not JSON", type(self).__name__, operation)
            raise EdboParsingError(e, status_code=response.status_code, details=response.text) from e

    def _parse_one(self, model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise EdboParsingError(e, details=data) from e

    def _parse_many(self, model: Type[ModelT], data: Any) -> List[ModelT]:
        try:
            return TypeAdapter(List[model]).validate_python(data)  # type: ignore[valid-type]
        except ValidationError as e:
            raise EdboParsingError(e, details=data) from e
