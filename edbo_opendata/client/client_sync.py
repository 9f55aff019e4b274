"""Blocking client for the EDBO Opendata registry.

Wraps an `httpx.Client` and exposes the four registry lookups as typed
methods. Retries transport errors and 5xx responses when configured. Every other
httpx request failure (redirect loops, undecodable bodies) is reported once.
"""

from __future__ import annotations

import time
from types import TracebackType
from typing import Any, List, Optional, Type

import httpx

from edbo_opendata.core.config import DEFAULT_BASE_URL, EdboClientConfig
from edbo_opendata.errors import EdboNetworkError
from edbo_opendata.models.institution import Institution
from edbo_opendata.models.university import University, UniversityBrief
from edbo_opendata.search import SearchParams

from .base import (
    INSTITUTIONS_ENDPOINT,
    SCHOOL_ENDPOINT,
    UNIVERSITIES_ENDPOINT,
    UNIVERSITY_ENDPOINT,
    EdboClientCommonMixin,
    SyncClientProtocol,
)


class EdboClient(EdboClientCommonMixin, SyncClientProtocol):
    """
    Thin blocking HTTP client for the EDBO Opendata registry.

    Responsibilities:
    - search_universities
    - search_university
    - search_institutions
    - search_school

    An injected `httpx.Client` is never closed by this class; one created here
    is closed by `close()` or on leaving a `with` block.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 30.0,
        max_retries: int = 0,
        backoff_initial: float = 0.5,
        backoff_factor: float = 2.0,
        backoff_max: float = 8.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        config = EdboClientConfig(
            base_url=base_url,
            timeout_seconds=timeout,
            max_retries=max_retries,
            backoff_initial=backoff_initial,
            backoff_factor=backoff_factor,
            backoff_max=backoff_max,
            **({"user_agent": user_agent} if user_agent is not None else {}),
        )
        self._configure(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout_seconds, follow_redirects=True)

    @classmethod
    def from_config(cls, config: EdboClientConfig, *, client: Optional[httpx.Client] = None) -> "EdboClient":
        """Construct a client from `EdboClientConfig` (e.g. ``settings.client``)."""
        return cls(
            config.base_url,
            timeout=config.timeout_seconds,
            max_retries=config.max_retries,
            backoff_initial=config.backoff_initial,
            backoff_factor=config.backoff_factor,
            backoff_max=config.backoff_max,
            user_agent=config.user_agent,
            client=client,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "EdboClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _get(self, operation: str, path: str, params: dict[str, str]) -> Any:
        url = self._url(path)
        attempt = 0
        while True:
            self._logger.debug("EdboClient.%s: GET %s params=%s", operation, url, params)
            try:
                r = self._client.get(url, params=params, headers=self._headers())
            except httpx.RequestError as e:
                if not isinstance(e, httpx.TransportError) or attempt >= self._max_retries:
                    self._logger.error("EdboClient.%s: request failed: %s", operation, e)
                    raise EdboNetworkError(e) from e
                delay = self._backoff_delay(attempt)
                attempt += 1
                self._logger.warning(
                    "EdboClient.%s: %s; retrying in %ss (attempt %s/%s)",
                    operation,
                    e,
                    delay,
                    attempt,
                    self._max_retries,
                )
                time.sleep(delay)
                continue
            if self._should_retry_status(r, attempt):
                delay = self._backoff_delay(attempt)
                attempt += 1
                self._logger.warning(
                    "EdboClient.%s: status %s; retrying in %ss (attempt %s/%s)",
                    operation,
                    r.status_code,
                    delay,
                    attempt,
                    self._max_retries,
                )
                time.sleep(delay)
                continue
            self._check_status(operation, r)
            return self._decode(operation, r)

    def search_universities(self, params: SearchParams) -> List[UniversityBrief]:
        """Search universities of one category in one region.

        Args:
            params: Must carry `university_category` and `region`.

        Returns:
            The matching `UniversityBrief` rows, in registry order.

        Raises:
            EdboRequestError: If a required parameter is missing.
            EdboApiError: If the registry answers with a non-2xx status.
            EdboNetworkError: If no response was received.
            EdboParsingError: If the body cannot be parsed.
        """
        q = self._universities_query(params)
        data = self._get("search_universities", UNIVERSITIES_ENDPOINT, q.to_params())
        universities = self._parse_many(UniversityBrief, data)
        self._logger.debug("EdboClient.search_universities: got %d universities", len(universities))
        return universities

    def search_university(self, params: SearchParams) -> University:
        """Fetch the detailed record of one university by `params.id`."""
        q = self._record_query(params, "University")
        data = self._get("search_university", UNIVERSITY_ENDPOINT, q.to_params())
        university = self._parse_one(University, data)
        self._logger.debug(
            "EdboClient.search_university: resolved id=%s name=%s", university.university_id, university.university_name
        )
        return university

    def search_institutions(self, params: SearchParams) -> List[Institution]:
        """Search general secondary institutions of one category in one region."""
        q = self._institutions_query(params)
        data = self._get("search_institutions", INSTITUTIONS_ENDPOINT, q.to_params())
        institutions = self._parse_many(Institution, data)
        self._logger.debug("EdboClient.search_institutions: got %d institutions", len(institutions))
        return institutions

    def search_school(self, params: SearchParams) -> Institution:
        """Fetch the record of one school by `params.id`."""
        q = self._record_query(params, "School")
        data = self._get("search_school", SCHOOL_ENDPOINT, q.to_params())
        return self._parse_one(Institution, data)
