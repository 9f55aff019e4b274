from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest
from pydantic import ValidationError

from edbo_opendata.client import AsyncClientProtocol, AsyncEdboClient
from edbo_opendata.core.config import EdboClientConfig
from edbo_opendata.errors import EdboApiError, EdboNetworkError, EdboRequestError
from edbo_opendata.models import InstitutionCategory, Region, UniversityCategory
from edbo_opendata.search import SearchParams


def _mock_transport(state: dict) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        state.setdefault("requests", []).append(request)
        if request.method == "GET" and request.url.path == "/api/universities":
            return httpx.Response(200, json=[state["brief"]])
        if request.method == "GET" and request.url.path == "/api/university":
            return httpx.Response(200, json=state["university"])
        if request.method == "GET" and request.url.path == "/api/institutions":
            return httpx.Response(200, json=[state["institution"]])
        if request.method == "GET" and request.url.path == "/api/school":
            if request.url.params.get("id") == "404":
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(200, json=state["institution"])
        return httpx.Response(404, json={"error": "not found"})

    return httpx.MockTransport(handler)


@pytest.fixture
def state(
    university_brief_payload: Dict[str, Any],
    university_payload: Dict[str, Any],
    institution_payload: Dict[str, Any],
) -> dict:
    return {"brief": university_brief_payload, "university": university_payload, "institution": institution_payload}


@pytest.mark.asyncio
async def test_async_client_all_operations(state: dict) -> None:
    http_client = httpx.AsyncClient(transport=_mock_transport(state), base_url="http://mock")
    client = AsyncEdboClient("http://mock", client=http_client)

    universities = await client.search_universities(
        SearchParams()
        .with_region(Region.KHARKIV_OBLAST)
        .with_university_category(UniversityCategory.HIGHER_EDUCATION_INSTITUTIONS)
    )
    university = await client.search_university(SearchParams().with_id(174))
    schools = await client.search_institutions(
        SearchParams()
        .with_region(Region.KYIV_CITY)
        .with_institution_category(InstitutionCategory.GENERAL_SECONDARY_EDUCATION_INSTITUTIONS)
    )
    school = await client.search_school(SearchParams().with_id(137211))

    assert universities[0].university_id == "174"
    assert university.facultets[0].startswith("Факультет")
    assert schools[0].institution_id == school.institution_id == "137211"

    requests: List[httpx.Request] = state["requests"]
    assert [r.url.path for r in requests] == [
        "/api/universities",
        "/api/university",
        "/api/institutions",
        "/api/school",
    ]
    assert requests[0].url.params["lc"] == "63"

    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_validation_happens_before_request(state: dict) -> None:
    http_client = httpx.AsyncClient(transport=_mock_transport(state), base_url="http://mock")
    client = AsyncEdboClient("http://mock", client=http_client)

    with pytest.raises(EdboRequestError, match="region cannot be None"):
        await client.search_institutions(
            SearchParams().with_institution_category(InstitutionCategory.GENERAL_SECONDARY_EDUCATION_INSTITUTIONS)
        )
    with pytest.raises(EdboRequestError, match="School ID must be positive"):
        await client.search_school(SearchParams().with_id(0))

    assert "requests" not in state
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_api_error(state: dict) -> None:
    http_client = httpx.AsyncClient(transport=_mock_transport(state), base_url="http://mock")
    client = AsyncEdboClient("http://mock", client=http_client)

    with pytest.raises(EdboApiError) as exc:
        await client.search_school(SearchParams().with_id(404))

    assert exc.value.status_code == 404
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_retries_then_network_error() -> None:
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        raise httpx.ConnectTimeout("connect timeout", request=request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://mock")
    client = AsyncEdboClient("http://mock", client=http_client, max_retries=2, backoff_initial=0.0)

    with pytest.raises(EdboNetworkError):
        await client.search_university(SearchParams().with_id(1))

    assert calls["n"] == 3
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_retries_server_error(state: dict) -> None:
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        if calls["n"] == 1:
            return httpx.Response(503)
        return httpx.Response(200, json=state["institution"])

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://mock")
    client = AsyncEdboClient("http://mock", client=http_client, max_retries=1, backoff_initial=0.0)

    school = await client.search_school(SearchParams().with_id(137211))

    assert school.institution_id == "137211"
    assert calls["n"] == 2
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_context_manager_closes_owned_client() -> None:
    async with AsyncEdboClient.from_config(EdboClientConfig(base_url="http://mock")) as client:
        assert isinstance(client, AsyncClientProtocol)

    assert client._client.is_closed is True


@pytest.mark.asyncio
async def test_async_context_manager_keeps_injected_client(state: dict) -> None:
    http_client = httpx.AsyncClient(transport=_mock_transport(state), base_url="http://mock")

    async with AsyncEdboClient("http://mock", client=http_client):
        pass

    assert http_client.is_closed is False
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_redirect_loop_is_network_error() -> None:
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        return httpx.Response(302, headers={"Location": str(request.url)})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True, max_redirects=3)
    client = AsyncEdboClient("http://mock", client=http_client, max_retries=2, backoff_initial=0.0)

    with pytest.raises(EdboNetworkError) as exc:
        await client.search_school(SearchParams().with_id(1))

    assert isinstance(exc.value.__cause__, httpx.TooManyRedirects)
    assert calls["n"] <= 4
    await http_client.aclose()


def test_async_empty_user_agent_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AsyncEdboClient("http://mock", user_agent="")
