import httpx
import pytest

from llm_models_api.services.model_catalog_service import ModelCatalogService
from llm_models_api.shared.errors import UpstreamError
from tests.conftest import FakeUpstream, MODELS_URL, SAMPLE_MODELS


def make_catalog(handler, cache_ttl_seconds=600):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ModelCatalogService(http_client, MODELS_URL, cache_ttl_seconds=cache_ttl_seconds)


async def test_get_models_returns_upstream_data():
    upstream = FakeUpstream()
    catalog = make_catalog(upstream)
    assert await catalog.get_models() == SAMPLE_MODELS
    assert upstream.calls == 1


async def test_models_are_cached_within_ttl():
    upstream = FakeUpstream()
    catalog = make_catalog(upstream)
    first = await catalog.get_models()
    second = await catalog.get_models()
    assert first is second
    assert upstream.calls == 1


async def test_stale_cache_is_refreshed():
    upstream = FakeUpstream()
    catalog = make_catalog(upstream, cache_ttl_seconds=-1)
    await catalog.get_models()
    await catalog.get_models()
    assert upstream.calls == 2


async def test_cache_state_is_reported():
    catalog = make_catalog(FakeUpstream())
    assert catalog.cached_count is None
    assert catalog.cache_age() is None

    await catalog.get_models()
    assert catalog.cached_count == len(SAMPLE_MODELS)
    assert 0 <= catalog.cache_age() < 600


async def test_non_success_status_raises_upstream_error():
    upstream = FakeUpstream(payload={"error": "down"}, status_code=503)
    catalog = make_catalog(upstream)
    with pytest.raises(UpstreamError) as exc_info:
        await catalog.get_models()
    assert exc_info.value.status_code == 503


async def test_failures_are_not_cached():
    upstream = FakeUpstream(status_code=502)
    catalog = make_catalog(upstream)
    with pytest.raises(UpstreamError):
        await catalog.get_models()

    upstream.status_code = 200
    assert await catalog.get_models() == SAMPLE_MODELS
    assert upstream.calls == 2


async def test_transport_errors_propagate():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    catalog = make_catalog(refuse)
    with pytest.raises(httpx.ConnectError):
        await catalog.get_models()


async def test_payload_without_list_is_rejected():
    catalog = make_catalog(FakeUpstream(payload={"data": {"id": "a/b"}}))
    with pytest.raises(TypeError):
        await catalog.get_models()
