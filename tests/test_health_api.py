from tests.conftest import SAMPLE_MODELS


def test_root_status(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "LLM Models API is running"}


def test_health_before_first_fetch(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "cold",
        "catalog": {"cached_models": None, "cache_age_seconds": None, "cache_ttl_seconds": 600},
    }


def test_health_after_models_are_cached(client):
    client.get("/models")
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["catalog"]["cached_models"] == len(SAMPLE_MODELS)
    assert body["catalog"]["cache_age_seconds"] >= 0


def test_health_reports_stale_catalog(client, catalog):
    client.get("/models")
    catalog._cache_ttl = -1
    body = client.get("/health").json()
    assert body["status"] == "stale"
    assert body["catalog"]["cache_ttl_seconds"] == -1


def test_health_does_not_call_upstream(client, upstream):
    client.get("/health")
    assert upstream.calls == 0


def test_metrics_exposes_model_counters(client):
    client.get("/models")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "models_served_total" in response.text
    assert "upstream_fetches_total" in response.text
