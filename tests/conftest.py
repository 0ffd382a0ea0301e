import copy

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from llm_models_api.services.model_catalog_service import ModelCatalogService
from llm_models_api.shared.dependencies import get_model_catalog

MODELS_URL = "https://openrouter.test/api/v1/models"

SAMPLE_MODELS = [
    {
        "id": "openai/gpt-4:free",
        "name": "OpenAI: GPT-4 (free)",
        "context_length": 8000,
        "architecture": {"modality": "text->text", "tokenizer": "GPT", "instruct_type": None},
        "pricing": {"prompt": "0", "completion": "0"},
        "per_request_limits": None,
    },
    {
        "id": "anthropic/claude-3",
        "name": "Anthropic: Claude 3",
        "context_length": 200000,
        "architecture": {"modality": "text+image->text", "tokenizer": "Claude", "instruct_type": None},
        "pricing": {"prompt": "0.000015", "completion": "0.000075"},
        "per_request_limits": {"prompt_tokens": "1000", "completion_tokens": "500"},
    },
    {
        "id": "openai/gpt-4",
        "name": "OpenAI: GPT-4",
        "context_length": 8000,
        "architecture": {"modality": "text->text", "tokenizer": "GPT", "instruct_type": None},
        "pricing": {"prompt": "0.00003", "completion": "0.00006"},
        "per_request_limits": None,
    },
    {
        "id": "openai/gpt-4:preview",
        "name": "OpenAI: GPT-4 (preview)",
        "context_length": 32000,
        "architecture": {"modality": "text->text", "tokenizer": "GPT", "instruct_type": None},
        "pricing": {"prompt": "0.00003", "completion": "0.00006"},
        "per_request_limits": None,
    },
    {
        "id": "google/gemini-pro:free-beta",
        "name": "Google: Gemini Pro (beta)",
        "context_length": 4000,
        "architecture": {"modality": "text+image->text", "tokenizer": "Gemini", "instruct_type": None},
        "pricing": {"prompt": "0", "completion": "0"},
        "per_request_limits": None,
    },
]


@pytest.fixture()
def sample_models():
    return copy.deepcopy(SAMPLE_MODELS)


class FakeUpstream:
    """Serves /models from memory and counts how often it was asked."""

    def __init__(self, payload=None, status_code=200):
        self.payload = {"data": copy.deepcopy(SAMPLE_MODELS)} if payload is None else payload
        self.status_code = status_code
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture()
def upstream():
    return FakeUpstream()


@pytest.fixture()
def catalog(upstream):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return ModelCatalogService(http_client=http_client, models_url=MODELS_URL, cache_ttl_seconds=600)


@pytest.fixture()
def client(catalog):
    app.dependency_overrides[get_model_catalog] = lambda: catalog
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
