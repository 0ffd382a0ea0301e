#!/usr/bin/env python3
"""
Smoke test script for the LLM Models API.
Runs against a live server using configuration from config.yml.
"""

import asyncio
from typing import Dict, Any

import httpx
import yaml

def load_config() -> Dict[str, Any]:
    """Load configuration from config.yml"""
    try:
        with open("config.yml", encoding="utf-8") as file:
            return yaml.safe_load(file) or {}
    except FileNotFoundError:
        return {}

async def test_feature(feature_name: str, test_func: callable):
    """Run a feature test with formatted output"""
    print(f"\n=== Testing {feature_name} ===")
    try:
        await test_func()
        print(f"✅ {feature_name} test passed")
    except Exception as e:
        print(f"❌ {feature_name} test failed: {str(e)}")
        raise

async def test_status(client: httpx.AsyncClient, base_url: str):
    resp = await client.get(f"{base_url}/")
    resp.raise_for_status()
    assert resp.json()["status"] == "ok"

async def test_list_models(client: httpx.AsyncClient, base_url: str):
    """Test the unfiltered model list"""
    resp = await client.get(f"{base_url}/models")
    resp.raise_for_status()
    data = resp.json()
    assert isinstance(data.get("data"), list), "Expected list of models"
    print(f"Found {len(data['data'])} models")

async def test_filtered_models(client: httpx.AsyncClient, base_url: str):
    """Test provider, context and suffix options together"""
    params = {"provider": "openai", "min_context": "8000", "strip_suffix": "true"}
    resp = await client.get(f"{base_url}/models", params=params)
    resp.raise_for_status()
    models = resp.json()["data"]
    for model in models:
        assert model["id"].startswith("openai/"), model["id"]
        assert ":" not in model["id"], model["id"]
        assert model["context_length"] >= 8000
    print(f"Found {len(models)} OpenAI models with at least 8000 tokens of context")

async def test_ignore_free(client: httpx.AsyncClient, base_url: str):
    resp = await client.get(f"{base_url}/models", params={"ignore_free": "true"})
    resp.raise_for_status()
    assert all(":free" not in m["id"] for m in resp.json()["data"])

async def run_tests():
    """Run all feature tests"""
    server_config = load_config().get("server") or {}

    host = server_config.get("host", "127.0.0.1")
    host = "127.0.0.1" if host == "0.0.0.0" else host
    port = server_config.get("port", 5555)
    base_url = f"http://{host}:{port}"

    async with httpx.AsyncClient(timeout=60.0) as client:
        await test_feature("Status", lambda: test_status(client, base_url))
        await test_feature("List Models", lambda: test_list_models(client, base_url))
        await test_feature("Filtered Models", lambda: test_filtered_models(client, base_url))
        await test_feature("Ignore Free", lambda: test_ignore_free(client, base_url))

if __name__ == "__main__":
    print("Running LLM Models API smoke tests")
    asyncio.run(run_tests())
