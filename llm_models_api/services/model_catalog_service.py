import time
import httpx
import asyncio
from typing import List, Dict, Any, Optional
from llm_models_api.shared.config import logger
from llm_models_api.shared.errors import UpstreamError
from llm_models_api.shared.metrics import UPSTREAM_FETCHES, MODELS_CACHE_HITS, MODELS_CACHED

class ModelCatalogService:
    """
    A service to fetch and cache the OpenRouter model list.

    The cached list is handed out to every request as-is, so callers must
    treat it as read-only.
    """
    def __init__(self, http_client: httpx.AsyncClient, models_url: str, cache_ttl_seconds: int = 600):
        self._client = http_client
        self._models_url = models_url
        self._cache_ttl = cache_ttl_seconds
        self._all_models: Optional[List[Dict[str, Any]]] = None
        self._last_fetch_time: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def cache_ttl(self) -> int:
        return self._cache_ttl

    async def _refresh_cache(self) -> None:
        """Fetches the model list and refreshes the cache."""
        logger.info("Refreshing models cache from %s", self._models_url)
        try:
            response = await self._client.get(self._models_url)
        except httpx.RequestError as e:
            UPSTREAM_FETCHES.labels(outcome="transport_error").inc()
            logger.error("Failed to reach OpenRouter: %s", e)
            raise

        if not response.is_success:
            UPSTREAM_FETCHES.labels(outcome="http_error").inc()
            raise UpstreamError(response.status_code, response.text)

        UPSTREAM_FETCHES.labels(outcome="ok").inc()
        models_data = response.json()["data"]
        if not isinstance(models_data, list):
            raise TypeError(f"Expected a list of models, got {type(models_data).__name__}")

        self._all_models = models_data
        self._last_fetch_time = time.time()
        MODELS_CACHED.set(len(models_data))
        logger.info("Successfully refreshed models cache. Found %s models.", len(models_data))

    @property
    def cached_count(self) -> Optional[int]:
        return None if self._all_models is None else len(self._all_models)

    def cache_age(self) -> Optional[float]:
        """Seconds since the last successful fetch, None before the first one."""
        if self._all_models is None:
            return None
        return time.time() - self._last_fetch_time

    def _is_cache_fresh(self) -> bool:
        age = self.cache_age()
        return age is not None and age <= self._cache_ttl

    async def get_models(self) -> List[Dict[str, Any]]:
        """Returns the cached list of all models, refreshing it when stale."""
        async with self._lock:
            if self._is_cache_fresh():
                MODELS_CACHE_HITS.inc()
            else:
                await self._refresh_cache()
            return self._all_models

