from fastapi import Depends
from llm_models_api.shared.dependencies import get_model_catalog
from llm_models_api.shared.constants import HEALTH_MESSAGE
from llm_models_api.services.model_catalog_service import ModelCatalogService
from .query import CatalogStatus, HealthCheckResponse, StatusResponse

def service_status() -> StatusResponse:
    """Liveness answer for GET /, no dependency checks."""
    return StatusResponse(status="ok", message=HEALTH_MESSAGE)

class HealthCheckHandler:
    """Reports the state of the model catalog cache without calling OpenRouter."""

    def __init__(self, model_catalog: ModelCatalogService = Depends(get_model_catalog)):
        self._model_catalog = model_catalog

    def handle(self) -> HealthCheckResponse:
        age = self._model_catalog.cache_age()
        ttl = self._model_catalog.cache_ttl
        if age is None:
            status = "cold"
        elif age <= ttl:
            status = "ok"
        else:
            status = "stale"

        return HealthCheckResponse(
            status=status,
            catalog=CatalogStatus(
                cached_models=self._model_catalog.cached_count,
                cache_age_seconds=None if age is None else round(age, 3),
                cache_ttl_seconds=ttl,
            ),
        )
