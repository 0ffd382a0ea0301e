from fastapi import Depends

from llm_models_api.shared.config import logger
from llm_models_api.shared.dependencies import get_model_catalog
from llm_models_api.shared.errors import ModelsApiError
from llm_models_api.shared.metrics import MODELS_SERVED
from llm_models_api.services.model_catalog_service import ModelCatalogService
from llm_models_api.features.model_filter.pipeline import filter_models
from .query import ListModelsQuery, ListModelsResponse

class ListModelsHandler:
    """
    Handles the business logic for listing models.
    It gets the full list from the ModelCatalogService and runs it through
    the filters requested in the query string.
    """
    def __init__(
        self,
        model_catalog: ModelCatalogService = Depends(get_model_catalog),
    ):
        self._model_catalog = model_catalog

    @property
    def cache_ttl(self) -> int:
        return self._model_catalog.cache_ttl

    async def handle(self, query: ListModelsQuery) -> ListModelsResponse:
        try:
            all_models = await self._model_catalog.get_models()
            params = query.to_filter_params()

            models = filter_models(all_models, params) if params.is_active else all_models
            if params.is_active:
                logger.debug("Filtered %d models down to %d", len(all_models), len(models))

            response = ListModelsResponse(data=models)
        except ModelsApiError:
            raise
        except Exception as e:
            logger.exception("Error processing models request: %s", e)
            raise ModelsApiError(500) from e

        MODELS_SERVED.inc(len(models))
        return response
