from pydantic import BaseModel
from typing import List, Any, Optional

from llm_models_api.features.model_filter.params import ModelFilterParams

class ListModelsQuery(BaseModel):
    """
    Raw query parameters of GET /models. Everything stays a string here so a
    malformed value switches its filter off instead of failing validation.
    """
    ignore_free: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    min_context: Optional[str] = None
    modality: Optional[str] = None
    strip_suffix: Optional[str] = None

    def to_filter_params(self) -> ModelFilterParams:
        return ModelFilterParams.from_query(**self.model_dump())

class ListModelsResponse(BaseModel):
    """
    Response model for the list models endpoint, mirroring the API structure.
    """
    data: List[Any]
