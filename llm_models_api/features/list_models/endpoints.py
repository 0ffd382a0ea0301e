from fastapi import APIRouter, Depends, Response
from .query import ListModelsQuery, ListModelsResponse
from .handler import ListModelsHandler

router = APIRouter()

@router.get("/models", response_model=ListModelsResponse, tags=["Models"])
async def list_models(
    response: Response,
    query: ListModelsQuery = Depends(),
    handler: ListModelsHandler = Depends(ListModelsHandler),
) -> ListModelsResponse:
    """
    Returns the OpenRouter model list, narrowed by the optional query filters
    (ignore_free, provider, model, min_context, modality) and with variant
    suffixes removed from ids when strip_suffix=true.
    """
    result = await handler.handle(query)
    response.headers["Cache-Control"] = f"max-age={handler.cache_ttl}"
    return result
