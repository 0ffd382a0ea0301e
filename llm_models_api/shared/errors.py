"""
Exceptions and their JSON renderings for the LLM Models API.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from llm_models_api.shared.config import logger
from llm_models_api.shared.constants import UPSTREAM_ERROR_MESSAGE, INTERNAL_ERROR_MESSAGE


class ModelsApiError(Exception):
    """Error that ends a request with ``{"error": message}`` and ``status_code``."""

    message = INTERNAL_ERROR_MESSAGE

    def __init__(self, status_code: int = 500, detail: str = ""):
        super().__init__(detail or self.message)
        self.status_code = status_code
        self.detail = detail


class UpstreamError(ModelsApiError):
    """OpenRouter answered the model listing with a non-success status."""

    message = UPSTREAM_ERROR_MESSAGE

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(status_code, f"OpenRouter returned status {status_code}")
        self.body = body


async def models_api_error_handler(request: Request, exc: ModelsApiError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.error(
            "Upstream error on %s: %s - %s", request.url.path, exc.status_code, exc.body[:200]
        )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    # Handled by ExceptionMiddleware, so CORS and request id headers still apply.
    app.add_exception_handler(ModelsApiError, models_api_error_handler)
