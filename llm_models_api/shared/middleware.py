import time
import uuid
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from llm_models_api.shared.config import logger

class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Injects a unique request ID into every incoming request for tracing.
    """
    async def dispatch(
        self, request: Request, call_next
    ) -> Response:
        request.state.request_id = request.headers.get('X-Request-ID', str(uuid.uuid4()))
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response

async def add_process_time_header(
    request: Request, call_next
) -> Response:
    """
    Adds an X-Process-Time header and logs request completion details.
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logger.info(
        "Request completed: %s %s -> %s in %.4fs (req_id=%s)",
        request.method,
        request.url.path,
        response.status_code,
        process_time,
        getattr(request.state, "request_id", "N/A"),
    )
    return response
