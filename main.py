#!/usr/bin/env python3
"""
LLM Models API
Serves the OpenRouter model list with optional filtering by provider, model
name, context length and modality.
"""

from contextlib import asynccontextmanager

import httpx
import uvicorn

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llm_models_api.shared.config import config, logger, models_url
from llm_models_api.shared.errors import register_exception_handlers
from llm_models_api.shared.middleware import RequestIDMiddleware, add_process_time_header
from llm_models_api.services.model_catalog_service import ModelCatalogService
from llm_models_api.features.list_models.endpoints import router as list_models_router
from llm_models_api.features.health_check.endpoints import router as health_check_router
from llm_models_api.features.metrics.endpoints import router as metrics_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan resources."""
    client_kwargs = {"timeout": config["openrouter"]["request_timeout"]}
    if config["requestProxy"]["enabled"] and config["requestProxy"]["url"]:
        client_kwargs["proxy"] = config["requestProxy"]["url"]
        logger.info("Using proxy for httpx client: %s", config["requestProxy"]["url"])
    app.state.http_client = httpx.AsyncClient(**client_kwargs)

    app.state.model_catalog = ModelCatalogService(
        http_client=app.state.http_client,
        models_url=models_url(config),
        cache_ttl_seconds=config["openrouter"]["cache_ttl"],
    )

    logger.info("Application startup complete")
    yield
    await app.state.http_client.aclose()
    logger.info("Application shutdown complete")

app = FastAPI(
    title="LLM Models API",
    description="Filters the OpenRouter model list by provider, model, context length and modality",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(list_models_router, tags=["Models"])
app.include_router(health_check_router, tags=["Monitoring"])
app.include_router(metrics_router)

register_exception_handlers(app)

app.middleware("http")(add_process_time_header)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config["cors"]["allow_origins"],
    allow_methods=["*"],
    allow_headers=["*"],
)

if __name__ == "__main__":
    host = config["server"]["host"]
    port = config["server"]["port"]

    logger.warning("Starting LLM Models API on %s:%s", host, port)
    logger.warning("Models: http://%s:%s/models", host, port)
    logger.warning("Metrics: http://%s:%s/metrics", host, port)

    log_config = uvicorn.config.LOGGING_CONFIG
    http_log_level = config["server"].get("http_log_level", "INFO").upper()
    log_config["loggers"]["uvicorn.access"]["level"] = http_log_level

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_config=log_config,
        timeout_graceful_shutdown=30,
        server_header=False
    )
