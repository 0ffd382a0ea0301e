#!/usr/bin/env python3
"""
Dependency provider functions for the application.
"""

from fastapi import Request

from llm_models_api.services.model_catalog_service import ModelCatalogService

def get_model_catalog(request: Request) -> ModelCatalogService:
    """Returns the shared ModelCatalogService instance."""
    return request.app.state.model_catalog
