from pydantic import BaseModel
from typing import Optional

class StatusResponse(BaseModel):
    status: str
    message: str

class CatalogStatus(BaseModel):
    cached_models: Optional[int]
    cache_age_seconds: Optional[float]
    cache_ttl_seconds: int

class HealthCheckResponse(BaseModel):
    # "ok" with a fresh catalog, "stale" once the TTL has passed, "cold" before the first fetch
    status: str
    catalog: CatalogStatus
