from fastapi import APIRouter, Depends
from .handler import HealthCheckHandler, service_status
from .query import HealthCheckResponse, StatusResponse

router = APIRouter()

@router.get("/", response_model=StatusResponse, tags=["Monitoring"])
async def root_status():
    return service_status()

@router.get("/health", response_model=HealthCheckResponse, tags=["Monitoring"])
async def health_check(handler: HealthCheckHandler = Depends()):
    return handler.handle()
