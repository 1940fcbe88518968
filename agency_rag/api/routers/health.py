"""
Liveness endpoint.

Routes: GET /health

Reports the process is serving; it does not touch the database, the
vector index or the model providers.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from agency_rag.configs import get_settings


class HealthResponse(BaseModel):
    status: str
    message: str
    service: str
    environment: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        service=settings.service_name,
        environment=settings.environment,
    )
