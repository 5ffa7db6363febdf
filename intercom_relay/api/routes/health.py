from typing import Annotated

from fastapi import APIRouter, Depends

from intercom_relay.core.config import Settings, get_settings
from intercom_relay.models.schemas.health import HealthResponse
from intercom_relay.services.health_service import HealthService

router = APIRouter()


def get_health_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthService:
    return HealthService(settings=settings)


@router.get("/health", response_model=HealthResponse)
def health(
    health_service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthResponse:
    return health_service.get_health()
