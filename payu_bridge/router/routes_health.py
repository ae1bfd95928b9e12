from fastapi import APIRouter, Depends

from payu_bridge.dto.health import HealthResponse
from payu_bridge.utils.config import Settings, get_settings
from payu_bridge.utils.time import utcnow

router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="OK",
        message="Payment server is running",
        environment=settings.app_env,
        frontend_url=settings.resolved_frontend_url,
        current_time=utcnow(),
    )
