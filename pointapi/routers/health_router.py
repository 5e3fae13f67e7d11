from fastapi import APIRouter

from pointapi.config import settings
from pointapi.schemas.health import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """서비스 상태와 기본 로케일"""

    return HealthCheckResponse(
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        default_locale=settings.DEFAULT_LOCALE,
    )
