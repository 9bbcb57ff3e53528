"""
GBM Connect — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from gbm_connect import __version__

from ..dependencies import get_services, ServicesManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    services: ServicesManager = Depends(get_services)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Кількість користувачів у сховищі
    - Чи завантажена конфігурація з файлу
    """
    patients = services.repository.count() if services.repository is not None else 0

    return HealthResponse(
        status="ok" if services.error is None else "degraded",
        version=__version__,
        patients=patients,
        config_loaded=services.config_loaded,
    )
