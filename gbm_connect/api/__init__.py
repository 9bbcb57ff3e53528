"""
GBM Connect — REST API модуль

FastAPI REST API для підбору схожих пацієнтів.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Залежності та стан

Запуск:
    uvicorn gbm_connect.api.app:app --reload --port 8000

Або:
    python scripts/run_api.py

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /                               - Root info
    GET  /api/health                     - Health check
    GET  /api/community/matches?limit=   - Схожі пацієнти (заголовок X-User-Id)
    GET  /api/community/matches/weights  - Ваги ознак
"""

from .app import app
from .dependencies import services_manager, get_services, get_matching_service


__all__ = [
    "app",
    "services_manager",
    "get_services",
    "get_matching_service",
]
