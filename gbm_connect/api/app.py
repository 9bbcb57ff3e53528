"""
GBM Connect — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn gbm_connect.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time

from gbm_connect import __version__

from .config import config
from .dependencies import services_manager
from .models import ErrorResponse
from .routes import (
    health_router,
    matches_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — завантаження конфігурації та даних при старті.
    """
    print("=" * 60)
    print("🧠 GBM Connect API Starting...")
    print("=" * 60)

    services_manager.load()

    if services_manager.error is None:
        print("✅ API ready!")
    else:
        print(f"⚠️ API starting in limited mode: {services_manager.error}")

    print("=" * 60)
    print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    print("🛑 GBM Connect API Stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        print(f"📨 {request.method} {request.url.path} → {response.status_code} ({process_time*1000:.1f}ms)")

    return response


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    print(f"❌ Error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if config.debug else None
        ).model_dump()
    )


# Підключаємо роутери
app.include_router(health_router, prefix=config.api_prefix)
app.include_router(matches_router, prefix=config.api_prefix)


@app.get("/", tags=["Root"])
async def root():
    """Кореневий endpoint"""
    return {
        "name": config.api_title,
        "version": __version__,
        "docs": "/docs",
        "health": f"{config.api_prefix}/health",
    }
