# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения edubase.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from edubase import __version__
from edubase.api.v1.questions import router as questions_router
from edubase.api.v1.subjects import router as subjects_router
from edubase.clients.database_client import init_db
from edubase.config.logger import configure_logger, get_system_logger
from edubase.config.settings import settings
from edubase.config.uvicorn_config import setup_uvicorn_logging
from edubase.utils.exceptions import APIException

logger = configure_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_uvicorn_logging()
    system_logger = get_system_logger()
    system_logger.info(f"🔧 Конфигурация: {settings.get_config_source()}")
    await init_db()
    system_logger.info("✅ База данных инициализирована")
    yield


app = FastAPI(
    title="edubase API",
    description="API каталога вопросов и дисциплин",
    version=__version__,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_all_requests(request: Request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            f"💥 Критическая ошибка API: {request.method} {request.url.path}"
        )
        raise

    if request.url.path.startswith("/api/"):
        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )
    return response


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Отдать ошибку сервиса вместе с её кодом."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error_code": getattr(exc.error_code, "value", exc.error_code),
        },
        headers=exc.headers,
    )


app.include_router(questions_router, prefix="/api/v1")
app.include_router(subjects_router, prefix="/api/v1")


@app.get("/health", tags=["⚙️ Служебное"])
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "edubase.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )
