import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import async_sessionmaker

from cms.api.error_handlers import register_error_handlers
from cms.api.http.auth import router as auth_router
from cms.api.http.blogs import router as blogs_router
from cms.api.http.contact import router as contact_router
from cms.api.http.health import router as health_router
from cms.api.http.jobs import router as jobs_router
from cms.api.http.portfolio import router as portfolio_router
from cms.core.config import settings
from cms.core.db import Base, SessionLocal, engine
from cms.core.observability import setup_logging
from cms.db import models  # noqa: F401  регистрация моделей в Base.metadata
from cms.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)


async def bootstrap_admin(session_factory: async_sessionmaker = SessionLocal) -> None:
    """Создание администратора из ADMIN_EMAIL / ADMIN_PASSWORD, если его нет"""
    if not settings.admin_email or not settings.admin_password:
        return

    async with session_factory() as session:
        await IdentityService(session).ensure_user(settings.admin_email, settings.admin_password)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)

    # Миграций нет: таблицы создаются при старте
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await bootstrap_admin()
    logger.info("CMS API started")

    yield

    await engine.dispose()


app = FastAPI(
    title="CMS",
    description="API для управления контентом: блог, вакансии, портфолио, обратная связь",
    version="1.0.0",
    lifespan=lifespan
)

# Cookie сессии требуют явного списка источников
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(blogs_router, prefix=settings.api_prefix)
app.include_router(jobs_router, prefix=settings.api_prefix)
app.include_router(portfolio_router, prefix=settings.api_prefix)
app.include_router(contact_router, prefix=settings.api_prefix)
