# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from edubase.config.settings import settings
from edubase.domain.models import Base

async_engine = create_async_engine(
    settings.database_url,
    echo=settings.sql_echo,
    pool_pre_ping=True,  # Проверяем соединение перед использованием
)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Создаёт все таблицы, описанные моделями, если их ещё нет."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
