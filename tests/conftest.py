# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

# Настройки читаются при импорте пакета, поэтому URL тестовой БД задаём заранее
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.pool import StaticPool

from edubase.clients.database_client import get_db
from edubase.domain.models import Base
from edubase.main import app
from edubase.service.questions import get_question_service
from edubase.service.subjects import get_subject_service

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД со свежей схемой для каждого теста."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite по умолчанию не проверяет внешние ключи
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Создать тестовую сессию БД."""
    session_maker = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        yield session


@pytest.fixture
def question_service(test_session):
    return get_question_service(test_session)


@pytest.fixture
def subject_service(test_session):
    return get_subject_service(test_session)


@pytest.fixture
async def async_client(test_session):
    """Создать асинхронный тестовый клиент для API."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
