# -*- coding: utf-8 -*-
"""
Integration тесты для API дисциплин
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures import create_test_subject


class TestSubjectsAPI:
    """Integration тесты API дисциплин"""

    @pytest.mark.asyncio
    async def test_create_and_get_subject(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/subjects", json={"name": "Algebra", "instructor_id": 7}
        )

        assert response.status_code == 201
        created = response.json()
        assert created["active"] is True

        fetched = await async_client.get(f"/api/v1/subjects/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Algebra"

    @pytest.mark.asyncio
    async def test_create_subject_missing_name_is_rejected(
        self, async_client: AsyncClient
    ):
        response = await async_client.post(
            "/api/v1/subjects", json={"instructor_id": 7}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_rename_subject_conflict(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        await create_test_subject(test_session, name="Algebra")
        other = await create_test_subject(test_session, name="Biology")

        response = await async_client.patch(
            f"/api/v1/subjects/{other.id}", json={"name": "Algebra"}
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_list_subjects(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        await create_test_subject(test_session, name="Algebra")
        await create_test_subject(test_session, name="Biology")

        response = await async_client.get("/api/v1/subjects")

        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Biology", "Algebra"]

    @pytest.mark.asyncio
    async def test_delete_subject_returns_snapshot(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        subject = await create_test_subject(test_session)
        subject_id = subject.id

        response = await async_client.delete(f"/api/v1/subjects/{subject_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Algebra"
        missing = await async_client.get(f"/api/v1/subjects/{subject_id}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.json() == {"status": "ok"}
