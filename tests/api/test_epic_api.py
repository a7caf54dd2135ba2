"""
API tests for Epic controller.
"""

import uuid

import pytest
from fastapi import status
from httpx import AsyncClient

from tests.factories import EpicPayloadFactory


class TestEpicController:
    """Test cases for Epic API endpoints."""

    @pytest.mark.asyncio
    async def test_create_epic(self, client: AsyncClient, test_project):
        response = await client.post(
            f"/api/v1/projects/{test_project.id}/epics",
            json={"title": "Checkout", "description": "Cart to confirmation", "priority": "HIGH"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Checkout"
        assert data["priority"] == "HIGH"
        assert data["status"] == "TODO"
        assert data["projectId"] == str(test_project.id)
        assert data["orderIndex"] == 0
        assert data["stories"] == []

    @pytest.mark.asyncio
    async def test_create_epic_defaults_order_to_end(self, client: AsyncClient, test_epic):
        response = await client.post(
            f"/api/v1/projects/{test_epic.project_id}/epics", json=EpicPayloadFactory()
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["orderIndex"] == 1

    @pytest.mark.asyncio
    async def test_create_epic_unknown_project(self, client: AsyncClient):
        response = await client.post(f"/api/v1/projects/{uuid.uuid4()}/epics", json=EpicPayloadFactory())

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_epic_invalid_priority(self, client: AsyncClient, test_project):
        response = await client.post(
            f"/api/v1/projects/{test_project.id}/epics", json={"title": "Checkout", "priority": "URGENT"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["fieldErrors"][0]["field"] == "priority"

    @pytest.mark.asyncio
    async def test_create_epic_title_too_long(self, client: AsyncClient, test_project):
        response = await client.post(f"/api/v1/projects/{test_project.id}/epics", json={"title": "x" * 151})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["fieldErrors"][0]["field"] == "title"

    @pytest.mark.asyncio
    async def test_list_epics_in_order(self, client: AsyncClient, test_project):
        for title, order in [("Second", 1), ("First", 0)]:
            await client.post(
                f"/api/v1/projects/{test_project.id}/epics", json={"title": title, "orderIndex": order}
            )

        response = await client.get(f"/api/v1/projects/{test_project.id}/epics")

        assert response.status_code == status.HTTP_200_OK
        assert [epic["title"] for epic in response.json()] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_get_epic_with_stories(self, client: AsyncClient, test_epic, test_story):
        response = await client.get(f"/api/v1/epics/{test_epic.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["stories"][0]["title"] == "Pay by card"

    @pytest.mark.asyncio
    async def test_update_epic_status(self, client: AsyncClient, test_epic):
        response = await client.put(f"/api/v1/epics/{test_epic.id}", json={"status": "IN_PROGRESS"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "IN_PROGRESS"
        assert data["title"] == "Checkout"
        assert data["priority"] == "HIGH"

    @pytest.mark.asyncio
    async def test_update_epic_null_title_rejected(self, client: AsyncClient, test_epic):
        response = await client.put(f"/api/v1/epics/{test_epic.id}", json={"title": None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_delete_epic(self, client: AsyncClient, test_epic, test_task):
        response = await client.delete(f"/api/v1/epics/{test_epic.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert (await client.get(f"/api/v1/epics/{test_epic.id}")).status_code == status.HTTP_404_NOT_FOUND
        assert (await client.get(f"/api/v1/tasks/{test_task.id}")).status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_epic_not_found(self, client: AsyncClient):
        response = await client.get(f"/api/v1/epics/{uuid.uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "NOT_FOUND"
