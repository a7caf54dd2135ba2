"""
API tests for User Story and Task controllers.
"""

import uuid

import pytest
from fastapi import status
from httpx import AsyncClient

from tests.factories import StoryPayloadFactory, TaskPayloadFactory


class TestStoryController:
    """Test cases for User Story API endpoints."""

    @pytest.mark.asyncio
    async def test_create_story(self, client: AsyncClient, test_epic):
        payload = StoryPayloadFactory(title="Save card")

        response = await client.post(f"/api/v1/epics/{test_epic.id}/stories", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Save card"
        assert data["epicId"] == str(test_epic.id)
        assert data["asA"] == "shopper"
        assert data["iWant"] == "to pay with a saved card"
        assert data["soThat"] == "checkout is faster"
        assert data["tasks"] == []

    @pytest.mark.asyncio
    async def test_create_story_unknown_epic(self, client: AsyncClient):
        response = await client.post(f"/api/v1/epics/{uuid.uuid4()}/stories", json=StoryPayloadFactory())

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_story_narrative_too_long(self, client: AsyncClient, test_epic):
        response = await client.post(
            f"/api/v1/epics/{test_epic.id}/stories", json={"title": "Pay", "soThat": "x" * 501}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["fieldErrors"][0]["field"] == "soThat"

    @pytest.mark.asyncio
    async def test_list_stories(self, client: AsyncClient, test_epic, test_story):
        await client.post(f"/api/v1/epics/{test_epic.id}/stories", json=StoryPayloadFactory(title="Refunds"))

        response = await client.get(f"/api/v1/epics/{test_epic.id}/stories")

        assert response.status_code == status.HTTP_200_OK
        assert [story["title"] for story in response.json()] == ["Pay by card", "Refunds"]
        assert [story["orderIndex"] for story in response.json()] == [0, 1]

    @pytest.mark.asyncio
    async def test_update_story(self, client: AsyncClient, test_story):
        response = await client.put(f"/api/v1/stories/{test_story.id}", json={"priority": "LOW", "soThat": None})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["priority"] == "LOW"
        assert data["soThat"] is None
        assert data["asA"] == "shopper"

    @pytest.mark.asyncio
    async def test_delete_story_removes_tasks(self, client: AsyncClient, test_story, test_task):
        response = await client.delete(f"/api/v1/stories/{test_story.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert (await client.get(f"/api/v1/tasks/{test_task.id}")).status_code == status.HTTP_404_NOT_FOUND


class TestTaskController:
    """Test cases for Task API endpoints."""

    @pytest.mark.asyncio
    async def test_create_task(self, client: AsyncClient, test_story):
        response = await client.post(
            f"/api/v1/stories/{test_story.id}/tasks", json=TaskPayloadFactory(title="Write tests")
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Write tests"
        assert data["storyId"] == str(test_story.id)
        assert data["estimatedHours"] == 3
        assert data["status"] == "TODO"

    @pytest.mark.asyncio
    async def test_create_task_negative_estimate(self, client: AsyncClient, test_story):
        response = await client.post(
            f"/api/v1/stories/{test_story.id}/tasks", json={"title": "Gateway", "estimatedHours": -2}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["fieldErrors"][0]["field"] == "estimatedHours"

    @pytest.mark.asyncio
    async def test_create_task_unknown_story(self, client: AsyncClient):
        response = await client.post(f"/api/v1/stories/{uuid.uuid4()}/tasks", json=TaskPayloadFactory())

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_tasks(self, client: AsyncClient, test_story, test_task):
        response = await client.get(f"/api/v1/stories/{test_story.id}/tasks")

        assert response.status_code == status.HTTP_200_OK
        assert [task["id"] for task in response.json()] == [str(test_task.id)]

    @pytest.mark.asyncio
    async def test_update_task_status(self, client: AsyncClient, test_task):
        response = await client.put(f"/api/v1/tasks/{test_task.id}", json={"status": "DONE"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "DONE"
        assert response.json()["estimatedHours"] == 8

    @pytest.mark.asyncio
    async def test_update_task_invalid_status(self, client: AsyncClient, test_task):
        response = await client.put(f"/api/v1/tasks/{test_task.id}", json={"status": "BLOCKED"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_delete_task(self, client: AsyncClient, test_task):
        response = await client.delete(f"/api/v1/tasks/{test_task.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert (await client.delete(f"/api/v1/tasks/{test_task.id}")).status_code == status.HTTP_404_NOT_FOUND
