"""
Unit tests for the entity <-> schema mapping functions.

The mappers are pure, so these tests work on unsaved entities with ids and
timestamps filled in by hand.
"""

import uuid
from datetime import UTC, datetime

from app.domains.chat import mapper as chat_mapper
from app.domains.epic import mapper as epic_mapper
from app.domains.project import mapper as project_mapper
from app.domains.specification import mapper as specification_mapper
from app.domains.story import mapper as story_mapper
from app.domains.task import mapper as task_mapper
from app.schemas.epic import EpicCreate, EpicUpdate
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.schemas.specification import SpecificationUpdate
from app.schemas.task import TaskCreate
from models import (
    Conversation,
    DocumentStatus,
    Epic,
    Message,
    MessageRole,
    Priority,
    Project,
    Specification,
    Status,
    Task,
    UserStory,
)

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def stamp(entity):
    entity.id = uuid.uuid4()
    entity.created_at = NOW
    entity.updated_at = NOW
    return entity


class TestProjectMapper:
    def test_to_entity_copies_fields(self):
        project = project_mapper.to_entity(ProjectCreate(name="Shop", description="An online store"))

        assert isinstance(project, Project)
        assert project.name == "Shop"
        assert project.description == "An online store"

    def test_to_response_with_counts(self):
        project = stamp(Project(name="Shop"))

        result = project_mapper.to_response(project, {"epics": 2, "tasks": 5})

        assert result.epics_count == 2
        assert result.stories_count == 0
        assert result.tasks_count == 5

    def test_detail_response_maps_nested_tree(self):
        project = stamp(Project(name="Shop"))
        epic = stamp(Epic(project_id=project.id, title="Checkout", priority=Priority.HIGH, status=Status.TODO))
        story = stamp(UserStory(epic_id=epic.id, title="Pay", priority=Priority.HIGH, status=Status.TODO))
        task = stamp(Task(story_id=story.id, title="Gateway", status=Status.TODO))
        for entity in (epic, story, task):
            entity.order_index = 0
        story.tasks = [task]
        epic.stories = [story]
        project.epics = [epic]

        result = project_mapper.to_detail_response(project)

        assert result.epics[0].title == "Checkout"
        assert result.epics[0].stories[0].title == "Pay"
        assert result.epics[0].stories[0].tasks[0].title == "Gateway"

    def test_apply_update_only_touches_present_fields(self):
        project = Project(name="Shop", description="Old")

        project_mapper.apply_update(ProjectUpdate(description="New"), project)

        assert project.name == "Shop"
        assert project.description == "New"

    def test_apply_update_with_explicit_null_clears(self):
        project = Project(name="Shop", description="Old")

        project_mapper.apply_update(ProjectUpdate.model_validate({"description": None}), project)

        assert project.description is None


class TestHierarchyMappers:
    def test_new_epic_maps_to_empty_story_list(self):
        epic = epic_mapper.to_entity(EpicCreate(title="Checkout"))
        epic.project_id = uuid.uuid4()
        epic.order_index = 0
        stamp(epic)

        result = epic_mapper.to_response(epic)

        assert result.stories == []
        assert result.priority == Priority.MEDIUM

    def test_epic_apply_update(self):
        epic = Epic(title="Checkout", priority=Priority.LOW, status=Status.TODO, order_index=0)

        epic_mapper.apply_update(EpicUpdate(priority=Priority.HIGH), epic)

        assert epic.priority == Priority.HIGH
        assert epic.title == "Checkout"

    def test_story_response_includes_narrative(self):
        story = stamp(
            UserStory(
                epic_id=uuid.uuid4(),
                title="Pay",
                as_a="shopper",
                i_want="to pay",
                so_that="I get my goods",
                priority=Priority.MEDIUM,
                status=Status.TODO,
                order_index=3,
                tasks=[],
            )
        )

        result = story_mapper.to_response(story)

        assert (result.as_a, result.i_want, result.so_that) == ("shopper", "to pay", "I get my goods")
        assert result.order_index == 3

    def test_task_to_entity_leaves_order_for_service(self):
        task = task_mapper.to_entity(TaskCreate(title="Gateway", estimated_hours=4))

        assert task.order_index is None
        assert task.estimated_hours == 4


class TestChatAndSpecificationMappers:
    def test_conversation_detail_counts_messages(self):
        conversation = stamp(Conversation(project_id=uuid.uuid4()))
        conversation.messages = [
            stamp(Message(conversation_id=conversation.id, role=MessageRole.USER, content="Hi")),
            stamp(Message(conversation_id=conversation.id, role=MessageRole.ASSISTANT, content="Hello")),
        ]

        result = chat_mapper.to_detail_response(conversation)

        assert result.message_count == 2
        assert [message.role for message in result.messages] == [MessageRole.USER, MessageRole.ASSISTANT]

    def test_specification_update_keeps_content(self):
        specification = Specification(title="Spec", content="{}", status=DocumentStatus.DRAFT, version=1)

        specification_mapper.apply_update(SpecificationUpdate(status=DocumentStatus.PUBLISHED), specification)

        assert specification.status == DocumentStatus.PUBLISHED
        assert specification.content == "{}"
        assert specification.title == "Spec"
