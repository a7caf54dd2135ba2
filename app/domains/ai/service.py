"""AI orchestration: chat, specification generation and plan extraction."""

import logging
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.core.config import settings
from app.domains.ai import prompts
from app.domains.ai.parsing import parse_json_document
from app.domains.chat import mapper as chat_mapper
from app.domains.epic import mapper as epic_mapper
from app.domains.project.service import ProjectService
from app.domains.specification import mapper as specification_mapper
from app.exceptions.ai import AIConfigurationError, AIGenerationError, AIParsingError
from app.exceptions.base import NotFoundError, ValidationError
from app.schemas.ai import ExtractedPlan, ExtractPlanRequest, GeneratedSpecification, GenerateSpecificationRequest
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.epic import EpicResponse
from app.schemas.specification import SpecificationResponse
from models.conversation import Conversation
from models.enums import DocumentStatus, MessageRole, Status
from models.epic import Epic
from models.message import Message
from models.project import Project
from models.specification import Specification
from models.task import Task
from models.user_story import UserStory

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    async def generate(self, prompt: str) -> str: ...


class AIService:
    """Service class for AI operations backed by a completion client."""

    def __init__(self, db: AsyncSession, client: CompletionClient):
        """Initialize AI service.

        Args:
            db: Async database session for data operations.
            client: Completion client; one ``generate`` call is one attempt.
        """
        self.db = db
        self.client = client

    async def chat(self, project_id: UUID, request: ChatRequest) -> ChatResponse:
        """Send a message about a project and persist the exchange.

        The conversation is created on the first message. Nothing is written
        until the model has replied; the user and assistant messages are then
        committed together.
        """
        project = await ProjectService(self.db).get_project_or_raise(project_id)

        conversation = None
        history: list[Message] = []
        if request.conversation_id:
            conversation = await self._get_conversation_or_raise(project.id, request.conversation_id)
            history = await self._get_recent_messages(conversation.id, settings.ai_history_limit)

        specification = await self._get_latest_specification(project.id)
        epics = await self._get_plan(project.id)

        prompt = prompts.build_chat_prompt(project, history, request.message, specification, epics)
        reply = await self._generate_with_retry(prompt)

        try:
            if conversation is None:
                conversation = Conversation(project_id=project.id)
                self.db.add(conversation)
                await self.db.flush()

            user_message = Message(conversation_id=conversation.id, role=MessageRole.USER, content=request.message)
            self.db.add(user_message)
            await self.db.flush()

            assistant_message = Message(conversation_id=conversation.id, role=MessageRole.ASSISTANT, content=reply)
            self.db.add(assistant_message)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Chat exchange stored in conversation {conversation.id} of project {project.id}")
        return ChatResponse(
            conversation_id=conversation.id,
            user_message=chat_mapper.to_message_response(user_message),
            assistant_message=chat_mapper.to_message_response(assistant_message),
        )

    async def generate_specification(
        self, project_id: UUID, request: GenerateSpecificationRequest | None = None
    ) -> SpecificationResponse:
        """Generate and store a new version of the project's specification document."""
        project = await ProjectService(self.db).get_project_or_raise(project_id)
        additional_requirements = request.additional_requirements if request else None

        prompt = prompts.build_specification_prompt(project, additional_requirements)
        reply = await self._generate_with_retry(prompt)
        document = self._parse_document(reply, GeneratedSpecification)

        version = await self._count_specifications(project.id) + 1
        title = (document.project_title or "").strip() or project.name
        specification = Specification(
            project_id=project.id,
            title=title[:255],
            content=document.model_dump_json(by_alias=True),
            status=DocumentStatus.DRAFT,
            version=version,
        )

        try:
            self.db.add(specification)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Generated specification v{version} for project {project.id}")
        return specification_mapper.to_response(specification)

    async def extract_plan(self, project_id: UUID, request: ExtractPlanRequest) -> list[EpicResponse]:
        """Turn a conversation into epics, stories and tasks appended to the project's plan."""
        project = await ProjectService(self.db).get_project_or_raise(project_id)
        conversation = await self._get_conversation_or_raise(project.id, request.conversation_id)

        history = await self._get_recent_messages(conversation.id, settings.ai_history_limit)
        if not history:
            raise ValidationError(
                "Conversation has no messages to extract a plan from",
                details={"field": "conversationId"},
            )

        prompt = prompts.build_plan_extraction_prompt(project, history)
        reply = await self._generate_with_retry(prompt)
        plan = self._parse_document(reply, ExtractedPlan)

        next_index = await self._count_epics(project.id)
        epics = [
            self._build_epic(project, extracted, next_index + offset) for offset, extracted in enumerate(plan.epics)
        ]

        try:
            self.db.add_all(epics)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Extracted {len(epics)} epics from conversation {conversation.id} into project {project.id}")
        return [epic_mapper.to_response(epic) for epic in epics]

    async def _generate_with_retry(self, prompt: str) -> str:
        """Call the model, retrying failed attempts with exponential backoff.

        Configuration errors are raised immediately. When every attempt fails
        the last failure is chained to a single ``AIGenerationError``.
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(Exception) & retry_if_not_exception_type(AIConfigurationError),
            stop=stop_after_attempt(settings.ai_max_retry_attempts),
            wait=wait_exponential(
                multiplier=settings.ai_retry_backoff_factor,
                min=settings.ai_retry_min_wait,
                max=settings.ai_retry_max_wait,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

        try:
            async for attempt in retrying:
                with attempt:
                    reply = await self.client.generate(prompt)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            logger.error(
                f"AI generation failed after {settings.ai_max_retry_attempts} attempts: {last_error!r}",
                exc_info=last_error,
            )
            raise AIGenerationError() from last_error

        return reply

    def _parse_document(self, reply: str, schema):
        """Parse a JSON reply and validate it against ``schema``."""
        data = parse_json_document(reply)
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"AI document failed {schema.__name__} validation: {e.errors()}")
            raise AIParsingError() from e

    def _build_epic(self, project: Project, extracted, order_index: int) -> Epic:
        stories = [
            UserStory(
                title=story.title,
                as_a=story.as_a,
                i_want=story.i_want,
                so_that=story.so_that,
                priority=story.priority,
                status=Status.TODO,
                order_index=story_index,
                tasks=[
                    Task(
                        title=task.title,
                        description=task.description,
                        estimated_hours=task.estimated_hours,
                        status=Status.TODO,
                        order_index=task_index,
                    )
                    for task_index, task in enumerate(story.tasks)
                ],
            )
            for story_index, story in enumerate(extracted.stories)
        ]
        return Epic(
            project_id=project.id,
            title=extracted.title,
            description=extracted.description,
            priority=extracted.priority,
            status=Status.TODO,
            order_index=order_index,
            stories=stories,
        )

    # Private query helpers

    async def _get_conversation_or_raise(self, project_id: UUID, conversation_id: UUID) -> Conversation:
        stmt = select(Conversation).where(
            Conversation.id == conversation_id,
            Conversation.project_id == project_id,
        )
        result = await self.db.execute(stmt)
        conversation = result.scalar_one_or_none()
        if not conversation:
            raise NotFoundError("Conversation", conversation_id)
        return conversation

    async def _get_recent_messages(self, conversation_id: UUID, limit: int) -> list[Message]:
        """Return the last ``limit`` messages of a conversation, oldest first."""
        stmt = (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(desc(Message.created_at))
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def _get_latest_specification(self, project_id: UUID) -> Specification | None:
        stmt = (
            select(Specification)
            .where(Specification.project_id == project_id)
            .order_by(desc(Specification.version))
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_plan(self, project_id: UUID) -> list[Epic]:
        stmt = (
            select(Epic)
            .options(selectinload(Epic.stories).selectinload(UserStory.tasks))
            .where(Epic.project_id == project_id)
            .order_by(Epic.order_index, Epic.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _count_specifications(self, project_id: UUID) -> int:
        stmt = select(func.count(Specification.id)).where(Specification.project_id == project_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    async def _count_epics(self, project_id: UUID) -> int:
        stmt = select(func.count(Epic.id)).where(Epic.project_id == project_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
