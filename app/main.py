"""PlanAI API - Main Application Module.

This module initializes the FastAPI application with proper configuration,
middleware, routing, error handling and lifecycle management for the
AI-assisted project planner.
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from http import HTTPStatus
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import EnvironmentEnum, get_config_summary, settings
from app.core.logging import setup_logging
from app.database import AsyncSessionLocal, engine
from app.schemas.error import ErrorResponse, FieldErrorSchema
from models import Base

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifecycle events."""
    logger.info(f"Starting {settings.app_name} v{settings.version} ({settings.environment.value})")

    # Development mode: auto-create tables; other environments run `alembic upgrade head`
    if settings.environment == EnvironmentEnum.development:
        logger.info("Development mode: creating/updating database tables")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="AI-assisted project planning: epics, user stories, tasks and specifications",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    field_errors: list[FieldErrorSchema] | None = None,
) -> JSONResponse:
    """Render the error envelope shared by every failure response."""
    body = ErrorResponse(
        timestamp=datetime.now(UTC),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        field_errors=field_errors or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def field_error_from(error: dict) -> FieldErrorSchema:
    """Turn one pydantic error into a field error named by its dotted location."""
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in REQUEST_LOCATIONS and len(loc) > 1:
        loc = loc[1:]
    message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
    return FieldErrorSchema(field=".".join(loc) or "body", message=message)


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Application exceptions carry a structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
            error_code = exc.detail.get("error_code") or HTTPStatus(exc.status_code).name
        else:
            message = str(exc.detail) if exc.detail else HTTPStatus(exc.status_code).phrase
            error_code = HTTPStatus(exc.status_code).name

        if exc.status_code >= 500:
            logger.error(
                f"{error_code} on {request.method} {request.url.path} "
                f"(request {getattr(request.state, 'request_id', None)})",
                exc_info=exc,
            )
        return error_response(request, exc.status_code, error_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        field_errors = [field_error_from(error) for error in exc.errors()]
        return error_response(request, 400, "VALIDATION_ERROR", "Validation failed", field_errors)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path} "
            f"(request {getattr(request.state, 'request_id', None)})",
            exc_info=exc,
        )
        response = error_response(request, 500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")
        # Rendered outside the request-id middleware, so echo the id here
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.ai.controller import router as ai_router
    from app.domains.chat.controller import router as conversation_router
    from app.domains.epic.controller import router as epic_router
    from app.domains.project.controller import router as project_router
    from app.domains.specification.controller import router as specification_router
    from app.domains.story.controller import router as story_router
    from app.domains.task.controller import router as task_router

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint reporting database reachability."""
        db_status = "healthy"
        try:
            async with AsyncSessionLocal() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"Health check database probe failed: {str(e)}")
            db_status = "unhealthy"

        return {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "timestamp": datetime.now(UTC).isoformat(),
            "services": {
                "database": db_status,
                "ai_service": "configured" if settings.has_ai_enabled else "not_configured",
            },
            **get_config_summary(),
        }

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "description": "AI-assisted project planning",
            "docs_url": "/docs" if settings.is_development else None,
        }

    # Include domain routers
    app.include_router(project_router)
    app.include_router(epic_router)
    app.include_router(story_router)
    app.include_router(task_router)
    app.include_router(conversation_router)
    app.include_router(specification_router)
    app.include_router(ai_router)


# Create the application instance
app = create_app()


def main():
    """Entry point for running the application directly."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
