"""Project entity <-> schema conversions.

Pure functions: nothing here touches the session. Child collections must be
loaded by the caller before a detail response is built.
"""

from app.domains.epic import mapper as epic_mapper
from app.schemas.project import ProjectCreate, ProjectDetailResponse, ProjectResponse, ProjectUpdate
from models.project import Project


def to_entity(request: ProjectCreate) -> Project:
    return Project(name=request.name, description=request.description)


def to_response(project: Project, counts: dict[str, int] | None = None) -> ProjectResponse:
    """Map a project; ``counts`` carries the epics/stories/tasks/conversations totals."""
    counts = counts or {}
    return ProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        created_at=project.created_at,
        updated_at=project.updated_at,
        epics_count=counts.get("epics", 0),
        stories_count=counts.get("stories", 0),
        tasks_count=counts.get("tasks", 0),
        conversations_count=counts.get("conversations", 0),
    )


def to_detail_response(project: Project) -> ProjectDetailResponse:
    return ProjectDetailResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        created_at=project.created_at,
        updated_at=project.updated_at,
        epics=[epic_mapper.to_response(epic) for epic in project.epics or []],
    )


def apply_update(request: ProjectUpdate, project: Project) -> Project:
    """Copy only the fields present in the request onto the project."""
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(project, field, value)
    return project
