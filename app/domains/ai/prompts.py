"""Prompt builders for the AI planning assistant."""

from models.enums import MessageRole
from models.epic import Epic
from models.message import Message
from models.project import Project
from models.specification import Specification


def _project_header(project: Project) -> str:
    header = f"**Project:** {project.name}\n"
    if project.description:
        header += f"**Description:** {project.description}\n"
    return header


def _format_plan(epics: list[Epic]) -> str:
    """Render the current epic/story/task tree as an indented outline."""
    lines = []
    for epic in epics:
        lines.append(f"- Epic: {epic.title} [{epic.priority.value}, {epic.status.value}]")
        for story in epic.stories or []:
            lines.append(f"  - Story: {story.title} [{story.priority.value}, {story.status.value}]")
            for task in story.tasks or []:
                lines.append(f"    - Task: {task.title} [{task.status.value}]")
    return "\n".join(lines)


def build_chat_prompt(
    project: Project,
    history: list[Message],
    message: str,
    specification: Specification | None = None,
    epics: list[Epic] | None = None,
) -> str:
    """Build the chat prompt: assistant role, project context, history and the new message."""
    prompt = """You are PlanAI, an assistant helping a software team plan a project.

Your capabilities:
1. Discuss the project's goals, scope and requirements
2. Suggest epics, user stories and tasks
3. Help break large features down into deliverable steps
4. Point out risks, open questions and missing requirements

Answer conversationally in plain text or markdown.

"""
    prompt += _project_header(project)

    if epics:
        prompt += f"\n**Current Plan:**\n{_format_plan(epics)}\n"

    if specification:
        prompt += f"\n**Latest Specification (version {specification.version}):**\n{specification.content}\n"

    prompt += "\nConversation:\n"
    for msg in history:
        if msg.role == MessageRole.SYSTEM:
            continue
        prompt += f"{msg.role.value}: {msg.content}\n"

    prompt += f"{MessageRole.USER.value}: {message}\n{MessageRole.ASSISTANT.value}:"
    return prompt


def build_specification_prompt(project: Project, additional_requirements: str | None = None) -> str:
    """Build the prompt asking for a structured specification document."""
    prompt = f"""
Act as a senior business analyst and software architect. Write a software
requirements specification for the following project.

{_project_header(project)}"""

    if additional_requirements:
        prompt += f"**Additional Requirements:** {additional_requirements}\n"

    prompt += """
**Requirements:**
1. Break the product down into functional modules
2. Give every module user stories with testable acceptance criteria
3. Use HIGH, MEDIUM or LOW for priorities
4. Cover performance, security and usability in the non-functional requirements
5. Keep the MVP feature list short and realistic

**Response Format (JSON only, no commentary):**
```json
{
    "projectTitle": "Project title",
    "executiveSummary": "One or two paragraphs",
    "targetAudience": ["Audience"],
    "modules": [
        {
            "name": "Module name",
            "description": "What the module does",
            "priority": "HIGH",
            "userStories": [
                {
                    "id": "US-001",
                    "title": "Story title",
                    "story": "As a <role>, I want <goal> so that <benefit>",
                    "acceptanceCriteria": ["Criterion"],
                    "priority": "HIGH"
                }
            ]
        }
    ],
    "nonFunctionalRequirements": [
        {"category": "Performance", "requirement": "Requirement", "metric": "Measurable target"}
    ],
    "technicalRecommendations": {
        "frontend": ["Technology"],
        "backend": ["Technology"],
        "database": ["Technology"],
        "infrastructure": ["Technology"]
    },
    "projectRisks": [
        {"risk": "Risk", "impact": "HIGH", "mitigation": "Mitigation"}
    ],
    "estimatedComplexity": "MEDIUM",
    "suggestedMvpFeatures": ["Feature"]
}
```
"""
    return prompt


def build_plan_extraction_prompt(project: Project, history: list[Message]) -> str:
    """Build the prompt turning a planning conversation into epics, stories and tasks."""
    prompt = f"""
Read the planning conversation below and turn what was agreed into a concrete
backlog of epics, user stories and tasks.

{_project_header(project)}
Conversation:
"""
    for msg in history:
        prompt += f"{msg.role.value}: {msg.content}\n"

    prompt += """
**Requirements:**
1. Only include work that the conversation asks for or agrees on
2. Write stories in the "as a / I want / so that" form
3. Use HIGH, MEDIUM or LOW for priorities
4. Give tasks a whole number of estimated hours where it is clear
5. Epic titles under 150 characters, story and task titles under 255

**Response Format (JSON only, no commentary):**
```json
{
    "epics": [
        {
            "title": "Epic title",
            "description": "Epic description",
            "priority": "HIGH",
            "stories": [
                {
                    "title": "Story title",
                    "asA": "role",
                    "iWant": "goal",
                    "soThat": "benefit",
                    "priority": "MEDIUM",
                    "tasks": [
                        {"title": "Task title", "description": "Task description", "estimatedHours": 4}
                    ]
                }
            ]
        }
    ]
}
```
"""
    return prompt
