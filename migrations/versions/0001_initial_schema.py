"""Initial planning schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

priority_enum = postgresql.ENUM('HIGH', 'MEDIUM', 'LOW', name='priority', create_type=False)
work_status_enum = postgresql.ENUM('TODO', 'IN_PROGRESS', 'DONE', name='work_status', create_type=False)
document_status_enum = postgresql.ENUM('DRAFT', 'PUBLISHED', 'ARCHIVED', name='document_status', create_type=False)
message_role_enum = postgresql.ENUM('USER', 'ASSISTANT', 'SYSTEM', name='message_role', create_type=False)

ENUMS = (priority_enum, work_status_enum, document_status_enum, message_role_enum)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)

    # Create projects table
    op.create_table(
        'projects',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_projects_name'),
    )

    # Create epics table
    op.create_table(
        'epics',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=150), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('priority', priority_enum, nullable=False),
        sa.Column('status', work_status_enum, nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_epics_project_id', 'epics', ['project_id'])

    # Create user_stories table
    op.create_table(
        'user_stories',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('epic_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('as_a', sa.String(length=500), nullable=True),
        sa.Column('i_want', sa.String(length=500), nullable=True),
        sa.Column('so_that', sa.String(length=500), nullable=True),
        sa.Column('priority', priority_enum, nullable=False),
        sa.Column('status', work_status_enum, nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['epic_id'], ['epics.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_stories_epic_id', 'user_stories', ['epic_id'])

    # Create tasks table
    op.create_table(
        'tasks',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('story_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=2000), nullable=True),
        sa.Column('status', work_status_enum, nullable=False),
        sa.Column('estimated_hours', sa.Integer(), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['story_id'], ['user_stories.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tasks_story_id', 'tasks', ['story_id'])

    # Create conversations table
    op.create_table(
        'conversations',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_conversations_project_id', 'conversations', ['project_id'])

    # Create messages table
    op.create_table(
        'messages',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('conversation_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('role', message_role_enum, nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['conversation_id'], ['conversations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_messages_conversation_id', 'messages', ['conversation_id'])

    # Create specifications table
    op.create_table(
        'specifications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('status', document_status_enum, nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_specifications_project_id', 'specifications', ['project_id'])


def downgrade() -> None:
    op.drop_index('ix_specifications_project_id', table_name='specifications')
    op.drop_table('specifications')
    op.drop_index('ix_messages_conversation_id', table_name='messages')
    op.drop_table('messages')
    op.drop_index('ix_conversations_project_id', table_name='conversations')
    op.drop_table('conversations')
    op.drop_index('ix_tasks_story_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('ix_user_stories_epic_id', table_name='user_stories')
    op.drop_table('user_stories')
    op.drop_index('ix_epics_project_id', table_name='epics')
    op.drop_table('epics')
    op.drop_table('projects')

    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)
