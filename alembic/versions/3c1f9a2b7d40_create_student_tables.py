"""create students and category entry tables

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 09:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENTRY_TABLES = ('technical_skills', 'certifications', 'career_interests', 'work_experiences')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'students',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('linkedin_url', sa.String(length=512), nullable=True),
        sa.Column('github_url', sa.String(length=512), nullable=True),
        sa.Column('short_bio', sa.Text(), nullable=False),
        sa.Column('resume_url', sa.String(length=512), nullable=False),
        sa.Column('available_for_work', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_students_email'),
    )
    op.create_index(op.f('ix_students_created_at'), 'students', ['created_at'], unique=False)

    for table in ENTRY_TABLES:
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('student_id', sa.String(length=32), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f(f'ix_{table}_student_id'), table, ['student_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in reversed(ENTRY_TABLES):
        op.drop_index(op.f(f'ix_{table}_student_id'), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f('ix_students_created_at'), table_name='students')
    op.drop_table('students')
