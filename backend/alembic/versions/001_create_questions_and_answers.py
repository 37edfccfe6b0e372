"""Create questions and answers tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `questions` and `answers`, with answers referencing questions.
How:   PostgreSQL-generated UUID primary keys (gen_random_uuid(), PostgreSQL 13+)
       and TIMESTAMP WITH TIME ZONE defaults.

The foreign key has no ON DELETE action: a question with answers cannot be
deleted until its answers are.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column(
            "question_uuid",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("question_uuid"),
    )

    op.create_table(
        "answers",
        sa.Column(
            "answer_uuid",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("question_uuid", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("answer_uuid"),
        sa.ForeignKeyConstraint(["question_uuid"], ["questions.question_uuid"]),
    )

    # GET /answers filters on question_uuid
    op.create_index("idx_answers_question_uuid", "answers", ["question_uuid"])


def downgrade() -> None:
    """Drop both tables. Destructive: all data is lost."""
    op.drop_index("idx_answers_question_uuid", table_name="answers")
    op.drop_table("answers")
    op.drop_table("questions")
