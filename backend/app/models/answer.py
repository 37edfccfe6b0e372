"""
QnA Backend — Answer SQLAlchemy Model
=======================================

What:  ORM model representing the `answers` table in PostgreSQL.
Who:   Used by PostgresAnswersDao and by Alembic for schema management.

Referential integrity:
    answers.question_uuid REFERENCES questions(question_uuid) with no ON DELETE
    action. Inserting an answer for a missing question fails with SQLSTATE 23503
    (foreign_key_violation), which the DAO reports as an invalid identifier.
    Deleting a question that still has answers fails the same way and is
    reported as a generic storage error.

Query Patterns:
    - Answers for a question: SELECT ... WHERE question_uuid = :uuid
      → served by idx_answers_question_uuid
"""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Index, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Answer(Base):
    """An answer attached to exactly one question."""

    __tablename__ = "answers"

    answer_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )

    question_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("questions.question_uuid"),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_answers_question_uuid", "question_uuid"),
    )

    def __repr__(self) -> str:
        return (
            f"<Answer(answer_uuid={self.answer_uuid}, "
            f"question_uuid={self.question_uuid})>"
        )
