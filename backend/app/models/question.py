"""
QnA Backend — Question SQLAlchemy Model
=========================================

What:  ORM model representing the `questions` table in PostgreSQL.
Who:   Used by PostgresQuestionsDao and by Alembic for schema management.

Table Design:
    - question_uuid: generated by PostgreSQL (gen_random_uuid())
    - title / description: free text, no length limit
    - created_at: set by PostgreSQL on insert, UTC with time zone
    Rows are immutable after insert; they are only ever deleted.
"""

import uuid
from datetime import datetime

from sqlalchemy import Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Question(Base):
    """A question posted to the board."""

    __tablename__ = "questions"

    question_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Question(question_uuid={self.question_uuid}, title='{self.title}')>"
