"""
QnA Backend — Questions Data-Access Object
============================================

What:  Capability interface for question storage and its PostgreSQL implementation.
Who:   Constructed once by the composition root; called by QuestionService.
When:  For every question create, delete and list request.

Design Decision:
    QuestionsDao is an abstract base class so the service layer depends on
    behavior, not on PostgreSQL. Tests inject an in-memory implementation.

SQL issued (one statement per call):
    create:  INSERT INTO questions (title, description) VALUES (...) RETURNING *
    delete:  DELETE FROM questions WHERE question_uuid = :uuid
    list:    SELECT * FROM questions ORDER BY created_at
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions import StorageError
from app.models.question import Question as QuestionRow
from app.persistence.identifiers import parse_uuid
from app.schemas.question import Question, QuestionDetail

logger = logging.getLogger(__name__)


class QuestionsDao(ABC):
    """
    Abstract interface for question storage.

    Contract:
        - create_question() lets storage generate the identifier and timestamp
        - delete_question() rejects malformed UUIDs and is idempotent
        - get_questions() returns every stored question
        - Failures surface as InvalidIdentifierError or StorageError only
    """

    @abstractmethod
    async def create_question(self, question: Question) -> QuestionDetail:
        """
        Insert a question and return the stored record.

        Raises:
            StorageError: the insert failed for any reason.
        """
        ...

    @abstractmethod
    async def delete_question(self, question_uuid: str) -> None:
        """
        Delete a question by identifier. Succeeds when no row matches.

        Raises:
            InvalidIdentifierError: question_uuid is not a UUID.
            StorageError: the delete failed.
        """
        ...

    @abstractmethod
    async def get_questions(self) -> List[QuestionDetail]:
        """
        Return all stored questions.

        Raises:
            StorageError: the query failed.
        """
        ...


def to_question_detail(row: QuestionRow) -> QuestionDetail:
    """Convert a `questions` row into its wire representation."""
    return QuestionDetail(
        question_uuid=str(row.question_uuid),
        title=row.title,
        description=row.description,
        created_at=row.created_at.isoformat(),
    )


class PostgresQuestionsDao(QuestionsDao):
    """
    QuestionsDao backed by PostgreSQL through async SQLAlchemy.

    Holds only the session factory. Every call checks a connection out of the
    shared pool for the duration of one statement.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create_question(self, question: Question) -> QuestionDetail:
        stmt = (
            insert(QuestionRow)
            .values(title=question.title, description=question.description)
            .returning(QuestionRow)
        )
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(stmt)
                row = result.scalar_one()
                detail = to_question_detail(row)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={"operation": "create_question", "error_type": type(exc).__name__},
            ) from exc

        logger.info("Question created: %s", detail.question_uuid)
        return detail

    async def delete_question(self, question_uuid: str) -> None:
        uuid = parse_uuid(question_uuid)

        stmt = (
            delete(QuestionRow)
            .where(QuestionRow.question_uuid == uuid)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory.begin() as session:
                await session.execute(stmt)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={
                    "operation": "delete_question",
                    "question_uuid": question_uuid,
                    "error_type": type(exc).__name__,
                },
            ) from exc

        logger.info("Question deleted: %s", uuid)

    async def get_questions(self) -> List[QuestionDetail]:
        stmt = select(QuestionRow).order_by(QuestionRow.created_at)
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(stmt)
                return [to_question_detail(row) for row in result.scalars().all()]
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={"operation": "get_questions", "error_type": type(exc).__name__},
            ) from exc
