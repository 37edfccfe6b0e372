"""
QnA Backend — Answers Data-Access Object
==========================================

What:  Capability interface for answer storage and its PostgreSQL implementation.
Who:   Constructed once by the composition root; called by AnswerService.

SQL issued (one statement per call):
    create:  INSERT INTO answers (question_uuid, content) VALUES (...) RETURNING *
    delete:  DELETE FROM answers WHERE answer_uuid = :uuid
    list:    SELECT * FROM answers WHERE question_uuid = :uuid ORDER BY created_at

Error mapping on create:
    malformed question_uuid            → InvalidIdentifierError (no statement issued)
    SQLSTATE 23503 (question missing)  → InvalidIdentifierError("Invalid uuid <id>")
    anything else                      → StorageError
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions import InvalidIdentifierError, StorageError
from app.models.answer import Answer as AnswerRow
from app.persistence.identifiers import FOREIGN_KEY_VIOLATION, parse_uuid, sqlstate_of
from app.schemas.answer import Answer, AnswerDetail

logger = logging.getLogger(__name__)


class AnswersDao(ABC):
    """
    Abstract interface for answer storage.

    Contract:
        - create_answer() requires question_uuid to name an existing question
        - delete_answer() is idempotent
        - get_answers() returns exactly the answers of one question
        - Failures surface as InvalidIdentifierError or StorageError only
    """

    @abstractmethod
    async def create_answer(self, answer: Answer) -> AnswerDetail:
        """
        Insert an answer and return the stored record.

        Raises:
            InvalidIdentifierError: question_uuid is malformed or unknown.
            StorageError: the insert failed for any other reason.
        """
        ...

    @abstractmethod
    async def delete_answer(self, answer_uuid: str) -> None:
        """
        Delete an answer by identifier. Succeeds when no row matches.

        Raises:
            InvalidIdentifierError: answer_uuid is not a UUID.
            StorageError: the delete failed.
        """
        ...

    @abstractmethod
    async def get_answers(self, question_uuid: str) -> List[AnswerDetail]:
        """
        Return every answer whose question_uuid matches.

        Raises:
            InvalidIdentifierError: question_uuid is not a UUID.
            StorageError: the query failed.
        """
        ...


def to_answer_detail(row: AnswerRow) -> AnswerDetail:
    """Convert an `answers` row into its wire representation."""
    return AnswerDetail(
        answer_uuid=str(row.answer_uuid),
        question_uuid=str(row.question_uuid),
        content=row.content,
        created_at=row.created_at.isoformat(),
    )


class PostgresAnswersDao(AnswersDao):
    """AnswersDao backed by PostgreSQL through async SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create_answer(self, answer: Answer) -> AnswerDetail:
        question_uuid = parse_uuid(answer.question_uuid)

        stmt = (
            insert(AnswerRow)
            .values(question_uuid=question_uuid, content=answer.content)
            .returning(AnswerRow)
        )
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(stmt)
                row = result.scalar_one()
                detail = to_answer_detail(row)
        except IntegrityError as exc:
            if sqlstate_of(exc) == FOREIGN_KEY_VIOLATION:
                raise InvalidIdentifierError(
                    message=f"Invalid uuid {answer.question_uuid}",
                    identifier=answer.question_uuid,
                ) from exc
            raise StorageError(
                context={"operation": "create_answer", "error_type": type(exc).__name__},
            ) from exc
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={"operation": "create_answer", "error_type": type(exc).__name__},
            ) from exc

        logger.info("Answer %s created for question %s", detail.answer_uuid, detail.question_uuid)
        return detail

    async def delete_answer(self, answer_uuid: str) -> None:
        uuid = parse_uuid(answer_uuid)

        stmt = (
            delete(AnswerRow)
            .where(AnswerRow.answer_uuid == uuid)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory.begin() as session:
                await session.execute(stmt)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={
                    "operation": "delete_answer",
                    "answer_uuid": answer_uuid,
                    "error_type": type(exc).__name__,
                },
            ) from exc

        logger.info("Answer deleted: %s", uuid)

    async def get_answers(self, question_uuid: str) -> List[AnswerDetail]:
        uuid = parse_uuid(question_uuid)

        stmt = (
            select(AnswerRow)
            .where(AnswerRow.question_uuid == uuid)
            .order_by(AnswerRow.created_at)
        )
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(stmt)
                return [to_answer_detail(row) for row in result.scalars().all()]
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(
                context={
                    "operation": "get_answers",
                    "question_uuid": question_uuid,
                    "error_type": type(exc).__name__,
                },
            ) from exc
