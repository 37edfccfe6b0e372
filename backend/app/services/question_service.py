"""
QnA Backend — Question Service (Business Logic)
=================================================

What:  One method per question operation, delegating to a QuestionsDao.
How:   Pass-through with error re-typing at the layer boundary:
           InvalidIdentifierError → BadRequestError (message kept)
           StorageError           → InternalError   (generic message)
Who:   Called by the question route handlers with the injected DAO.

Design Decision:
    QuestionService is stateless. The DAO arrives as an argument on every
    call, so any QuestionsDao implementation can be used without patching.
    No business rules exist beyond delegation (no duplicate detection,
    no field validation).
"""

import logging
from typing import List

from app.exceptions import (
    BadRequestError,
    InternalError,
    InvalidIdentifierError,
    StorageError,
)
from app.persistence.questions_dao import QuestionsDao
from app.schemas.question import Question, QuestionDetail

logger = logging.getLogger(__name__)


class QuestionService:
    """
    Business logic layer for question operations.

    Responsibilities:
        - create_question(): store a new question
        - get_questions(): list all questions
        - delete_question(): remove a question by identifier
    """

    async def create_question(self, dao: QuestionsDao, question: Question) -> QuestionDetail:
        """
        Raises:
            InternalError: the insert failed.
        """
        try:
            return await dao.create_question(question)
        except StorageError as exc:
            logger.error("create_question failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc

    async def get_questions(self, dao: QuestionsDao) -> List[QuestionDetail]:
        """
        Raises:
            InternalError: the query failed.
        """
        try:
            return await dao.get_questions()
        except StorageError as exc:
            logger.error("get_questions failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc

    async def delete_question(self, dao: QuestionsDao, question_uuid: str) -> None:
        """
        Raises:
            BadRequestError: question_uuid is not a UUID.
            InternalError: the delete failed.
        """
        try:
            await dao.delete_question(question_uuid)
        except InvalidIdentifierError as exc:
            raise BadRequestError(message=exc.message, context=exc.context) from exc
        except StorageError as exc:
            logger.error("delete_question failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc


# Stateless, so one shared instance serves every request
question_service = QuestionService()
