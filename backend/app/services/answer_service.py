"""
QnA Backend — Answer Service (Business Logic)
===============================================

What:  One method per answer operation, delegating to an AnswersDao.
How:   Same error re-typing as QuestionService. An answer pointing at an
       unknown question is an InvalidIdentifierError at the storage layer and
       therefore a BadRequestError here.
"""

import logging
from typing import List

from app.exceptions import (
    BadRequestError,
    InternalError,
    InvalidIdentifierError,
    StorageError,
)
from app.persistence.answers_dao import AnswersDao
from app.schemas.answer import Answer, AnswerDetail

logger = logging.getLogger(__name__)


class AnswerService:
    """Business logic layer for answer operations."""

    async def create_answer(self, dao: AnswersDao, answer: Answer) -> AnswerDetail:
        try:
            return await dao.create_answer(answer)
        except InvalidIdentifierError as exc:
            raise BadRequestError(message=exc.message, context=exc.context) from exc
        except StorageError as exc:
            logger.error("create_answer failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc

    async def get_answers(self, dao: AnswersDao, question_uuid: str) -> List[AnswerDetail]:
        try:
            return await dao.get_answers(question_uuid)
        except InvalidIdentifierError as exc:
            raise BadRequestError(message=exc.message, context=exc.context) from exc
        except StorageError as exc:
            logger.error("get_answers failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc

    async def delete_answer(self, dao: AnswersDao, answer_uuid: str) -> None:
        try:
            await dao.delete_answer(answer_uuid)
        except InvalidIdentifierError as exc:
            raise BadRequestError(message=exc.message, context=exc.context) from exc
        except StorageError as exc:
            logger.error("delete_answer failed: %s | Context: %s", exc.message, exc.context, exc_info=True)
            raise InternalError(context=exc.context) from exc


answer_service = AnswerService()
