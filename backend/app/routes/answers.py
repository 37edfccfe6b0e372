"""
QnA Backend — Answer Route Handlers
=====================================

What:  POST /answer, GET /answers, DELETE /answer.

GET /answers takes its question identifier from a JSON body rather than the
query string. Clients must send the body with the GET request, e.g.
`httpx.request("GET", "/answers", json={"question_uuid": ...})`.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.dependencies import get_answers_dao
from app.persistence.answers_dao import AnswersDao
from app.schemas.answer import Answer, AnswerDetail, AnswerId
from app.schemas.common import ErrorResponse
from app.schemas.question import QuestionId
from app.services.answer_service import answer_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Answers"])


@router.post(
    "/answer",
    response_model=AnswerDetail,
    responses={
        400: {"description": "Malformed or unknown question_uuid", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Answer a question",
)
async def create_answer(
    answer: Answer,
    dao: AnswersDao = Depends(get_answers_dao),
) -> AnswerDetail:
    return await answer_service.create_answer(dao, answer)


@router.get(
    "/answers",
    response_model=List[AnswerDetail],
    responses={
        400: {"description": "Malformed question_uuid", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List the answers of a question",
)
async def read_answers(
    question_id: QuestionId,
    dao: AnswersDao = Depends(get_answers_dao),
) -> List[AnswerDetail]:
    return await answer_service.get_answers(dao, question_id.question_uuid)


@router.delete(
    "/answer",
    responses={
        200: {"description": "Answer deleted (or did not exist)"},
        400: {"description": "Malformed answer_uuid", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete an answer",
)
async def delete_answer(
    answer_id: AnswerId,
    dao: AnswersDao = Depends(get_answers_dao),
) -> Response:
    await answer_service.delete_answer(dao, answer_id.answer_uuid)
    return Response(status_code=200)
