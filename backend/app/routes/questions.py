"""
QnA Backend — Question Route Handlers
=======================================

What:  POST /question, GET /questions, DELETE /question.
How:   Unwrap the request body, call QuestionService with the injected DAO,
       return the result. Errors raised by the service are turned into
       400/500 responses by the global handlers in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.dependencies import get_questions_dao
from app.persistence.questions_dao import QuestionsDao
from app.schemas.common import ErrorResponse
from app.schemas.question import Question, QuestionDetail, QuestionId
from app.services.question_service import question_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Questions"])


@router.post(
    "/question",
    response_model=QuestionDetail,
    responses={
        400: {"description": "Invalid request", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a question",
)
async def create_question(
    question: Question,
    dao: QuestionsDao = Depends(get_questions_dao),
) -> QuestionDetail:
    return await question_service.create_question(dao, question)


@router.get(
    "/questions",
    response_model=List[QuestionDetail],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all questions",
)
async def read_questions(
    dao: QuestionsDao = Depends(get_questions_dao),
) -> List[QuestionDetail]:
    return await question_service.get_questions(dao)


@router.delete(
    "/question",
    responses={
        200: {"description": "Question deleted (or did not exist)"},
        400: {"description": "Malformed question_uuid", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a question",
)
async def delete_question(
    question_id: QuestionId,
    dao: QuestionsDao = Depends(get_questions_dao),
) -> Response:
    """
    Delete a question by the `question_uuid` in the JSON body.

    Returns an empty 200 response whether or not the question existed.
    """
    await question_service.delete_question(dao, question_id.question_uuid)
    return Response(status_code=200)
