"""
QnA Backend — Request Dependencies
====================================

What:  FastAPI dependencies that hand the shared DAOs and engine to handlers.
How:   The lifespan in app.main stores the instances on `app.state`; these
       functions read them back for each request. Tests swap them out via
       `app.dependency_overrides`.
"""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from app.persistence.answers_dao import AnswersDao
from app.persistence.questions_dao import QuestionsDao


def get_questions_dao(request: Request) -> QuestionsDao:
    return request.app.state.questions_dao


def get_answers_dao(request: Request) -> AnswersDao:
    return request.app.state.answers_dao


def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine
