# Persistence package init
"""
QnA Backend — Storage Access Layer
====================================

What:  Data-access objects (DAOs) mediating between wire records and rows.
How:   Each resource has an abstract capability interface and a PostgreSQL
       implementation built on a shared async_sessionmaker. The composition
       root constructs the implementations; services only see the interface.

DAO Inventory:
    - QuestionsDao (abstract) / PostgresQuestionsDao
    - AnswersDao (abstract) / PostgresAnswersDao

Contract shared by every implementation:
    - Identifiers are parsed as UUIDs before any statement is issued
      (InvalidIdentifierError on failure).
    - Each call issues exactly one statement and is never retried.
    - Deletes are idempotent: a missing row is not an error.
    - Any other database failure surfaces as StorageError.
    - Instances hold no mutable state and are safe to share between requests.
"""

from app.persistence.answers_dao import AnswersDao, PostgresAnswersDao
from app.persistence.questions_dao import PostgresQuestionsDao, QuestionsDao

__all__ = [
    "AnswersDao",
    "PostgresAnswersDao",
    "QuestionsDao",
    "PostgresQuestionsDao",
]
