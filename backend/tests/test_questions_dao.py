"""
QnA Backend — PostgresQuestionsDao Unit Tests
===============================================

What:  Tests for the PostgreSQL question DAO against a mocked session factory.
How:   No real database; the mock session returns hand-built rows or raises
       SQLAlchemy errors.

What we test:
    ✅ Rows are converted to QuestionDetail
    ✅ Malformed identifiers fail before a session is opened
    ✅ Database failures surface as StorageError, never as raw SQLAlchemy errors
    ✅ Delete does not signal a missing row
"""

import uuid

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import InvalidIdentifierError, StorageError
from app.persistence.questions_dao import PostgresQuestionsDao
from app.schemas.question import Question


class TestCreateQuestion:

    @pytest.mark.asyncio
    async def test_returns_stored_record(self, session_factory, mock_session, make_row):
        question_uuid = uuid.uuid4()
        row = make_row(question_uuid=question_uuid, title="T", description="D")
        mock_session.execute.return_value.scalar_one.return_value = row

        dao = PostgresQuestionsDao(session_factory)
        detail = await dao.create_question(Question(title="T", description="D"))

        assert detail.question_uuid == str(question_uuid)
        assert detail.title == "T"
        assert detail.description == "D"
        assert detail.created_at == "2026-01-15T12:00:00+00:00"
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_database_failure_is_storage_error(self, session_factory, mock_session):
        mock_session.execute.side_effect = OperationalError("INSERT", {}, Exception("down"))

        dao = PostgresQuestionsDao(session_factory)
        with pytest.raises(StorageError) as exc_info:
            await dao.create_question(Question(title="T", description="D"))

        assert not isinstance(exc_info.value, InvalidIdentifierError)
        assert exc_info.value.context["operation"] == "create_question"


class TestDeleteQuestion:

    @pytest.mark.asyncio
    async def test_malformed_uuid_never_reaches_database(self, session_factory, mock_session):
        dao = PostgresQuestionsDao(session_factory)

        with pytest.raises(InvalidIdentifierError):
            await dao.delete_question("definitely-not-a-uuid")

        session_factory.begin.assert_not_called()
        mock_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_row_is_not_an_error(self, session_factory, mock_session):
        mock_session.execute.return_value.rowcount = 0

        dao = PostgresQuestionsDao(session_factory)
        assert await dao.delete_question(str(uuid.uuid4())) is None
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_database_failure_is_storage_error(self, session_factory, mock_session):
        mock_session.execute.side_effect = OperationalError("DELETE", {}, Exception("down"))

        dao = PostgresQuestionsDao(session_factory)
        with pytest.raises(StorageError):
            await dao.delete_question(str(uuid.uuid4()))


class TestGetQuestions:

    @pytest.mark.asyncio
    async def test_empty(self, session_factory, mock_session):
        mock_session.execute.return_value.scalars.return_value.all.return_value = []

        dao = PostgresQuestionsDao(session_factory)
        assert await dao.get_questions() == []

    @pytest.mark.asyncio
    async def test_converts_every_row(self, session_factory, mock_session, make_row):
        rows = [
            make_row(question_uuid=uuid.uuid4(), title=f"Q{i}", description=f"D{i}")
            for i in range(3)
        ]
        mock_session.execute.return_value.scalars.return_value.all.return_value = rows

        dao = PostgresQuestionsDao(session_factory)
        details = await dao.get_questions()

        assert [d.title for d in details] == ["Q0", "Q1", "Q2"]
        assert [d.question_uuid for d in details] == [str(r.question_uuid) for r in rows]

    @pytest.mark.asyncio
    async def test_database_failure_is_storage_error(self, session_factory, mock_session):
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        dao = PostgresQuestionsDao(session_factory)
        with pytest.raises(StorageError):
            await dao.get_questions()
