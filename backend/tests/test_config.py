"""
QnA Backend — Settings Unit Tests
===================================

What we test:
    ✅ DATABASE_URL is required
    ✅ Driver-less PostgreSQL URLs are rewritten to asyncpg
    ✅ Pool size and CORS defaults
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:

    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "url",
        ["postgres://u:p@db:5432/qna", "postgresql://u:p@db:5432/qna"],
    )
    def test_rewrites_to_asyncpg(self, monkeypatch, url):
        monkeypatch.setenv("DATABASE_URL", url)

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/qna"

    def test_keeps_explicit_driver(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/qna")

        assert Settings(_env_file=None).database_url == "postgresql+asyncpg://u:p@db/qna"

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/qna")
        monkeypatch.delenv("DB_MAX_CONNECTIONS", raising=False)
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.db_max_connections == 5
        assert settings.cors_origins_list == ["*"]

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/qna")
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
