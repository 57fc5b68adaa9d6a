"""Settings — environment parsing and URL normalization."""

from jeep_sales.config import Settings


def test_postgres_url_is_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/jeep")
    assert Settings().database_url == "postgresql+asyncpg://u:p@db:5432/jeep"


def test_other_urls_are_left_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///x.db")
    assert Settings().database_url == "sqlite+aiosqlite:///x.db"


def test_env_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("log_level", "DEBUG")
    assert Settings().log_level == "DEBUG"
