"""Settings — verifies URL rewriting, prefix normalization and defaults."""

from questlines.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/questlines")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/questlines"


def test_sqlite_url_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert s.database_url == "sqlite+aiosqlite:///./x.db"


def test_api_prefix_normalized():
    assert Settings(api_prefix="api/").api_prefix == "/api"
    assert Settings(api_prefix="/v1/api").api_prefix == "/v1/api"
    assert Settings(api_prefix="/").api_prefix == ""


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    s = Settings(_env_file=None)
    assert s.api_prefix == "/api"
    assert s.port == 8080
    assert s.database_url == "sqlite+aiosqlite:///./questlines.db"
    assert s.auto_create_schema is True
