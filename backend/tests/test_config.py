"""Settings — env-driven configuration normalization."""

import pytest

from taskhub.config import Settings


def test_plain_postgres_url_gets_async_driver():
    s = Settings(database_url="postgresql://u:p@host:5432/db")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_async_url_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"


@pytest.mark.parametrize("raw,expected", [
    ("", ""),
    ("/", ""),
    ("api", "/api"),
    ("/api/", "/api"),
    ("api/v1/", "/api/v1"),
])
def test_api_prefix_normalized(raw, expected):
    assert Settings(api_prefix=raw).api_prefix == expected


def test_auth_defaults():
    s = Settings()
    assert s.api_key_header == "X-API-Key"
    assert s.api_key_max_length == 256
