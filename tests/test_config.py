import pytest

from app.northwind.config import load_settings


def test_defaults(monkeypatch):
    for k in ("ENV", "DATABASE_URL", "SQL_ECHO"):
        monkeypatch.delenv(k, raising=False)
    s = load_settings()
    assert s.env == "development"
    assert s.database_url == "sqlite:///northwind.db"
    assert s.sql_echo is False
    assert s.is_production is False


@pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("0", False), ("", False)])
def test_sql_echo_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("SQL_ECHO", raw)
    assert load_settings().sql_echo is expected


def test_production_requires_database_url(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        load_settings()


def test_production_rejects_sqlite(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///northwind.db")
    with pytest.raises(RuntimeError):
        load_settings()


def test_production_accepts_postgres(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/northwind")
    s = load_settings()
    assert s.is_production is True
    assert s.database_url == "postgresql://u:p@db/northwind"
