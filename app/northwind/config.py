import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    env: str
    database_url: str
    sql_echo: bool

    @property
    def is_production(self) -> bool:
        return self.env in ("prod", "production")


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getflag(name: str) -> bool:
    return _getenv(name).lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv()
    s = Settings(
        env=_getenv("ENV", "development"),
        database_url=_getenv("DATABASE_URL", "sqlite:///northwind.db"),
        sql_echo=_getflag("SQL_ECHO"),
    )

    # Production guardrails (fail fast with clear errors)
    if s.is_production:
        if not _getenv("DATABASE_URL"):
            raise RuntimeError("DATABASE_URL is required in production.")
        if s.database_url.startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must not be sqlite in production.")
    return s
