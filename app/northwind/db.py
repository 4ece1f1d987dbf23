from __future__ import annotations

import logging
from contextlib import contextmanager
from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.northwind.config import Settings
from app.northwind.models import Base
from app.northwind.modules.customers.repository import CustomerRepository

logger = logging.getLogger(__name__)


def create_db_engine(db_url: str, *, echo: bool = False, debug_checkout: bool = False) -> Engine:
    is_postgres = db_url.startswith("postgres")
    engine_kwargs: dict[str, object] = {
        "future": True,
        "pool_pre_ping": True,
        "echo": echo,
    }
    if is_postgres:
        engine_kwargs.update(
            {
                "pool_recycle": 1800,
                "pool_size": 5,
                "max_overflow": 10,
                "pool_timeout": 30,
            }
        )
    engine = create_engine(db_url, **engine_kwargs)
    if debug_checkout:
        @event.listens_for(engine, "checkout")
        def _receive_checkout(dbapi_connection, connection_record, connection_proxy):  # type: ignore[no-redef]
            logger.debug("DB connection checkout from pool")
    return engine


class NorthwindContext:
    """
    Data context for the Northwind database.

    Owns the engine and sessionmaker. Every unit of work goes through
    `session_scope()`, which commits on success, rolls back on error and
    always closes the session.
    """

    def __init__(self, database_url: str, *, echo: bool = False, debug_checkout: bool = False) -> None:
        self.database_url = database_url
        self.engine = create_db_engine(database_url, echo=echo, debug_checkout=debug_checkout)
        self._sessionmaker = sessionmaker(
            bind=self.engine,
            class_=Session,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )
        logger.info("Northwind context ready (dialect=%s)", self.engine.dialect.name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "NorthwindContext":
        return cls(
            settings.database_url,
            echo=settings.sql_echo,
            debug_checkout=not settings.is_production,
        )

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        s: Session = self._sessionmaker()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    @staticmethod
    def customers(s: Session) -> CustomerRepository:
        return CustomerRepository(s)
