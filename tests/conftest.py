import uuid

import pytest

from app.northwind.config import load_settings
from app.northwind.db import NorthwindContext
from app.northwind.modules.customers.service import CustomerManager


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.delenv("SQL_ECHO", raising=False)
    return load_settings()


@pytest.fixture()
def context(settings):
    ctx = NorthwindContext.from_settings(settings)
    ctx.create_all()
    yield ctx
    ctx.dispose()


@pytest.fixture()
def manager(context):
    return CustomerManager(context)


@pytest.fixture()
def new_customer_id(context):
    """
    Unique 5-character CustomerID for one test.
    Any row left behind under the id is removed on teardown.
    """
    customer_id = "T" + uuid.uuid4().hex[:4].upper()
    yield customer_id
    with context.session_scope() as s:
        context.customers(s).remove_by_id(customer_id)
