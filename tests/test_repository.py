"""Tests for CustomerRepository and the NorthwindContext session scope."""
import pytest
from sqlalchemy.exc import IntegrityError

from app.northwind.modules.customers.models import Customer
from app.northwind.modules.customers.repository import CustomerRepository


def _add(context, customer_id, **fields):
    fields.setdefault("company_name", "Company")
    with context.session_scope() as s:
        context.customers(s).add(Customer(customer_id=customer_id, **fields))


def test_context_hands_out_repository(context):
    with context.session_scope() as s:
        assert isinstance(context.customers(s), CustomerRepository)


def test_add_is_visible_in_same_session(context):
    with context.session_scope() as s:
        customers = context.customers(s)
        customers.add(Customer(customer_id="ALFKI", company_name="Alfreds Futterkiste"))
        assert customers.count() == 1
        assert customers.exists("ALFKI")


def test_filter_by_column(context):
    _add(context, "AAAAA", city="London")
    _add(context, "BBBBB", city="Berlin")
    _add(context, "CCCCC", city="London")
    with context.session_scope() as s:
        london = context.customers(s).filter(city="London")
    assert [c.customer_id for c in london] == ["AAAAA", "CCCCC"]


def test_remove_by_id(context):
    _add(context, "AAAAA")
    with context.session_scope() as s:
        assert context.customers(s).remove_by_id("AAAAA") is True
        assert context.customers(s).remove_by_id("AAAAA") is False
    with context.session_scope() as s:
        assert context.customers(s).count() == 0


def test_remove_range_returns_number_removed(context):
    for cid in ("AAAAA", "BBBBB", "CCCCC"):
        _add(context, cid, city="Paris")
    with context.session_scope() as s:
        customers = context.customers(s)
        assert customers.remove_range(customers.filter(city="Paris")) == 3
        assert customers.count() == 0


def test_remove_single(context):
    _add(context, "AAAAA")
    with context.session_scope() as s:
        customers = context.customers(s)
        customers.remove(customers.get("AAAAA"))
        assert customers.get("AAAAA") is None


def test_session_scope_rolls_back_on_error(context):
    with pytest.raises(RuntimeError):
        with context.session_scope() as s:
            context.customers(s).add(Customer(customer_id="AAAAA", company_name="Company"))
            raise RuntimeError("boom")
    with context.session_scope() as s:
        assert context.customers(s).count() == 0


def test_store_rejects_duplicate_key(context):
    _add(context, "AAAAA")
    with pytest.raises(IntegrityError):
        _add(context, "AAAAA")


def test_company_name_is_required(context):
    with pytest.raises(IntegrityError):
        with context.session_scope() as s:
            context.customers(s).add(Customer(customer_id="AAAAA", company_name=None))


def test_drop_all_removes_table(context):
    _add(context, "AAAAA")
    context.drop_all()
    context.create_all()
    with context.session_scope() as s:
        assert context.customers(s).count() == 0
