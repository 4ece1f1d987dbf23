from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.northwind.modules.customers.models import Customer

CUSTOMER_ID_MAX_LENGTH = 5


def validate_customer_id(customer_id: str) -> str:
    """
    Check a CustomerID before it reaches the store.
    Must be a non-empty string of at most 5 characters. Returned unchanged.
    """
    if not isinstance(customer_id, str) or not customer_id.strip():
        raise ValueError("customer_id is required")
    if len(customer_id) > CUSTOMER_ID_MAX_LENGTH:
        raise ValueError(f"customer_id must be at most {CUSTOMER_ID_MAX_LENGTH} characters: {customer_id!r}")
    return customer_id


def describe_customer(customer: Customer) -> str:
    """One-line `id contact company city` summary."""
    return f"{customer.customer_id} {customer.contact_name} {customer.company_name} {customer.city}"


def require_company_name(company_name: str) -> str:
    if not (company_name or "").strip():
        raise ValueError("company_name is required")
    return company_name
