from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from app.northwind.modules.customers.models import Customer


class CustomerRepository:
    """
    Accessor for the `Customers` table, bound to one session.

    Shared by CustomerManager and by test setup/verification so that nothing
    else issues raw queries against the table. Writes are flushed, not committed;
    the owning session scope commits.
    """

    def __init__(self, s: Session) -> None:
        self.s = s

    def get(self, customer_id: str) -> Customer | None:
        return self.s.query(Customer).filter(Customer.customer_id == customer_id).one_or_none()

    def filter(self, **criteria: Any) -> list[Customer]:
        return self.s.query(Customer).filter_by(**criteria).order_by(Customer.customer_id).all()

    def all(self) -> list[Customer]:
        return self.s.query(Customer).order_by(Customer.customer_id).all()

    def count(self) -> int:
        return self.s.query(Customer).count()

    def exists(self, customer_id: str) -> bool:
        return self.get(customer_id) is not None

    def add(self, customer: Customer) -> Customer:
        self.s.add(customer)
        self.s.flush()
        return customer

    def remove(self, customer: Customer) -> None:
        self.s.delete(customer)
        self.s.flush()

    def remove_range(self, customers: Iterable[Customer]) -> int:
        n = 0
        for c in customers:
            self.s.delete(c)
            n += 1
        self.s.flush()
        return n

    def remove_by_id(self, customer_id: str) -> bool:
        c = self.get(customer_id)
        if c is None:
            return False
        self.s.delete(c)
        self.s.flush()
        return True
