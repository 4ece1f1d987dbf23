"""
CUSTOMER MANAGER
================

Create / update / delete / retrieve for the Northwind `Customers` table.

Every data call opens its own session through `NorthwindContext.session_scope()`
and closes it before returning, so the manager carries no database state between
calls. The only in-memory state is the selected customer.

Missing rows:
- update()  -> returns False, nothing is inserted
- delete()  -> no-op, returns False
- create()  -> duplicate CustomerID raises DuplicateCustomerError
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from app.northwind.config import load_settings
from app.northwind.db import NorthwindContext
from app.northwind.modules.customers.models import Customer
from app.northwind.modules.customers.utils import require_company_name, validate_customer_id

logger = logging.getLogger(__name__)


class DuplicateCustomerError(ValueError):
    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer {customer_id!r} already exists")
        self.customer_id = customer_id


class CustomerManager:
    def __init__(self, context: NorthwindContext | None = None) -> None:
        self.context = context or NorthwindContext.from_settings(load_settings())
        self.selected_customer: Customer | None = None

    def set_selected_customer(self, customer: Customer | None) -> None:
        self.selected_customer = customer

    def create(
        self,
        customer_id: str,
        contact_name: str | None,
        company_name: str,
        city: str | None,
        postal_code: str | None = None,
    ) -> Customer:
        validate_customer_id(customer_id)
        require_company_name(company_name)
        try:
            with self.context.session_scope() as s:
                customers = self.context.customers(s)
                if customers.exists(customer_id):
                    raise DuplicateCustomerError(customer_id)
                c = customers.add(
                    Customer(
                        customer_id=customer_id,
                        contact_name=contact_name,
                        company_name=company_name,
                        city=city,
                        postal_code=postal_code,
                    )
                )
        except IntegrityError as e:
            # Lost a race with another writer between the check and the insert.
            raise DuplicateCustomerError(customer_id) from e
        logger.info("Created customer %s", customer_id)
        return c

    def update(
        self,
        customer_id: str,
        contact_name: str | None,
        company_name: str,
        city: str | None,
        postal_code: str | None,
    ) -> bool:
        with self.context.session_scope() as s:
            c = self.context.customers(s).get(customer_id)
            if c is None:
                logger.debug("Update skipped; customer %s not found", customer_id)
                return False
            require_company_name(company_name)
            c.contact_name = contact_name
            c.company_name = company_name
            c.city = city
            c.postal_code = postal_code
        logger.info("Updated customer %s", customer_id)
        if self.selected_customer is not None and self.selected_customer.customer_id == customer_id:
            self.selected_customer = c
        return True

    def delete(self, customer_id: str) -> bool:
        with self.context.session_scope() as s:
            removed = self.context.customers(s).remove_by_id(customer_id)
        if removed:
            logger.info("Deleted customer %s", customer_id)
            if self.selected_customer is not None and self.selected_customer.customer_id == customer_id:
                self.selected_customer = None
        else:
            logger.debug("Delete skipped; customer %s not found", customer_id)
        return removed

    def retrieve_customer(self, customer_id: str) -> Customer | None:
        with self.context.session_scope() as s:
            return self.context.customers(s).get(customer_id)

    def retrieve_all_customers(self) -> list[Customer]:
        with self.context.session_scope() as s:
            return self.context.customers(s).all()
