from __future__ import annotations

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.northwind.models import Base


class Customer(Base):
    """
    Row of the Northwind `Customers` table.
    Column names keep the Northwind casing; attributes are snake_case.
    """
    __tablename__ = "Customers"
    __table_args__ = (
        Index("idx_customers_city", "City"),
        Index("idx_customers_company_name", "CompanyName"),
        Index("idx_customers_postal_code", "PostalCode"),
        Index("idx_customers_region", "Region"),
    )

    customer_id: Mapped[str] = mapped_column("CustomerID", String(5), primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)

    contact_name: Mapped[str | None] = mapped_column("ContactName", String(30), nullable=True)
    contact_title: Mapped[str | None] = mapped_column("ContactTitle", String(30), nullable=True)

    address: Mapped[str | None] = mapped_column("Address", String(60), nullable=True)
    city: Mapped[str | None] = mapped_column("City", String(15), nullable=True)
    region: Mapped[str | None] = mapped_column("Region", String(15), nullable=True)
    postal_code: Mapped[str | None] = mapped_column("PostalCode", String(10), nullable=True)
    country: Mapped[str | None] = mapped_column("Country", String(15), nullable=True)

    phone: Mapped[str | None] = mapped_column("Phone", String(24), nullable=True)
    fax: Mapped[str | None] = mapped_column("Fax", String(24), nullable=True)

    def __repr__(self) -> str:
        return f"<Customer {self.customer_id} {self.company_name!r}>"
