"""create Customers table

Revision ID: 4a1c7e2d9b30
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "4a1c7e2d9b30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    insp = inspect(op.get_bind())
    if "Customers" in set(insp.get_table_names()):
        return

    op.create_table(
        "Customers",
        sa.Column("CustomerID", sa.String(5), primary_key=True, nullable=False),
        sa.Column("CompanyName", sa.String(40), nullable=False),
        sa.Column("ContactName", sa.String(30), nullable=True),
        sa.Column("ContactTitle", sa.String(30), nullable=True),
        sa.Column("Address", sa.String(60), nullable=True),
        sa.Column("City", sa.String(15), nullable=True),
        sa.Column("Region", sa.String(15), nullable=True),
        sa.Column("PostalCode", sa.String(10), nullable=True),
        sa.Column("Country", sa.String(15), nullable=True),
        sa.Column("Phone", sa.String(24), nullable=True),
        sa.Column("Fax", sa.String(24), nullable=True),
    )
    op.create_index("idx_customers_city", "Customers", ["City"])
    op.create_index("idx_customers_company_name", "Customers", ["CompanyName"])
    op.create_index("idx_customers_postal_code", "Customers", ["PostalCode"])
    op.create_index("idx_customers_region", "Customers", ["Region"])


def downgrade() -> None:
    op.drop_index("idx_customers_region", table_name="Customers")
    op.drop_index("idx_customers_postal_code", table_name="Customers")
    op.drop_index("idx_customers_company_name", table_name="Customers")
    op.drop_index("idx_customers_city", table_name="Customers")
    op.drop_table("Customers")
