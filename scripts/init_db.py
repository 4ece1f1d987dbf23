#!/usr/bin/env python
"""
Create the Northwind schema and optionally seed sample customers.

Usage:
    python scripts/init_db.py            # create tables only
    python scripts/init_db.py --seed     # create tables + sample customers (idempotent)

Environment:
    DATABASE_URL: SQLAlchemy URL (defaults to sqlite:///northwind.db)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running as a script (Windows-friendly).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.northwind.config import load_settings
from app.northwind.db import NorthwindContext
from app.northwind.modules.customers.models import Customer

logger = logging.getLogger("northwind.init_db")

SAMPLE_CUSTOMERS: list[dict[str, str | None]] = [
    {
        "customer_id": "ALFKI",
        "company_name": "Alfreds Futterkiste",
        "contact_name": "Maria Anders",
        "contact_title": "Sales Representative",
        "address": "Obere Str. 57",
        "city": "Berlin",
        "postal_code": "12209",
        "country": "Germany",
        "phone": "030-0074321",
        "fax": "030-0076545",
    },
    {
        "customer_id": "ANATR",
        "company_name": "Ana Trujillo Emparedados y helados",
        "contact_name": "Ana Trujillo",
        "contact_title": "Owner",
        "address": "Avda. de la Constitución 2222",
        "city": "México D.F.",
        "postal_code": "05021",
        "country": "Mexico",
        "phone": "(5) 555-4729",
        "fax": "(5) 555-3745",
    },
    {
        "customer_id": "AROUT",
        "company_name": "Around the Horn",
        "contact_name": "Thomas Hardy",
        "contact_title": "Sales Representative",
        "address": "120 Hanover Sq.",
        "city": "London",
        "postal_code": "WA1 1DP",
        "country": "UK",
        "phone": "(171) 555-7788",
        "fax": "(171) 555-6750",
    },
]


def seed_customers(context: NorthwindContext) -> int:
    """
    Insert the sample customers that are not already present.
    Does NOT overwrite existing rows. Returns the number inserted.
    """
    inserted = 0
    with context.session_scope() as s:
        customers = context.customers(s)
        for row in SAMPLE_CUSTOMERS:
            if customers.exists(row["customer_id"]):
                continue
            customers.add(Customer(**row))
            inserted += 1
    return inserted


def init_db(*, database_url: str | None = None, seed: bool = False) -> NorthwindContext:
    settings = load_settings()
    context = NorthwindContext(database_url or settings.database_url, echo=settings.sql_echo)
    context.create_all()
    logger.info("Schema created")
    if seed:
        n = seed_customers(context)
        logger.info("Seeded %s sample customers", n)
    return context


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the Northwind database")
    parser.add_argument("--seed", action="store_true", help="Insert sample customers")
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    context = init_db(database_url=args.database_url, seed=args.seed)
    context.dispose()


if __name__ == "__main__":
    main()
