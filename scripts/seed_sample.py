# scripts/seed_sample.py
"""
Create the "Sample Database" with a customers/orders schema and a few rows.

Usage:
    python3 scripts/seed_sample.py

Does nothing if a database with the sample name already exists.
"""
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy.orm import Session
from database.database import SessionLocal, init_db
from core.repository import DatabaseRepository, TableRepository, TableDataRepository
from models.database import Database, DatabaseType

SAMPLE_NAME = "Sample Database"

SAMPLE_TABLES = [
    {
        "name": "customers",
        "description": "People who place orders",
        "attributes": [
            {"name": "id", "data_type": "INTEGER", "is_nullable": False, "is_primary_key": True},
            {"name": "name", "data_type": "VARCHAR(255)", "is_nullable": False},
            {"name": "email", "data_type": "VARCHAR(255)"},
        ],
        "rows": [
            {"id": 1, "name": "Ada Lovelace", "email": "ada@example.com"},
            {"id": 2, "name": "Alan Turing", "email": None},
        ],
    },
    {
        "name": "orders",
        "description": "Orders placed by customers",
        "attributes": [
            {"name": "id", "data_type": "INTEGER", "is_nullable": False, "is_primary_key": True},
            {"name": "customer_id", "data_type": "INTEGER", "is_nullable": False, "is_foreign_key": True},
            {"name": "total", "data_type": "DECIMAL(10,2)"},
            {"name": "shipped", "data_type": "BOOLEAN"},
        ],
        "rows": [
            {"id": 1, "customer_id": 1, "total": 42.5, "shipped": True},
            {"id": 2, "customer_id": 2, "total": 19.99, "shipped": False},
        ],
    },
]


def seed(db: Session) -> Database:
    databases = DatabaseRepository(db)
    existing = databases.find_one(name=SAMPLE_NAME)
    if existing:
        return existing

    database = databases.create(
        name=SAMPLE_NAME,
        description="Customers and their orders",
        database_type=DatabaseType.postgresql,
    )
    tables = TableRepository(db)
    rows = TableDataRepository(db)
    for table_def in SAMPLE_TABLES:
        table = tables.create_with_attributes(
            database,
            name=table_def["name"],
            description=table_def["description"],
            attributes=table_def["attributes"],
        )
        rows.create_many([{"table_id": table.id, "row_data": row} for row in table_def["rows"]])

    db.refresh(database)
    return database


if __name__ == "__main__":
    init_db()
    db = SessionLocal()
    try:
        database = seed(db)
        print(f"✅ '{database.name}' ready with ID {database.id} ({len(database.tables)} tables)")
    finally:
        db.close()
