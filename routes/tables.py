from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from core.repository import DatabaseRepository, TableRepository, clamp_limit
from core.logger import get_logger
from database.database import get_db
from schemas.common import PageMetadata, envelope
from schemas.table import TableCreate, TableUpdate, TableOut

router = APIRouter(prefix="/api/tables", tags=["tables"])
logger = get_logger(__name__)


@router.get("/database/{database_id}")
def list_tables(
    database_id: int,
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    limit = clamp_limit(limit)
    DatabaseRepository(db).get(database_id)
    tables, total = TableRepository(db).list(
        filters={"database_id": database_id}, limit=limit, offset=offset
    )
    return envelope(
        data=[TableOut.model_validate(t) for t in tables],
        metadata=PageMetadata(total=total, limit=limit, offset=offset),
    )


@router.post("/database/{database_id}", status_code=201)
def create_table(database_id: int, body: TableCreate, db: Session = Depends(get_db)):
    """Create a table and its attributes in one transaction."""
    database = DatabaseRepository(db).get(database_id)
    table = TableRepository(db).create_with_attributes(
        database,
        name=body.name,
        description=body.description,
        attributes=[attr.model_dump() for attr in body.attributes],
    )
    logger.info(f"Created table {table.id} '{table.name}' in database {database_id}")
    return envelope(data=TableOut.model_validate(table))


@router.get("/{table_id}")
def get_table(table_id: int, db: Session = Depends(get_db)):
    table = TableRepository(db).get(table_id)
    return envelope(data=TableOut.model_validate(table))


@router.put("/{table_id}")
def update_table(table_id: int, body: TableUpdate, db: Session = Depends(get_db)):
    repo = TableRepository(db)
    table = repo.get(table_id)

    values = body.model_dump(exclude_unset=True, exclude_none=True, exclude={"attributes"})
    attributes = None
    if body.attributes is not None:
        attributes = [attr.model_dump() for attr in body.attributes]

    table = repo.update_with_attributes(table, values, attributes)
    return envelope(data=TableOut.model_validate(table))


@router.delete("/{table_id}")
def delete_table(table_id: int, db: Session = Depends(get_db)):
    repo = TableRepository(db)
    table = repo.get(table_id)
    repo.delete(table)
    logger.info(f"Deleted table {table_id}")
    return envelope(message="Table deleted successfully")
