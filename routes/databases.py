from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from core.repository import DatabaseRepository, clamp_limit
from core.sql_export import render_database_sql
from core.logger import get_logger
from database.database import get_db
from schemas.common import PageMetadata, envelope
from schemas.database import DatabaseCreate, DatabaseUpdate, DatabaseOut, DatabaseSQLOut

router = APIRouter(prefix="/api/databases", tags=["databases"])
logger = get_logger(__name__)


@router.get("")
def list_databases(
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """All databases, newest first, with their tables and attributes."""
    limit = clamp_limit(limit)
    databases, total = DatabaseRepository(db).list(limit=limit, offset=offset)
    return envelope(
        data=[DatabaseOut.model_validate(d) for d in databases],
        metadata=PageMetadata(total=total, limit=limit, offset=offset),
    )


@router.post("", status_code=201)
def create_database(body: DatabaseCreate, db: Session = Depends(get_db)):
    repo = DatabaseRepository(db)
    repo.ensure_unique_name(body.name)
    database = repo.create(**body.model_dump())
    logger.info(f"Created database {database.id} '{database.name}'")
    return envelope(data=DatabaseOut.model_validate(database))


@router.get("/{database_id}")
def get_database(database_id: int, db: Session = Depends(get_db)):
    database = DatabaseRepository(db).get(database_id)
    return envelope(data=DatabaseOut.model_validate(database))


@router.put("/{database_id}")
def update_database(database_id: int, body: DatabaseUpdate, db: Session = Depends(get_db)):
    repo = DatabaseRepository(db)
    database = repo.get(database_id)

    # Update only provided fields; nulls never clear a value
    values = body.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in values and values["name"] != database.name:
        repo.ensure_unique_name(values["name"], exclude_id=database.id)

    database = repo.update(database, values)
    return envelope(data=DatabaseOut.model_validate(database))


@router.delete("/{database_id}")
def delete_database(database_id: int, db: Session = Depends(get_db)):
    repo = DatabaseRepository(db)
    database = repo.get(database_id)
    repo.delete(database)
    logger.info(f"Deleted database {database_id}")
    return envelope(message="Database deleted successfully")


@router.get("/{database_id}/sql")
def export_database_sql(database_id: int, db: Session = Depends(get_db)):
    """CREATE TABLE script for every table of the database, in its dialect."""
    database = DatabaseRepository(db).get(database_id)
    return envelope(data=DatabaseSQLOut(
        database_id=database.id,
        database_type=database.database_type,
        sql=render_database_sql(database),
    ))
