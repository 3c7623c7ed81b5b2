from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config import DEFAULT_PAGE_SIZE
from core.repository import TableDataRepository, TableRepository, clamp_limit
from core.logger import get_logger
from database.database import get_db
from schemas.common import PageMetadata, envelope
from schemas.table_data import TableDataBulkCreate, TableDataOut, TableDataUpdate

router = APIRouter(prefix="/api/tables", tags=["table data"])
logger = get_logger(__name__)


@router.get("/{table_id}/data")
def get_table_data(
    table_id: int,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """Sample rows, newest first. `limit` is capped at 1000."""
    TableRepository(db).get(table_id)
    limit = clamp_limit(limit)
    rows, total = TableDataRepository(db).list(
        filters={"table_id": table_id}, limit=limit, offset=offset
    )
    return envelope(
        data=[TableDataOut.model_validate(r) for r in rows],
        metadata=PageMetadata(total=total, limit=limit, offset=offset),
    )


@router.post("/{table_id}/data", status_code=201)
def store_table_data(table_id: int, body: TableDataBulkCreate, db: Session = Depends(get_db)):
    """Insert every record of the batch in a single commit."""
    table = TableRepository(db).get(table_id)
    rows = TableDataRepository(db).create_many(
        [{"table_id": table.id, "row_data": row} for row in body.data]
    )
    logger.info(f"Stored {len(rows)} rows for table {table_id}")
    return envelope(
        data=[TableDataOut.model_validate(r) for r in rows],
        message=f"{len(rows)} records stored successfully",
    )


@router.get("/{table_id}/data/{row_id}")
def get_table_data_row(table_id: int, row_id: int, db: Session = Depends(get_db)):
    row = TableDataRepository(db).get(row_id, table_id=table_id)
    return envelope(data=TableDataOut.model_validate(row))


@router.put("/{table_id}/data/{row_id}")
def update_table_data_row(table_id: int, row_id: int, body: TableDataUpdate,
                          db: Session = Depends(get_db)):
    repo = TableDataRepository(db)
    row = repo.get(row_id, table_id=table_id)
    row = repo.update(row, {"row_data": body.row_data})
    return envelope(data=TableDataOut.model_validate(row))


@router.delete("/{table_id}/data/{row_id}")
def delete_table_data_row(table_id: int, row_id: int, db: Session = Depends(get_db)):
    repo = TableDataRepository(db)
    repo.delete(repo.get(row_id, table_id=table_id))
    return envelope(message="Data row deleted successfully")


@router.delete("/{table_id}/data")
def delete_all_table_data(table_id: int, db: Session = Depends(get_db)):
    TableRepository(db).get(table_id)
    affected = TableDataRepository(db).delete_where(table_id=table_id)
    logger.info(f"Deleted {affected} rows for table {table_id}")
    return envelope(
        data={"affected": affected},
        message=f"{affected} records deleted successfully",
    )
