from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from core.repository import AttributeRepository, TableRepository, clamp_limit
from database.database import get_db
from schemas.common import PageMetadata, envelope
from schemas.attribute import AttributeCreate, AttributeUpdate, AttributeOut

router = APIRouter(prefix="/api/attributes", tags=["attributes"])


@router.get("/table/{table_id}")
def list_attributes(
    table_id: int,
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    limit = clamp_limit(limit)
    TableRepository(db).get(table_id)
    attributes, total = AttributeRepository(db).list(
        filters={"table_id": table_id}, limit=limit, offset=offset
    )
    return envelope(
        data=[AttributeOut.model_validate(a) for a in attributes],
        metadata=PageMetadata(total=total, limit=limit, offset=offset),
    )


@router.post("/table/{table_id}", status_code=201)
def create_attribute(table_id: int, body: AttributeCreate, db: Session = Depends(get_db)):
    table = TableRepository(db).get(table_id)
    attribute = AttributeRepository(db).create(table_id=table.id, **body.model_dump())
    return envelope(data=AttributeOut.model_validate(attribute))


@router.put("/{attribute_id}")
def update_attribute(attribute_id: int, body: AttributeUpdate, db: Session = Depends(get_db)):
    repo = AttributeRepository(db)
    attribute = repo.get(attribute_id)
    attribute = repo.update(attribute, body.model_dump(exclude_unset=True, exclude_none=True))
    return envelope(data=AttributeOut.model_validate(attribute))


@router.delete("/{attribute_id}")
def delete_attribute(attribute_id: int, db: Session = Depends(get_db)):
    repo = AttributeRepository(db)
    repo.delete(repo.get(attribute_id))
    return envelope(message="Attribute deleted successfully")
