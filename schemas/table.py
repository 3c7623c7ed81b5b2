from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from schemas.attribute import AttributeCreate, AttributeOut


class TableCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    attributes: List[AttributeCreate] = Field(default_factory=list)


class TableUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    # When present, replaces the table's whole attribute set
    attributes: Optional[List[AttributeCreate]] = None


class TableOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    database_id: int
    attributes: List[AttributeOut] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
