from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from models.database import DatabaseType
from schemas.table import TableOut


class DatabaseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    database_type: DatabaseType


class DatabaseUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    database_type: Optional[DatabaseType] = None


class DatabaseOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    database_type: DatabaseType
    tables: List[TableOut] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class DatabaseSQLOut(BaseModel):
    database_id: int
    database_type: DatabaseType
    sql: str
