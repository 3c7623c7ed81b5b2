from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class AttributeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    data_type: str = Field(..., min_length=1)
    is_nullable: bool = True
    is_primary_key: bool = False
    is_foreign_key: bool = False


class AttributeCreate(AttributeBase):
    pass


class AttributeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    data_type: Optional[str] = Field(None, min_length=1)
    is_nullable: Optional[bool] = None
    is_primary_key: Optional[bool] = None
    is_foreign_key: Optional[bool] = None


class AttributeOut(AttributeBase):
    id: int
    table_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
