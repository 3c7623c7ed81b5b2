from pydantic import AllowInfNan, BaseModel, Strict, StrictBool, StrictInt, StrictStr, field_validator
from typing import Annotated, Any, Dict, List, Optional, Union
from datetime import datetime

# A row is a flat JSON object: string keys, scalar values, finite numbers
FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]
RowValue = Optional[Union[StrictBool, StrictInt, FiniteFloat, StrictStr]]
RowData = Dict[str, RowValue]


class TableDataBulkCreate(BaseModel):
    data: List[RowData]

    @field_validator("data", mode="before")
    @classmethod
    def require_array_of_records(cls, v: Any):
        if not isinstance(v, list) or not all(isinstance(row, dict) for row in v):
            raise ValueError("Data must be an array of records")
        return v


class TableDataUpdate(BaseModel):
    row_data: RowData


class TableDataOut(BaseModel):
    id: int
    table_id: int
    row_data: Dict[str, Any]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TableDataPage(BaseModel):
    rows: List[TableDataOut]
    total: int
    limit: Optional[int] = None
    offset: int = 0
