from pydantic import BaseModel
from typing import List


class Position(BaseModel):
    x: int
    y: int


class DiagramColumn(BaseModel):
    name: str
    data_type: str
    is_nullable: bool
    is_primary_key: bool
    is_foreign_key: bool


class DiagramNode(BaseModel):
    id: str
    table_id: int
    name: str
    columns: List[DiagramColumn]
    position: Position


class DiagramEdge(BaseModel):
    source: str
    target: str
    attribute: str


class Diagram(BaseModel):
    database_id: int
    name: str
    nodes: List[DiagramNode]
    edges: List[DiagramEdge]
