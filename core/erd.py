"""
ERD canvas support.

The browser's diagramming library owns drawing, dragging and connection
routing. This module only produces node content, a starting grid layout and
relationship edges inferred from foreign-key columns. Nothing here is
persisted; positions are recomputed on every request.
"""

import math
from typing import Dict, List, Tuple

from models.database import Database
from schemas.erd import Diagram, DiagramColumn, DiagramEdge, DiagramNode, Position

GRID_SPACING = 200
GRID_MARGIN = 50


def auto_layout(count: int, spacing: int = GRID_SPACING, margin: int = GRID_MARGIN) -> List[Tuple[int, int]]:
    """Place `count` blocks row by row on a grid of ceil(sqrt(count)) columns."""
    if count <= 0:
        return []
    columns = math.ceil(math.sqrt(count))
    positions = []
    for index in range(count):
        row, col = divmod(index, columns)
        positions.append((col * spacing + margin, row * spacing + margin))
    return positions


def node_id(table_id: int) -> str:
    return f"table-{table_id}"


def infer_edges(tables) -> List[DiagramEdge]:
    """Link `<target>_id` foreign-key columns to the table named `<target>` or `<target>s`."""
    by_name: Dict[str, int] = {table.name.lower(): table.id for table in tables}
    edges = []
    for table in tables:
        for attribute in table.attributes:
            if not attribute.is_foreign_key:
                continue
            name = attribute.name.lower()
            if not name.endswith("_id") or len(name) <= 3:
                continue
            stem = name[:-3]
            target_id = by_name.get(stem, by_name.get(f"{stem}s"))
            if target_id is None:
                continue
            edges.append(DiagramEdge(
                source=node_id(table.id),
                target=node_id(target_id),
                attribute=attribute.name,
            ))
    return edges


def build_diagram(database: Database) -> Diagram:
    tables = sorted(database.tables, key=lambda t: t.id)
    positions = auto_layout(len(tables))

    nodes = []
    for table, (x, y) in zip(tables, positions):
        nodes.append(DiagramNode(
            id=node_id(table.id),
            table_id=table.id,
            name=table.name,
            columns=[
                DiagramColumn(
                    name=attr.name,
                    data_type=attr.data_type,
                    is_nullable=attr.is_nullable,
                    is_primary_key=attr.is_primary_key,
                    is_foreign_key=attr.is_foreign_key,
                )
                for attr in table.attributes
            ],
            position=Position(x=x, y=y),
        ))

    return Diagram(
        database_id=database.id,
        name=database.name,
        nodes=nodes,
        edges=infer_edges(tables),
    )
