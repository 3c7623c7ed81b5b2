"""
Generic CRUD over the schema models.

Every repository wraps one request-scoped Session. Read operations eagerly
load the relations listed on the class, write operations commit immediately
and turn unique-constraint violations into ConflictError. Other integrity
errors roll back and propagate.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from core.config import MAX_PAGE_SIZE
from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.logger import get_logger
from models.database import Database
from models.table import Table
from models.attribute import Attribute
from models.table_data import TableData

logger = get_logger(__name__)

# SQLite, MySQL and PostgreSQL wordings of a unique-key violation
UNIQUE_VIOLATION_MARKERS = ("UNIQUE constraint failed", "Duplicate entry", "duplicate key value")


def is_unique_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "pgcode", None) == "23505":
        return True
    message = str(exc.orig)
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)


def clamp_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    if limit < 0:
        raise ValidationError("limit must be a non-negative integer")
    return min(limit, MAX_PAGE_SIZE)


class Repository:
    model: Any = None
    label: str = "Record"
    relations: Tuple = ()
    conflict_message: str = "Record conflicts with an existing one"

    def __init__(self, db: Session):
        self.db = db

    def order_by(self) -> Iterable:
        return (self.model.id.asc(),)

    def query(self):
        q = self.db.query(self.model)
        if self.relations:
            q = q.options(*self.relations)
        return q

    def list(self, filters: Optional[Dict[str, Any]] = None,
             limit: Optional[int] = None, offset: int = 0) -> Tuple[List[Any], int]:
        if offset is None:
            offset = 0
        if offset < 0:
            raise ValidationError("offset must be a non-negative integer")
        limit = clamp_limit(limit)

        filters = filters or {}
        total = self.db.query(self.model).filter_by(**filters).count()

        q = self.query().filter_by(**filters).order_by(*self.order_by())
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all(), total

    def find_one(self, **filters) -> Optional[Any]:
        return self.query().filter_by(**filters).first()

    def get(self, entity_id: int, **filters) -> Any:
        entity = self.find_one(id=entity_id, **filters)
        if not entity:
            raise NotFoundError(f"{self.label} not found")
        return entity

    def create(self, **values) -> Any:
        entity = self.model(**values)
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def create_many(self, rows: List[Dict[str, Any]]) -> List[Any]:
        entities = [self.model(**values) for values in rows]
        self.db.add_all(entities)
        self.commit()
        for entity in entities:
            self.db.refresh(entity)
        return entities

    def update(self, entity: Any, values: Dict[str, Any]) -> Any:
        # Only the supplied keys are merged
        for field, value in values.items():
            setattr(entity, field, value)
        self.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: Any) -> None:
        self.db.delete(entity)
        self.commit()

    def delete_where(self, **filters) -> int:
        affected = self.db.query(self.model).filter_by(**filters).delete(synchronize_session=False)
        self.commit()
        return affected

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not is_unique_violation(exc):
                logger.error(f"{self.label} integrity error: {exc.orig}")
                raise
            logger.warning(f"{self.label} unique violation: {exc.orig}")
            raise ConflictError(self.conflict_message)
        except Exception:
            self.db.rollback()
            raise


class DatabaseRepository(Repository):
    model = Database
    label = "Database"
    relations = (selectinload(Database.tables).selectinload(Table.attributes),)
    conflict_message = "A database with this name already exists"

    def order_by(self):
        return (Database.created_at.desc(), Database.id.desc())

    def ensure_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
        q = self.db.query(Database.id).filter(Database.name == name)
        if exclude_id is not None:
            q = q.filter(Database.id != exclude_id)
        if q.first():
            raise ConflictError(self.conflict_message)


class TableRepository(Repository):
    model = Table
    label = "Table"
    relations = (selectinload(Table.attributes),)

    def create_with_attributes(self, database: Database, name: str,
                               description: Optional[str] = None,
                               attributes: Optional[List[Dict[str, Any]]] = None) -> Table:
        table = Table(
            name=name,
            description=description,
            database=database,
            attributes=[Attribute(**attr) for attr in attributes or []],
        )
        self.db.add(table)
        self.commit()
        self.db.refresh(table)
        return table

    def update_with_attributes(self, table: Table, values: Dict[str, Any],
                               attributes: Optional[List[Dict[str, Any]]] = None) -> Table:
        """Merge `values`; a non-None `attributes` list replaces the attribute set in the same commit."""
        for field, value in values.items():
            setattr(table, field, value)
        if attributes is not None:
            table.attributes = [Attribute(**attr) for attr in attributes]
        self.commit()
        self.db.refresh(table)
        return table


class AttributeRepository(Repository):
    model = Attribute
    label = "Attribute"


class TableDataRepository(Repository):
    model = TableData
    label = "Data row"

    def order_by(self):
        return (TableData.created_at.desc(), TableData.id.desc())
