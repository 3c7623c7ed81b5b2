from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.erd import build_diagram
from core.repository import DatabaseRepository
from database.database import get_db
from schemas.common import envelope

router = APIRouter(prefix="/api/erd", tags=["erd"])


@router.get("/database/{database_id}")
def get_diagram(database_id: int, db: Session = Depends(get_db)):
    """Nodes and inferred edges for the ERD canvas, laid out on a grid."""
    database = DatabaseRepository(db).get(database_id)
    return envelope(data=build_diagram(database))
