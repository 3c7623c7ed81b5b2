from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from core.config import get_database_url
from core.logger import get_logger

logger = get_logger(__name__)


def build_engine(url: str):
    """Create an engine; SQLite URLs get a thread-shareable connection, in-memory ones a single shared pool."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


engine = build_engine(get_database_url())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create missing tables. An unreachable store is fatal: log and exit."""
    from models.base import Base
    import models.database  # noqa: F401  registers Database, Table, Attribute, TableData

    bind = bind or engine
    try:
        Base.metadata.create_all(bind=bind)
    except OperationalError as exc:
        logger.critical(f"Error initializing database connection: {exc}")
        raise SystemExit(1)
    logger.info("Database connection initialized")
