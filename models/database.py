from sqlalchemy import Column, Integer, String, Text, Enum, DateTime, func
from sqlalchemy.orm import relationship
from models.base import Base
import enum


class DatabaseType(str, enum.Enum):
    postgresql = "postgresql"
    mysql = "mysql"
    mssql = "mssql"
    oracle = "oracle"


class Database(Base):
    __tablename__ = "databases"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    database_type = Column(Enum(DatabaseType, name="database_types"), nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    tables = relationship("Table", back_populates="database",
                          cascade="all, delete-orphan", order_by="Table.id")

from models.table import Table  # noqa: E402,F401
