from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from models.base import Base


class Table(Base):
    __tablename__ = "schema_tables"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    database_id = Column(Integer, ForeignKey("databases.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    database = relationship("Database", back_populates="tables")
    attributes = relationship("Attribute", back_populates="table",
                              cascade="all, delete-orphan", order_by="Attribute.id")
    rows = relationship("TableData", back_populates="table",
                        cascade="all, delete-orphan")

from models.attribute import Attribute  # noqa: E402,F401
from models.table_data import TableData  # noqa: E402,F401
