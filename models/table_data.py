from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from models.base import Base


class TableData(Base):
    __tablename__ = "table_data"

    id = Column(Integer, primary_key=True, index=True)
    table_id = Column(Integer, ForeignKey("schema_tables.id", ondelete="CASCADE"), nullable=False, index=True)
    # Keys are expected to match the table's attribute names; not enforced
    row_data = Column(JSON, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    table = relationship("Table", back_populates="rows")
