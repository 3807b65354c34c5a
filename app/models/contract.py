from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text
from app.core.database import Base


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(String, ForeignKey("properties.id"), nullable=False, index=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)

    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    terms = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="active")
    document_path = Column(String, nullable=True)
