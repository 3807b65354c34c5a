from sqlalchemy import Column, String, Integer, DateTime, Float, ForeignKey, Text
from app.core.database import Base


class MaintenanceRecord(Base):
    __tablename__ = "maintenance"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(String, ForeignKey("properties.id"), nullable=False, index=True)

    type = Column(String, nullable=False)  # plumbing / electrical / painting / ...
    date = Column(DateTime(timezone=True), nullable=True)
    cost = Column(Float, nullable=False, default=0)
    status = Column(String, nullable=False, default="pending")
    provider = Column(String, nullable=True)
    description = Column(Text, nullable=True)
