from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime, Float, Text
from sqlalchemy.sql import func
from app.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Property(Base):
    __tablename__ = "properties"

    # Client-assigned code, e.g. "PRP-123456"
    id = Column(String, primary_key=True, index=True)

    name = Column(String, nullable=False)
    province = Column(String, nullable=True, index=True)
    region = Column(String, nullable=True)

    status = Column(String, nullable=False, default="available")  # rented / available / maintenance
    rent_amount = Column(Float, nullable=False, default=0)

    # Projection of the most recently recorded payment: paid / unpaid / overdue / doubtful
    payment_status = Column(String, nullable=False, default="unpaid")

    type = Column(String, nullable=True)  # apartment / villa / shop / office / warehouse
    area = Column(Float, nullable=True)
    rooms = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)

    # Python-side default keeps sub-second precision so listing order is stable
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False)
