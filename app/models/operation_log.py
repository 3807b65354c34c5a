from sqlalchemy import Column, String, DateTime, Integer, Text
from sqlalchemy.sql import func
from app.core.database import Base


class OperationLog(Base):
    __tablename__ = "operation_logs"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False, index=True)  # "<entity>.<action>", e.g. payment.created
    # Plain column: the trail outlives the users it mentions
    operator_id = Column(Integer, nullable=True, index=True)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
