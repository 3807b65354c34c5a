from sqlalchemy import Column, String, Integer, ForeignKey, Text
from app.core.database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    whatsapp = Column(String, nullable=True)  # contact number

    # Optional; several tenants may point at the same property over time
    property_id = Column(String, ForeignKey("properties.id"), nullable=True, index=True)

    payment_status = Column(String, nullable=True)
    id_card = Column(String, nullable=True)  # identity document reference
    rating = Column(String, nullable=True)  # excellent / good / average / bad
    notes = Column(Text, nullable=True)
