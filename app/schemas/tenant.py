from pydantic import BaseModel, field_validator
from typing import Optional

from app.schemas.common import PaymentStatus, TenantRating, reject_null


class TenantCreate(BaseModel):
    name: str
    whatsapp: Optional[str] = None
    property_id: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    id_card: Optional[str] = None
    rating: Optional[TenantRating] = None
    notes: Optional[str] = None


class TenantUpdate(BaseModel):
    name: Optional[str] = None
    whatsapp: Optional[str] = None
    property_id: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    id_card: Optional[str] = None
    rating: Optional[TenantRating] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def required_columns_not_null(cls, v):
        return reject_null(v)


class TenantOut(TenantCreate):
    id: int
    property_name: Optional[str] = None  # joined from properties at read time

    class Config:
        from_attributes = True
