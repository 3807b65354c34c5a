from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import PaymentStatus, PropertyStatus, PropertyType, reject_null


class PropertyBase(BaseModel):
    name: str
    province: Optional[str] = None
    region: Optional[str] = None
    status: PropertyStatus = "available"
    rent_amount: float = 0
    payment_status: PaymentStatus = "unpaid"
    type: Optional[PropertyType] = None
    area: Optional[float] = None
    rooms: Optional[int] = None
    description: Optional[str] = None

    @field_validator("rent_amount")
    @classmethod
    def rent_must_be_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("rent_amount cannot be negative")
        return v


class PropertyCreate(PropertyBase):
    # Client-assigned code ("PRP-123456"); generated when omitted
    id: Optional[str] = None

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("id cannot be empty")
        return v


class PropertyUpdate(BaseModel):
    name: Optional[str] = None
    province: Optional[str] = None
    region: Optional[str] = None
    status: Optional[PropertyStatus] = None
    rent_amount: Optional[float] = None
    payment_status: Optional[PaymentStatus] = None
    type: Optional[PropertyType] = None
    area: Optional[float] = None
    rooms: Optional[int] = None
    description: Optional[str] = None

    @field_validator("name", "status", "rent_amount", "payment_status")
    @classmethod
    def required_columns_not_null(cls, v):
        return reject_null(v)

    @field_validator("rent_amount")
    @classmethod
    def rent_must_be_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("rent_amount cannot be negative")
        return v


class PropertyOut(PropertyBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True
