from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import PaymentMethod, PaymentStatus, reject_null


class PaymentCreate(BaseModel):
    property_id: str
    tenant_id: int
    amount: float
    method: PaymentMethod = "cash"
    status: PaymentStatus = "paid"
    receipt_path: Optional[str] = None
    date: Optional[datetime] = None  # defaults to now

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, v):
        if v <= 0:
            raise ValueError("amount must be greater than zero")
        return v


class PaymentUpdate(BaseModel):
    """Corrections; a status change is re-projected onto the property when this is its latest payment."""
    amount: Optional[float] = None
    method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    receipt_path: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("amount", "method", "status", "date")
    @classmethod
    def required_columns_not_null(cls, v):
        return reject_null(v)

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, v):
        if v is not None and v <= 0:
            raise ValueError("amount must be greater than zero")
        return v


class PaymentOut(BaseModel):
    id: int
    property_id: str
    tenant_id: int
    operator_id: int
    amount: float
    date: datetime
    method: PaymentMethod
    status: PaymentStatus
    receipt_path: Optional[str] = None

    # Read enrichment
    property_name: Optional[str] = None
    tenant_name: Optional[str] = None
    operator_name: Optional[str] = None

    class Config:
        from_attributes = True
