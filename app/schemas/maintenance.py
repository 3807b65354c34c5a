from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import reject_null


class MaintenanceCreate(BaseModel):
    property_id: str
    type: str
    date: Optional[datetime] = None
    cost: float = 0
    status: str = "pending"
    provider: Optional[str] = None
    description: Optional[str] = None

    @field_validator("cost")
    @classmethod
    def cost_must_be_non_negative(cls, v):
        if v < 0:
            raise ValueError("cost cannot be negative")
        return v


class MaintenanceUpdate(BaseModel):
    property_id: Optional[str] = None
    type: Optional[str] = None
    date: Optional[datetime] = None
    cost: Optional[float] = None
    status: Optional[str] = None
    provider: Optional[str] = None
    description: Optional[str] = None

    @field_validator("property_id", "type", "cost", "status")
    @classmethod
    def required_columns_not_null(cls, v):
        return reject_null(v)

    @field_validator("cost")
    @classmethod
    def cost_must_be_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("cost cannot be negative")
        return v


class MaintenanceOut(MaintenanceCreate):
    id: int
    property_name: Optional[str] = None

    class Config:
        from_attributes = True
