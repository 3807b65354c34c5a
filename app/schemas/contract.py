from pydantic import BaseModel, field_validator, model_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import as_utc_naive, reject_null


class ContractCreate(BaseModel):
    property_id: str
    tenant_id: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    terms: Optional[str] = None
    status: str = "active"
    document_path: Optional[str] = None

    @model_validator(mode="after")
    def end_after_start(self) -> "ContractCreate":
        start, end = as_utc_naive(self.start_date), as_utc_naive(self.end_date)
        if start and end and end < start:
            raise ValueError("end_date cannot be before start_date")
        return self


class ContractUpdate(BaseModel):
    property_id: Optional[str] = None
    tenant_id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    terms: Optional[str] = None
    status: Optional[str] = None
    document_path: Optional[str] = None

    @field_validator("property_id", "tenant_id", "status")
    @classmethod
    def required_columns_not_null(cls, v):
        return reject_null(v)


class ContractOut(BaseModel):
    id: int
    property_id: str
    tenant_id: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    terms: Optional[str] = None
    status: str
    document_path: Optional[str] = None

    property_name: Optional[str] = None
    tenant_name: Optional[str] = None

    class Config:
        from_attributes = True
