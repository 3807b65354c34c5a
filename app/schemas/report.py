from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List


class RevenueMonth(BaseModel):
    """Paid-payment total for one calendar month ("YYYY-MM")."""
    month: str
    total: float = 0.0


class ProvinceDebt(BaseModel):
    province: Optional[str] = None
    total_debt: float = 0.0


class StatusCount(BaseModel):
    status: str
    count: int = 0


class PaymentStatusCount(BaseModel):
    payment_status: Optional[str] = None
    count: int = 0


class ReportSummaryOut(BaseModel):
    """Composite read for the reports page."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    revenue_by_month: List[RevenueMonth] = []
    debt_by_province: List[ProvinceDebt] = []
    occupancy_stats: List[StatusCount] = []
    payment_status_stats: List[PaymentStatusCount] = []


class StatsOut(BaseModel):
    """Dashboard top cards."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_properties: int = 0
    rented_properties: int = 0
    total_rent: float = 0.0
    total_debt: float = 0.0
    active_users: int = 0
