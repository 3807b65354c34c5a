from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel

Role = Literal["admin", "operator"]
UserStatus = Literal["active", "inactive"]
Language = Literal["fr", "ar"]
PropertyStatus = Literal["rented", "available", "maintenance"]
PaymentStatus = Literal["paid", "unpaid", "overdue", "doubtful"]
PropertyType = Literal["apartment", "villa", "shop", "office", "warehouse"]
TenantRating = Literal["excellent", "good", "average", "bad"]
PaymentMethod = Literal["cash", "bank", "check", "mobile"]


class MessageOut(BaseModel):
    message: str


def as_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Aware datetimes are converted to UTC and stripped so they compare with stored values."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def reject_null(v):
    """Field validator body for partial updates of NOT NULL columns: omit the field, don't send null."""
    if v is None:
        raise ValueError("cannot be null")
    return v
