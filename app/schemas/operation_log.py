from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OperationLogOut(BaseModel):
    id: int
    type: str
    operator_id: Optional[int] = None
    details: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
