from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.auth import ADMIN, User, require_role
from app.models.operation_log import OperationLog
from app.schemas.operation_log import OperationLogOut

router = APIRouter(prefix="/operation-logs", tags=["operation-logs"])


@router.get("", response_model=List[OperationLogOut])
def list_operation_logs(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(ADMIN)),
    type: Optional[str] = Query(None, description="e.g. payment.created"),
    operator_id: Optional[int] = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    q = db.query(OperationLog)

    if type:
        q = q.filter(OperationLog.type == type)
    if operator_id is not None:
        q = q.filter(OperationLog.operator_id == operator_id)

    return q.order_by(OperationLog.id.desc()).offset(offset).limit(limit).all()
