import json
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from app.core.auth import User
from app.models.operation_log import OperationLog

logger = logging.getLogger(__name__)


def _render_details(details: Any) -> Optional[str]:
    if details is None:
        return None
    if isinstance(details, str):
        return details
    return json.dumps(details, default=str, sort_keys=True)


def log_operation(
    db: Session,
    *,
    actor: Optional[User],
    entity_type: str,
    action: str,
    entity_id: Any,
    details: Any = None,
) -> OperationLog:
    """
    Append an audit row for a mutating operation.

    The row is only added to the session; the caller commits it together with
    the change it describes.
    """
    op_type = f"{entity_type}.{action}"
    payload = {"id": entity_id}
    if details is not None:
        payload["changes"] = details

    entry = OperationLog(
        type=op_type,
        operator_id=actor.id if actor is not None else None,
        details=_render_details(payload),
    )
    db.add(entry)
    logger.info(
        "%s %s by %s",
        op_type,
        entity_id,
        actor.username if actor is not None else "system",
    )
    return entry
