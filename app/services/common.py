"""Helpers shared by the entity services."""
import logging
from typing import Any, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateKey, NotFound, ValidationFailure

logger = logging.getLogger(__name__)


def get_or_404(db: Session, model: Type, record_id: Any, label: str):
    record = db.get(model, record_id)
    if record is None:
        raise NotFound(f"{label} not found")
    return record


def ensure_exists(db: Session, model: Type, record_id: Any, label: str) -> None:
    """Reject a write that points at a row that does not exist."""
    if record_id is None:
        return
    if db.get(model, record_id) is None:
        raise ValidationFailure(f"{label} {record_id} does not exist")


def _is_unique_violation(error: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed", postgres: "duplicate key value violates unique constraint"
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


def _integrity_failure(error: IntegrityError, duplicate_message: str) -> ValidationFailure:
    if _is_unique_violation(error):
        return DuplicateKey(duplicate_message)
    return ValidationFailure("Constraint violated", detail=str(error.orig))


def commit(db: Session, duplicate_message: str = "Record already exists") -> None:
    """
    Commit the unit of work; roll back on any failure.

    Unique-constraint violations surface as ``DuplicateKey``, any other
    integrity error (NOT NULL, foreign key) as ``ValidationFailure``.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Integrity error on commit: %s", e.orig)
        raise _integrity_failure(e, duplicate_message) from e
    except Exception:
        db.rollback()
        raise


def apply_changes(record, changes: dict) -> dict:
    """Set the given fields; return only the ones whose value actually changed."""
    changed = {}
    for k, v in changes.items():
        if getattr(record, k) != v:
            changed[k] = v
        setattr(record, k, v)
    return changed


def flush(db: Session, duplicate_message: str = "Record already exists") -> None:
    """Flush pending rows (to obtain generated ids) with the same error mapping as ``commit``."""
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise _integrity_failure(e, duplicate_message) from e
