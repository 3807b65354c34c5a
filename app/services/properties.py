import logging
import random
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.audit import log_operation
from app.core.auth import User as Caller
from app.core.errors import DuplicateKey, ReferentialIntegrityError, ServiceUnavailable
from app.models.contract import Contract
from app.models.maintenance import MaintenanceRecord
from app.models.payment import Payment
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.property import PropertyCreate, PropertyUpdate
from app.services.common import apply_changes, commit, get_or_404

logger = logging.getLogger(__name__)

PROPERTY_CODE_PREFIX = "PRP-"


def generate_property_code(db: Session, attempts: int = 20) -> str:
    """Pick an unused "PRP-XXXXXX" code."""
    for _ in range(attempts):
        code = f"{PROPERTY_CODE_PREFIX}{random.randint(100000, 999999)}"
        if db.get(Property, code) is None:
            return code
    raise ServiceUnavailable("Could not allocate a free property code")


def list_properties(
    db: Session,
    status: Optional[str] = None,
    province: Optional[str] = None,
) -> List[Property]:
    q = db.query(Property)
    if status:
        q = q.filter(Property.status == status)
    if province:
        q = q.filter(Property.province == province)
    return q.order_by(Property.created_at, Property.id).all()


def get_property(db: Session, property_id: str) -> Property:
    return get_or_404(db, Property, property_id, "Property")


def create_property(db: Session, actor: Caller, payload: PropertyCreate) -> Property:
    data = payload.model_dump()
    if not data.get("id"):
        data["id"] = generate_property_code(db)
    elif db.get(Property, data["id"]) is not None:
        raise DuplicateKey(f"Property {data['id']} already exists")

    prop = Property(**data)
    db.add(prop)
    log_operation(
        db, actor=actor, entity_type="property", action="created", entity_id=prop.id,
        details={"name": prop.name, "status": prop.status, "rent_amount": prop.rent_amount},
    )
    commit(db, f"Property {prop.id} already exists")
    db.refresh(prop)
    return prop


def update_property(db: Session, actor: Caller, property_id: str, payload: PropertyUpdate) -> Property:
    prop = get_property(db, property_id)
    changed = apply_changes(prop, payload.model_dump(exclude_unset=True))
    log_operation(db, actor=actor, entity_type="property", action="updated", entity_id=prop.id, details=changed)
    commit(db)
    db.refresh(prop)
    return prop


def _property_references(db: Session, property_id: str) -> List[str]:
    refs = []
    for model, label in (
        (Tenant, "tenants"),
        (Payment, "payments"),
        (MaintenanceRecord, "maintenance records"),
        (Contract, "contracts"),
    ):
        if db.query(model.id).filter(model.property_id == property_id).first() is not None:
            refs.append(label)
    return refs


def delete_property(db: Session, actor: Caller, property_id: str) -> None:
    prop = get_property(db, property_id)

    refs = _property_references(db, property_id)
    if refs:
        raise ReferentialIntegrityError(
            f"Property {property_id} is still referenced by {', '.join(refs)}"
        )

    db.delete(prop)
    log_operation(
        db, actor=actor, entity_type="property", action="deleted", entity_id=property_id,
        details={"name": prop.name},
    )
    commit(db)
