from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.audit import log_operation
from app.core.auth import User as Caller
from app.core.errors import NotFound
from app.models.maintenance import MaintenanceRecord
from app.models.property import Property
from app.schemas.maintenance import MaintenanceCreate, MaintenanceUpdate
from app.services.common import apply_changes, commit, ensure_exists, get_or_404


def _enriched_query(db: Session):
    return (
        db.query(MaintenanceRecord, Property.name.label("property_name"))
        .outerjoin(Property, Property.id == MaintenanceRecord.property_id)
    )


def _attach(rows) -> List[MaintenanceRecord]:
    result: List[MaintenanceRecord] = []
    for record, property_name in rows:
        record.property_name = property_name
        result.append(record)
    return result


def list_maintenance(
    db: Session,
    property_id: Optional[str] = None,
    status: Optional[str] = None,
) -> List[MaintenanceRecord]:
    q = _enriched_query(db)
    if property_id:
        q = q.filter(MaintenanceRecord.property_id == property_id)
    if status:
        q = q.filter(MaintenanceRecord.status == status)
    return _attach(q.order_by(MaintenanceRecord.id).all())


def get_maintenance(db: Session, record_id: int) -> MaintenanceRecord:
    rows = _enriched_query(db).filter(MaintenanceRecord.id == record_id).all()
    if not rows:
        raise NotFound("Maintenance record not found")
    return _attach(rows)[0]


def create_maintenance(db: Session, actor: Caller, payload: MaintenanceCreate) -> MaintenanceRecord:
    ensure_exists(db, Property, payload.property_id, "Property")

    record = MaintenanceRecord(**payload.model_dump())
    db.add(record)
    db.flush()
    log_operation(
        db, actor=actor, entity_type="maintenance", action="created", entity_id=record.id,
        details={"property_id": record.property_id, "type": record.type, "cost": record.cost},
    )
    commit(db)
    return get_maintenance(db, record.id)


def update_maintenance(
    db: Session, actor: Caller, record_id: int, payload: MaintenanceUpdate
) -> MaintenanceRecord:
    record = get_or_404(db, MaintenanceRecord, record_id, "Maintenance record")
    data = payload.model_dump(exclude_unset=True)
    if "property_id" in data:
        ensure_exists(db, Property, data["property_id"], "Property")

    changed = apply_changes(record, data)
    log_operation(db, actor=actor, entity_type="maintenance", action="updated", entity_id=record.id, details=changed)
    commit(db)
    return get_maintenance(db, record.id)


def delete_maintenance(db: Session, actor: Caller, record_id: int) -> None:
    record = get_or_404(db, MaintenanceRecord, record_id, "Maintenance record")
    db.delete(record)
    log_operation(
        db, actor=actor, entity_type="maintenance", action="deleted", entity_id=record_id,
        details={"property_id": record.property_id},
    )
    commit(db)
