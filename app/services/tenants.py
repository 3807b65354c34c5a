from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.audit import log_operation
from app.core.auth import User as Caller
from app.core.errors import NotFound, ReferentialIntegrityError
from app.models.contract import Contract
from app.models.payment import Payment
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.tenant import TenantCreate, TenantUpdate
from app.services.common import apply_changes, commit, ensure_exists, get_or_404


def _enriched_query(db: Session):
    return (
        db.query(Tenant, Property.name.label("property_name"))
        .outerjoin(Property, Property.id == Tenant.property_id)
    )


def _attach(rows) -> List[Tenant]:
    result: List[Tenant] = []
    for tenant, property_name in rows:
        tenant.property_name = property_name
        result.append(tenant)
    return result


def list_tenants(db: Session, property_id: Optional[str] = None) -> List[Tenant]:
    q = _enriched_query(db)
    if property_id:
        q = q.filter(Tenant.property_id == property_id)
    return _attach(q.order_by(Tenant.id).all())


def get_tenant(db: Session, tenant_id: int) -> Tenant:
    rows = _enriched_query(db).filter(Tenant.id == tenant_id).all()
    if not rows:
        raise NotFound("Tenant not found")
    return _attach(rows)[0]


def create_tenant(db: Session, actor: Caller, payload: TenantCreate) -> Tenant:
    ensure_exists(db, Property, payload.property_id, "Property")

    tenant = Tenant(**payload.model_dump())
    db.add(tenant)
    db.flush()
    log_operation(
        db, actor=actor, entity_type="tenant", action="created", entity_id=tenant.id,
        details={"name": tenant.name, "property_id": tenant.property_id},
    )
    commit(db)
    return get_tenant(db, tenant.id)


def update_tenant(db: Session, actor: Caller, tenant_id: int, payload: TenantUpdate) -> Tenant:
    tenant = get_or_404(db, Tenant, tenant_id, "Tenant")
    data = payload.model_dump(exclude_unset=True)
    if "property_id" in data:
        ensure_exists(db, Property, data["property_id"], "Property")

    changed = apply_changes(tenant, data)
    log_operation(db, actor=actor, entity_type="tenant", action="updated", entity_id=tenant.id, details=changed)
    commit(db)
    return get_tenant(db, tenant.id)


def delete_tenant(db: Session, actor: Caller, tenant_id: int) -> None:
    tenant = get_or_404(db, Tenant, tenant_id, "Tenant")

    refs = []
    if db.query(Payment.id).filter(Payment.tenant_id == tenant_id).first() is not None:
        refs.append("payments")
    if db.query(Contract.id).filter(Contract.tenant_id == tenant_id).first() is not None:
        refs.append("contracts")
    if refs:
        raise ReferentialIntegrityError(f"Tenant {tenant_id} is still referenced by {', '.join(refs)}")

    db.delete(tenant)
    log_operation(
        db, actor=actor, entity_type="tenant", action="deleted", entity_id=tenant_id,
        details={"name": tenant.name},
    )
    commit(db)
