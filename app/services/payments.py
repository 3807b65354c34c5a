"""
Payments.

Recording a payment also overwrites ``payment_status`` on the property and on
every tenant attached to that property. The insert, both updates and the audit
row share one transaction. Correcting the status of a payment or deleting one
re-projects whatever is now the most recently recorded payment.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, aliased

from app.core.audit import log_operation
from app.core.auth import User as Caller
from app.core.errors import NotFound
from app.models.payment import Payment
from app.models.property import Property
from app.models.tenant import Tenant
from app.models.user import User
from app.schemas.common import as_utc_naive
from app.schemas.payment import PaymentCreate, PaymentUpdate
from app.services.common import apply_changes, commit, ensure_exists, get_or_404

logger = logging.getLogger(__name__)


def _enriched_query(db: Session):
    operator = aliased(User)
    return (
        db.query(
            Payment,
            Property.name.label("property_name"),
            Tenant.name.label("tenant_name"),
            operator.username.label("operator_name"),
        )
        .outerjoin(Property, Property.id == Payment.property_id)
        .outerjoin(Tenant, Tenant.id == Payment.tenant_id)
        .outerjoin(operator, operator.id == Payment.operator_id)
    )


def _attach(rows) -> List[Payment]:
    result: List[Payment] = []
    for payment, property_name, tenant_name, operator_name in rows:
        payment.property_name = property_name
        payment.tenant_name = tenant_name
        payment.operator_name = operator_name
        result.append(payment)
    return result


def list_payments(
    db: Session,
    property_id: Optional[str] = None,
    tenant_id: Optional[int] = None,
) -> List[Payment]:
    q = _enriched_query(db)
    if property_id:
        q = q.filter(Payment.property_id == property_id)
    if tenant_id is not None:
        q = q.filter(Payment.tenant_id == tenant_id)
    return _attach(q.order_by(Payment.id).all())


def get_payment(db: Session, payment_id: int) -> Payment:
    rows = _enriched_query(db).filter(Payment.id == payment_id).all()
    if not rows:
        raise NotFound("Payment not found")
    return _attach(rows)[0]


def propagate_payment_status(db: Session, property_id: str, status: str) -> int:
    """
    Project ``status`` onto the property and its tenants.

    Returns the number of tenant rows touched. Does not commit.
    """
    db.query(Property).filter(Property.id == property_id).update(
        {Property.payment_status: status}, synchronize_session=False
    )
    return db.query(Tenant).filter(Tenant.property_id == property_id).update(
        {Tenant.payment_status: status}, synchronize_session=False
    )


def sync_payment_status(db: Session, property_id: str) -> Optional[int]:
    """
    Re-project the status of the most recently recorded payment left for
    ``property_id`` after a correction or deletion.

    Returns the number of tenant rows touched, or None when the property has
    no payments left (its status is then left as is). Does not commit.
    """
    db.flush()
    latest = (
        db.query(Payment.status)
        .filter(Payment.property_id == property_id)
        .order_by(Payment.id.desc())
        .first()
    )
    if latest is None:
        return None
    return propagate_payment_status(db, property_id, latest.status)


def record_payment(db: Session, actor: Caller, payload: PaymentCreate) -> Payment:
    ensure_exists(db, Property, payload.property_id, "Property")
    ensure_exists(db, Tenant, payload.tenant_id, "Tenant")

    data = payload.model_dump()
    # Stored as UTC wall time so monthly revenue buckets line up
    data["date"] = as_utc_naive(data.get("date") or datetime.now(timezone.utc))

    payment = Payment(operator_id=actor.id, **data)
    try:
        db.add(payment)
        db.flush()
        tenants_updated = propagate_payment_status(db, payment.property_id, payment.status)
        log_operation(
            db, actor=actor, entity_type="payment", action="created", entity_id=payment.id,
            details={
                "property_id": payment.property_id,
                "tenant_id": payment.tenant_id,
                "amount": payment.amount,
                "status": payment.status,
                "tenants_updated": tenants_updated,
            },
        )
    except Exception:
        db.rollback()
        raise
    commit(db)
    return get_payment(db, payment.id)


def update_payment(db: Session, actor: Caller, payment_id: int, payload: PaymentUpdate) -> Payment:
    payment = get_or_404(db, Payment, payment_id, "Payment")
    data = payload.model_dump(exclude_unset=True)
    if data.get("date") is not None:
        data["date"] = as_utc_naive(data["date"])
    try:
        changed = apply_changes(payment, data)
        if "status" in changed:
            sync_payment_status(db, payment.property_id)
        log_operation(db, actor=actor, entity_type="payment", action="updated", entity_id=payment.id, details=changed)
    except Exception:
        db.rollback()
        raise
    commit(db)
    return get_payment(db, payment.id)


def delete_payment(db: Session, actor: Caller, payment_id: int) -> None:
    payment = get_or_404(db, Payment, payment_id, "Payment")
    property_id, amount = payment.property_id, payment.amount
    try:
        db.delete(payment)
        sync_payment_status(db, property_id)
        log_operation(
            db, actor=actor, entity_type="payment", action="deleted", entity_id=payment_id,
            details={"property_id": property_id, "amount": amount},
        )
    except Exception:
        db.rollback()
        raise
    commit(db)
