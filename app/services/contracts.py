from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.audit import log_operation
from app.core.auth import User as Caller
from app.core.errors import NotFound, ValidationFailure
from app.models.contract import Contract
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.common import as_utc_naive
from app.schemas.contract import ContractCreate, ContractUpdate
from app.services.common import apply_changes, commit, ensure_exists, get_or_404


def _enriched_query(db: Session):
    return (
        db.query(
            Contract,
            Property.name.label("property_name"),
            Tenant.name.label("tenant_name"),
        )
        .outerjoin(Property, Property.id == Contract.property_id)
        .outerjoin(Tenant, Tenant.id == Contract.tenant_id)
    )


def _attach(rows) -> List[Contract]:
    result: List[Contract] = []
    for contract, property_name, tenant_name in rows:
        contract.property_name = property_name
        contract.tenant_name = tenant_name
        result.append(contract)
    return result


def list_contracts(
    db: Session,
    property_id: Optional[str] = None,
    tenant_id: Optional[int] = None,
) -> List[Contract]:
    q = _enriched_query(db)
    if property_id:
        q = q.filter(Contract.property_id == property_id)
    if tenant_id is not None:
        q = q.filter(Contract.tenant_id == tenant_id)
    return _attach(q.order_by(Contract.id).all())


def get_contract(db: Session, contract_id: int) -> Contract:
    rows = _enriched_query(db).filter(Contract.id == contract_id).all()
    if not rows:
        raise NotFound("Contract not found")
    return _attach(rows)[0]


def create_contract(db: Session, actor: Caller, payload: ContractCreate) -> Contract:
    ensure_exists(db, Property, payload.property_id, "Property")
    ensure_exists(db, Tenant, payload.tenant_id, "Tenant")

    contract = Contract(**payload.model_dump())
    db.add(contract)
    db.flush()
    log_operation(
        db, actor=actor, entity_type="contract", action="created", entity_id=contract.id,
        details={"property_id": contract.property_id, "tenant_id": contract.tenant_id},
    )
    commit(db)
    return get_contract(db, contract.id)


def update_contract(db: Session, actor: Caller, contract_id: int, payload: ContractUpdate) -> Contract:
    contract = get_or_404(db, Contract, contract_id, "Contract")
    data = payload.model_dump(exclude_unset=True)
    if "property_id" in data:
        ensure_exists(db, Property, data["property_id"], "Property")
    if "tenant_id" in data:
        ensure_exists(db, Tenant, data["tenant_id"], "Tenant")

    start = as_utc_naive(data.get("start_date", contract.start_date))
    end = as_utc_naive(data.get("end_date", contract.end_date))
    if start and end and end < start:
        raise ValidationFailure("end_date cannot be before start_date")

    changed = apply_changes(contract, data)
    log_operation(db, actor=actor, entity_type="contract", action="updated", entity_id=contract.id, details=changed)
    commit(db)
    return get_contract(db, contract.id)


def delete_contract(db: Session, actor: Caller, contract_id: int) -> None:
    contract = get_or_404(db, Contract, contract_id, "Contract")
    db.delete(contract)
    log_operation(
        db, actor=actor, entity_type="contract", action="deleted", entity_id=contract_id,
        details={"property_id": contract.property_id, "tenant_id": contract.tenant_id},
    )
    commit(db)
