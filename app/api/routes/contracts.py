from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.api.deps import get_db
from app.core.auth import User, get_current_user
from app.schemas.common import MessageOut
from app.schemas.contract import ContractCreate, ContractOut, ContractUpdate
from app.services import contracts as contract_service

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=List[ContractOut])
def list_contracts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    property_id: Optional[str] = Query(None),
    tenant_id: Optional[int] = Query(None),
):
    return contract_service.list_contracts(db, property_id=property_id, tenant_id=tenant_id)


@router.get("/{contract_id}", response_model=ContractOut)
def get_contract(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return contract_service.get_contract(db, contract_id)


@router.post("", response_model=ContractOut, status_code=201)
def create_contract(
    payload: ContractCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return contract_service.create_contract(db, current_user, payload)


@router.put("/{contract_id}", response_model=ContractOut)
def update_contract(
    contract_id: int,
    payload: ContractUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return contract_service.update_contract(db, current_user, contract_id, payload)


@router.delete("/{contract_id}", response_model=MessageOut)
def delete_contract(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    contract_service.delete_contract(db, current_user, contract_id)
    return {"message": "Contract deleted"}
