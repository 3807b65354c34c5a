from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.api.deps import get_db
from app.core.auth import User, get_current_user
from app.schemas.common import MessageOut
from app.schemas.tenant import TenantCreate, TenantOut, TenantUpdate
from app.services import tenants as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=List[TenantOut])
def list_tenants(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    property_id: Optional[str] = Query(None, description="Filter by property ID"),
):
    return tenant_service.list_tenants(db, property_id=property_id)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return tenant_service.get_tenant(db, tenant_id)


@router.post("", response_model=TenantOut, status_code=201)
def create_tenant(
    payload: TenantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return tenant_service.create_tenant(db, current_user, payload)


@router.put("/{tenant_id}", response_model=TenantOut)
def update_tenant(
    tenant_id: int,
    payload: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return tenant_service.update_tenant(db, current_user, tenant_id, payload)


@router.delete("/{tenant_id}", response_model=MessageOut)
def delete_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tenant_service.delete_tenant(db, current_user, tenant_id)
    return {"message": "Tenant deleted"}
