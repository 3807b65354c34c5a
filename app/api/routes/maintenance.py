from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.api.deps import get_db
from app.core.auth import User, get_current_user
from app.schemas.common import MessageOut
from app.schemas.maintenance import MaintenanceCreate, MaintenanceOut, MaintenanceUpdate
from app.services import maintenance as maintenance_service

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("", response_model=List[MaintenanceOut])
def list_maintenance(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    property_id: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
):
    return maintenance_service.list_maintenance(db, property_id=property_id, status=status)


@router.get("/{record_id}", response_model=MaintenanceOut)
def get_maintenance(
    record_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return maintenance_service.get_maintenance(db, record_id)


@router.post("", response_model=MaintenanceOut, status_code=201)
def create_maintenance(
    payload: MaintenanceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return maintenance_service.create_maintenance(db, current_user, payload)


@router.put("/{record_id}", response_model=MaintenanceOut)
def update_maintenance(
    record_id: int,
    payload: MaintenanceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return maintenance_service.update_maintenance(db, current_user, record_id, payload)


@router.delete("/{record_id}", response_model=MessageOut)
def delete_maintenance(
    record_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    maintenance_service.delete_maintenance(db, current_user, record_id)
    return {"message": "Maintenance record deleted"}
