from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.api.deps import get_db
from app.core.auth import User, get_current_user
from app.schemas.common import MessageOut
from app.schemas.property import PropertyCreate, PropertyOut, PropertyUpdate
from app.services import properties as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[PropertyOut])
def list_properties(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    status: Optional[str] = Query(None, description="rented|available|maintenance"),
    province: Optional[str] = Query(None),
):
    """All properties in insertion order."""
    return property_service.list_properties(db, status=status, province=province)


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(
    property_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return property_service.get_property(db, property_id)


@router.post("", response_model=PropertyOut, status_code=201)
def create_property(
    payload: PropertyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a property. ``id`` is the client-chosen code (e.g. "PRP-123456");
    a free code is generated when it is omitted. Reusing an id gives 400.
    """
    return property_service.create_property(db, current_user, payload)


@router.put("/{property_id}", response_model=PropertyOut)
def update_property(
    property_id: str,
    payload: PropertyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return property_service.update_property(db, current_user, property_id, payload)


@router.delete("/{property_id}", response_model=MessageOut)
def delete_property(
    property_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Refused with 409 while tenants, payments, maintenance records
    or contracts still point at the property.
    """
    property_service.delete_property(db, current_user, property_id)
    return {"message": "Property deleted"}
