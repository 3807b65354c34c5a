from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.api.deps import get_db
from app.core.auth import User, get_current_user
from app.schemas.common import MessageOut
from app.schemas.payment import PaymentCreate, PaymentOut, PaymentUpdate
from app.services import payments as payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[PaymentOut])
def list_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    property_id: Optional[str] = Query(None),
    tenant_id: Optional[int] = Query(None),
):
    """Payments with property_name, tenant_name and operator_name attached."""
    return payment_service.list_payments(db, property_id=property_id, tenant_id=tenant_id)


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return payment_service.get_payment(db, payment_id)


@router.post("", response_model=PaymentOut, status_code=201)
def record_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Record a payment on behalf of the caller.

    The property's payment_status and that of every tenant attached to the
    property are set to the payment's status in the same transaction.
    """
    return payment_service.record_payment(db, current_user, payload)


@router.put("/{payment_id}", response_model=PaymentOut)
def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return payment_service.update_payment(db, current_user, payment_id, payload)


@router.delete("/{payment_id}", response_model=MessageOut)
def delete_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    payment_service.delete_payment(db, current_user, payment_id)
    return {"message": "Payment deleted"}
