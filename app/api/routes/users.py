from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.api.deps import get_db, get_settings
from app.core.auth import ADMIN, User, require_role, require_self_or_admin
from app.core.config import Settings
from app.schemas.common import MessageOut
from app.schemas.user import UserCreate, UserOut, UserUpdate
from app.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(ADMIN)),
):
    return user_service.list_users(db)


@router.post("", response_model=UserOut, status_code=201)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(require_role(ADMIN)),
):
    """Admin only. 400 when the username is taken."""
    return user_service.create_user(db, current_user, payload, settings.BCRYPT_ROUNDS)


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_self_or_admin),
):
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(require_self_or_admin),
):
    """
    Admins may edit anyone. Other users may edit their own username,
    password and language; changing role or status is refused with 403.
    """
    return user_service.update_user(db, current_user, user_id, payload, settings.BCRYPT_ROUNDS)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(ADMIN)),
):
    user_service.delete_user(db, current_user, user_id)
    return {"message": "User deleted"}
