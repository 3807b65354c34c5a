"""User management: admin CRUD plus self-service edits."""
import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.audit import log_operation
from app.core.auth import User as Caller, ensure_self_or_admin
from app.core.errors import (
    AuthenticationFailure,
    AuthorizationFailure,
    DuplicateKey,
    ReferentialIntegrityError,
    ValidationFailure,
)
from app.core.security import hash_password, verify_password
from app.models.payment import Payment
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.common import apply_changes, commit, flush, get_or_404

logger = logging.getLogger(__name__)

# Fields an operator may change on their own record
SELF_EDITABLE_FIELDS = {"username", "password", "language"}


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check credentials for login.

    Raises:
        AuthenticationFailure: 401 on unknown user / wrong password,
            403 when the account is inactive.
    """
    user = db.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login for %r", username)
        raise AuthenticationFailure("Invalid credentials")
    if user.status != "active":
        logger.info("Login refused for disabled account %r", username)
        raise AuthenticationFailure("Account disabled", status_code=403)
    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    return get_or_404(db, User, user_id, "User")


def _ensure_username_free(db: Session, username: str, exclude_id: int = None) -> None:
    q = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        q = q.filter(User.id != exclude_id)
    if q.first() is not None:
        raise DuplicateKey("Username already exists")


def create_user(db: Session, actor: Caller, payload: UserCreate, rounds: int = 10) -> User:
    _ensure_username_free(db, payload.username)

    user = User(
        username=payload.username,
        password=hash_password(payload.password, rounds),
        role=payload.role,
        status=payload.status,
        language=payload.language,
    )
    db.add(user)
    flush(db, "Username already exists")
    log_operation(
        db,
        actor=actor,
        entity_type="user",
        action="created",
        entity_id=user.id,
        details={"username": user.username, "role": user.role, "status": user.status},
    )
    commit(db, "Username already exists")
    db.refresh(user)
    return user


def update_user(db: Session, actor: Caller, user_id: int, payload: UserUpdate, rounds: int = 10) -> User:
    ensure_self_or_admin(actor, user_id)
    user = get_user(db, user_id)

    data = payload.model_dump(exclude_unset=True)
    # None means "leave as is" for every field here
    data = {k: v for k, v in data.items() if v is not None}

    if not actor.is_admin:
        forbidden = [
            k for k in data
            if k not in SELF_EDITABLE_FIELDS and getattr(user, k) != data[k]
        ]
        if forbidden:
            raise AuthorizationFailure(f"Only an admin can change: {', '.join(sorted(forbidden))}")
        data = {k: v for k, v in data.items() if k in SELF_EDITABLE_FIELDS}

    if "username" in data:
        _ensure_username_free(db, data["username"], exclude_id=user.id)

    password = data.pop("password", None)
    changed = apply_changes(user, data)
    if password:
        user.password = hash_password(password, rounds)
        changed["password"] = "***"

    log_operation(db, actor=actor, entity_type="user", action="updated", entity_id=user.id, details=changed)
    commit(db, "Username already exists")
    db.refresh(user)
    return user


def delete_user(db: Session, actor: Caller, user_id: int) -> None:
    user = get_user(db, user_id)
    if user.id == actor.id:
        raise ValidationFailure("You cannot delete your own account")

    if db.query(Payment.id).filter(Payment.operator_id == user.id).first() is not None:
        raise ReferentialIntegrityError("User has recorded payments; deactivate the account instead")

    db.delete(user)
    log_operation(
        db, actor=actor, entity_type="user", action="deleted", entity_id=user_id,
        details={"username": user.username},
    )
    commit(db)
