"""
Authorization guard.

Every protected route depends on ``get_current_user``, which validates the
Bearer token issued by ``POST /api/auth/login`` and re-reads the user row so
deleted or disabled accounts lose access immediately. Role-gated routes add
``require_role``; self-service routes add ``require_self_or_admin``.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_settings
from app.core.config import Settings
from app.core.errors import AuthenticationFailure, AuthorizationFailure
from app.core.security import InvalidToken, decode_access_token
from app.models.user import User as UserRecord

logger = logging.getLogger(__name__)

# auto_error=False so a missing header yields our own 401 body
security = HTTPBearer(auto_error=False)

ADMIN = "admin"
OPERATOR = "operator"


class User:
    """Caller identity resolved from the token."""
    def __init__(self, user_id: int, username: str, role: str, language: Optional[str] = None):
        self.id = user_id
        self.username = username
        self.role = role
        self.language = language

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationFailure: 401 when no token is sent or the account no
            longer exists; 403 when the token is invalid/expired or the
            account is inactive.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationFailure("Missing bearer token")

    try:
        claims = decode_access_token(credentials.credentials, settings)
    except InvalidToken as e:
        logger.warning("Rejected token: %s", e)
        raise AuthenticationFailure(str(e), status_code=403)

    record = db.get(UserRecord, int(claims["id"]))
    if record is None:
        raise AuthenticationFailure("Account no longer exists")
    if record.status != "active":
        raise AuthenticationFailure("Account disabled", status_code=403)

    return User(user_id=record.id, username=record.username, role=record.role, language=record.language)


def require_role(*allowed_roles: str):
    """
    Dependency factory for role-gated routes.

    Usage:
        @router.delete("/{user_id}")
        def delete_user(..., current_user: User = Depends(require_role("admin"))):
            ...
    """
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            logger.warning(
                "User %s (%s) denied; requires one of %s",
                current_user.username, current_user.role, ", ".join(allowed_roles),
            )
            raise AuthorizationFailure(
                f"Insufficient permissions. Required role: {' or '.join(allowed_roles)}"
            )
        return current_user
    return role_checker


def ensure_self_or_admin(current_user: User, target_user_id: int) -> None:
    if current_user.is_admin or current_user.id == target_user_id:
        return
    logger.warning("User %s denied access to user %s", current_user.id, target_user_id)
    raise AuthorizationFailure("You can only manage your own account")


def require_self_or_admin(user_id: int, current_user: User = Depends(get_current_user)) -> User:
    """
    Dependency for ``/users/{user_id}`` routes a caller may use on their own record.

    Resolved before the request body is validated, so a non-admin targeting
    someone else gets 403 whatever the payload.
    """
    ensure_self_or_admin(current_user, user_id)
    return current_user
