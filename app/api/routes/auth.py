import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_settings
from app.core.auth import User, get_current_user
from app.core.config import Settings
from app.core.security import create_access_token
from app.schemas.auth import AuthUserOut, LoginRequest, TokenOut
from app.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _token_response(user_id: int, username: str, role: str, language: str, settings: Settings) -> TokenOut:
    token = create_access_token(user_id, username, role, settings)
    return TokenOut(
        token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user=AuthUserOut(id=user_id, username=username, role=role, language=language),
    )


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Exchange username/password for a bearer token.

    401 for unknown user or wrong password, 403 for an inactive account.
    """
    user = user_service.authenticate(db, payload.username, payload.password)
    logger.info("User %s logged in", user.username)
    return _token_response(user.id, user.username, user.role, user.language, settings)


@router.post("/refresh", response_model=TokenOut)
def refresh(
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    """Issue a fresh token for a caller whose token is still valid."""
    return _token_response(
        current_user.id, current_user.username, current_user.role, current_user.language, settings
    )


@router.get("/me", response_model=AuthUserOut)
def me(current_user: User = Depends(get_current_user)):
    return AuthUserOut(
        id=current_user.id,
        username=current_user.username,
        role=current_user.role,
        language=current_user.language,
    )
