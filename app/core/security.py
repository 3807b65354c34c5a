"""
Credential service: password hashing and session tokens.

Passwords are hashed with bcrypt. Tokens are HS256 JWTs signed with the
server-held ``JWT_SECRET`` and always carry an ``exp`` claim.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import Settings


class InvalidToken(Exception):
    """Raised when a token is malformed, forged, or expired."""


def hash_password(plaintext: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plaintext: str, digest: Optional[str]) -> bool:
    if not plaintext or not digest:
        return False
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(
    user_id: int,
    username: str,
    role: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign a claim set for the given user.

    Claims: ``sub`` (user id as string), ``id``, ``username``, ``role``,
    ``iat`` and ``exp``.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    claims = {
        "sub": str(user_id),
        "id": user_id,
        "username": username,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    """
    Verify signature and expiry and return the claims.

    Raises:
        InvalidToken: bad signature, malformed token, expired, or missing id
    """
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as e:
        raise InvalidToken("Token has expired") from e
    except JWTError as e:
        raise InvalidToken(f"Invalid token: {e}") from e

    if claims.get("id") is None:
        raise InvalidToken("Token is missing the user id claim")
    return claims
