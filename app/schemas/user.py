from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import Language, Role, UserStatus


def _clean_username(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("username cannot be empty")
    return v


class UserCreate(BaseModel):
    username: str
    password: str
    role: Role = "operator"
    status: UserStatus = "active"
    language: Language = "fr"

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v):
        return _clean_username(v)

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v):
        if not v:
            raise ValueError("password cannot be empty")
        return v


class UserUpdate(BaseModel):
    """Partial update. Operators editing themselves may only send username, password, language."""
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None
    status: Optional[UserStatus] = None
    language: Optional[Language] = None

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v):
        return _clean_username(v)


class UserOut(BaseModel):
    id: int
    username: str
    role: Role
    status: UserStatus
    language: Language
    created_at: datetime

    class Config:
        from_attributes = True
