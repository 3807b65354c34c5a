from pydantic import BaseModel

from app.schemas.common import Language, Role


class LoginRequest(BaseModel):
    username: str
    password: str


class AuthUserOut(BaseModel):
    id: int
    username: str
    role: Role
    language: Language

    class Config:
        from_attributes = True


class TokenOut(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: AuthUserOut
