from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from app.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """One session per request, taken from the store handle the app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
