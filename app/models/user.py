from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)  # bcrypt digest, never the plaintext

    role = Column(String, nullable=False, default="operator")  # admin / operator
    status = Column(String, nullable=False, default="active")  # active / inactive
    language = Column(String, nullable=False, default="fr")  # fr / ar

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
