"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import func

from catalog.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=True)
    lastname = Column(String(100), nullable=True)
    role = Column(String(20), nullable=False, default="user")
    is_logged_in = Column(Boolean, nullable=False, default=False)
    current_token = Column(String(1024), nullable=False, default="", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
