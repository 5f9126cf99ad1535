"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from catalog.modules.accounts import AccountRole

DataT = TypeVar("DataT")


class RegisterRequest(BaseModel):
    # email/password are optional here so that missing fields produce the
    # service's 400 instead of a framework 422.
    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = Field(None, max_length=255)
    name: Optional[str] = Field(None, max_length=100)
    lastname: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(extra="ignore")


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AccountResponse(BaseModel):
    id: str
    username: str
    email: str
    name: Optional[str] = None
    lastname: Optional[str] = None
    role: AccountRole
    is_logged_in: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AccountLookup(BaseModel):
    name: Optional[str] = None
    lastname: Optional[str] = None
    role: AccountRole
    email: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel, Generic[DataT]):
    message: str
    data: Optional[DataT] = None
