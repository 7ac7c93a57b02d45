"""Pydantic request/response models for user endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: Literal["admin", "staff", "user"]
    name: str
    created_at: datetime
    is_active: bool


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    role: Literal["admin", "staff", "user"] = "user"
    is_active: bool = True
    password: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Plaintext password; the configured demo secret is used when omitted.",
    )


class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[Literal["admin", "staff", "user"]] = None
    is_active: Optional[bool] = None
    password: Optional[str] = Field(default=None, min_length=1)
