"""Session, navigation and preference schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from .users import UserModel


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class NavigationModel(BaseModel):
    tabs: List[str]
    permissions: dict[str, bool]


class SessionModel(BaseModel):
    user: UserModel
    theme: Literal["light", "dark"]
    navigation: NavigationModel


class LogoutResponse(BaseModel):
    default_tab: str


class ThemeModel(BaseModel):
    theme: Literal["light", "dark"]
