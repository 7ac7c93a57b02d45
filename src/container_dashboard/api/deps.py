"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from ..models.domain import User
from ..store.controller import StoreController


def get_controller(request: Request) -> StoreController:
    return request.app.state.controller


def require_current_user(request: Request) -> User:
    user = get_controller(request).current_user
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in.")
    return user
