"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..deps import get_controller
from ...store.controller import StoreController

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store(controller: StoreController = Depends(get_controller)) -> dict:
    """Record counts held by the in-memory store."""
    state = controller.state
    return {
        "status": "ok",
        "users": len(state.users),
        "containers": len(state.containers),
        "warehouses": len(state.warehouses),
        "feedbacks": len(state.feedbacks),
        "logged_in": state.current_user is not None,
    }
