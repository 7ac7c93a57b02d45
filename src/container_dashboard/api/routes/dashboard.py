"""Dashboard overview endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_controller
from ...schemas.containers import ContainerModel
from ...schemas.dashboard import DashboardResponse
from ...services.dashboard import compute_dashboard
from ...store.controller import StoreController

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(controller: StoreController = Depends(get_controller)) -> DashboardResponse:
    overview = compute_dashboard(controller.state)
    overview["recent_containers"] = [
        ContainerModel.model_validate(container) for container in overview["recent_containers"]
    ]
    return DashboardResponse(**overview)
