"""Dashboard overview schema."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .containers import ContainerModel


class DashboardResponse(BaseModel):
    welcome_name: Optional[str] = None
    containers: dict[str, int]
    warehouses: dict[str, int]
    feedback: dict[str, int]
    recent_containers: List[ContainerModel]
