"""Warehouse API schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

WarehouseStatusLiteral = Literal["available", "full", "overloaded"]


class WarehouseModel(BaseModel):
    id: str
    name: str
    location: str
    capacity: int
    current_load: int
    status: WarehouseStatusLiteral
    containers: List[str]
    container_count: int
    utilization_percentage: int
    capacity_tier: WarehouseStatusLiteral
    status_mismatch: bool


class WarehouseSummaryModel(BaseModel):
    total_warehouses: int
    total_capacity: int
    total_load: int
    average_utilization: int
    overloaded: int
