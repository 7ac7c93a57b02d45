"""Warehouse utilization helpers.

Utilization and its tier are computed for display only. The stored
``Warehouse.status`` is assigned independently and is never rewritten from
these numbers, so the two can disagree; :func:`describe_warehouse` reports
both and flags the mismatch.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..models.domain import Warehouse

FULL_THRESHOLD = 80
OVERLOADED_THRESHOLD = 100


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def utilization_percentage(current_load: float, capacity: float) -> int:
    if capacity <= 0:
        return 0
    return _round_half_up(current_load / capacity * 100)


def capacity_tier(percentage: int) -> str:
    if percentage >= OVERLOADED_THRESHOLD:
        return "overloaded"
    if percentage >= FULL_THRESHOLD:
        return "full"
    return "available"


def describe_warehouse(warehouse: Warehouse) -> dict:
    percentage = utilization_percentage(warehouse.current_load, warehouse.capacity)
    tier = capacity_tier(percentage)
    return {
        "id": warehouse.id,
        "name": warehouse.name,
        "location": warehouse.location,
        "capacity": warehouse.capacity,
        "current_load": warehouse.current_load,
        "status": warehouse.status,
        "containers": list(warehouse.containers),
        "container_count": len(warehouse.containers),
        "utilization_percentage": percentage,
        "capacity_tier": tier,
        "status_mismatch": tier != warehouse.status,
    }


def summarize_warehouses(warehouses: Sequence[Warehouse]) -> dict:
    """Totals across all warehouses, as shown above the warehouse list."""

    total_capacity = sum(warehouse.capacity for warehouse in warehouses)
    total_load = sum(warehouse.current_load for warehouse in warehouses)
    return {
        "total_warehouses": len(warehouses),
        "total_capacity": total_capacity,
        "total_load": total_load,
        "average_utilization": utilization_percentage(total_load, total_capacity),
        "overloaded": sum(1 for warehouse in warehouses if warehouse.status == "overloaded"),
    }


def list_warehouses(warehouses: Iterable[Warehouse]) -> list[dict]:
    return [describe_warehouse(warehouse) for warehouse in warehouses]
