"""Read-side helpers for the dashboard views."""

from .dashboard import available_tabs, compute_dashboard, ui_permissions
from .filtering import filter_containers, filter_feedbacks, filter_users
from .warehouses import describe_warehouse, list_warehouses, summarize_warehouses, utilization_percentage

__all__ = [
    "available_tabs",
    "compute_dashboard",
    "ui_permissions",
    "filter_users",
    "filter_containers",
    "filter_feedbacks",
    "describe_warehouse",
    "list_warehouses",
    "summarize_warehouses",
    "utilization_percentage",
]
