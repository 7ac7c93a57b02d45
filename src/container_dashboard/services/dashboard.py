"""Dashboard statistics and role-based navigation."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from ..models.domain import (
    CONTAINER_STATUSES,
    FEEDBACK_STATUSES,
    WAREHOUSE_STATUSES,
    User,
)
from ..store.state import AppState

DEFAULT_TAB = "dashboard"
RECENT_CONTAINER_LIMIT = 3

# Tab id -> roles that see it. Order is the menu order.
NAVIGATION: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("dashboard", ("admin", "staff", "user")),
    ("users", ("admin",)),
    ("containers", ("admin", "staff", "user")),
    ("warehouses", ("admin", "staff", "user")),
    ("feedback", ("admin", "staff", "user")),
)


def available_tabs(role: str) -> list[str]:
    return [tab for tab, roles in NAVIGATION if role in roles]


def ui_permissions(role: str) -> dict[str, bool]:
    """Which actions the UI offers a role. Used for hiding controls, not enforced."""

    return {
        "can_manage_users": role == "admin",
        "can_create_containers": role == "admin",
        "can_edit_containers": role in ("admin", "staff"),
        "can_delete_containers": role == "admin",
        "can_respond_feedback": role in ("admin", "staff"),
    }


def _count_by(values: Iterable[str], keys: tuple[str, ...]) -> dict[str, int]:
    counts = Counter(values)
    result = {key: counts.get(key, 0) for key in keys}
    result["total"] = sum(counts.values())
    return result


def compute_dashboard(state: AppState, user: Optional[User] = None) -> dict:
    viewer = user or state.current_user
    return {
        "welcome_name": viewer.name if viewer else None,
        "containers": _count_by((c.status for c in state.containers), CONTAINER_STATUSES),
        "warehouses": _count_by((w.status for w in state.warehouses), WAREHOUSE_STATUSES),
        "feedback": _count_by((f.status for f in state.feedbacks), FEEDBACK_STATUSES),
        "recent_containers": list(state.containers[:RECENT_CONTAINER_LIMIT]),
    }
