"""Application state snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..data.fixtures import seed_containers, seed_feedbacks, seed_users, seed_warehouses
from ..models.domain import Container, Feedback, Theme, User, Warehouse


@dataclass(frozen=True, slots=True)
class AppState:
    """Everything the dashboard shows. Operations return a new instance instead of mutating."""

    current_user: Optional[User] = None
    theme: Theme = "light"
    users: tuple[User, ...] = ()
    containers: tuple[Container, ...] = ()
    warehouses: tuple[Warehouse, ...] = ()
    feedbacks: tuple[Feedback, ...] = ()


def initial_state(
    theme: Theme = "light",
    *,
    password: Optional[str] = None,
    rounds: Optional[int] = None,
) -> AppState:
    """Build the seeded state with nobody logged in."""

    return AppState(
        current_user=None,
        theme=theme,
        users=seed_users(password, rounds=rounds),
        containers=seed_containers(),
        warehouses=seed_warehouses(),
        feedbacks=seed_feedbacks(),
    )
