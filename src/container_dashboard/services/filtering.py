"""Search and filter helpers shared by the list views."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models.domain import Container, Feedback, User

ALL = "all"


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def matches_search(term: Optional[str], *values: Optional[str]) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``values``.

    An empty term matches everything.
    """
    needle = _normalize(term)
    if not needle:
        return True
    return any(needle in _normalize(value) for value in values)


def matches_choice(selected: Optional[str], value: str) -> bool:
    if selected is None or selected == ALL:
        return True
    return value == selected


def filter_users(
    users: Iterable[User],
    *,
    search: Optional[str] = None,
    role: Optional[str] = None,
) -> list[User]:
    return [
        user
        for user in users
        if matches_search(search, user.name, user.username, user.email) and matches_choice(role, user.role)
    ]


def filter_containers(
    containers: Iterable[Container],
    *,
    search: Optional[str] = None,
    status: Optional[str] = None,
) -> list[Container]:
    return [
        container
        for container in containers
        if matches_search(search, container.code, container.type, container.location)
        and matches_choice(status, container.status)
    ]


def filter_feedbacks(
    feedbacks: Iterable[Feedback],
    *,
    status: Optional[str] = None,
    feedback_type: Optional[str] = None,
) -> list[Feedback]:
    return [
        feedback
        for feedback in feedbacks
        if matches_choice(status, feedback.status) and matches_choice(feedback_type, feedback.type)
    ]
