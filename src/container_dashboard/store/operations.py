"""Pure state transitions for the dashboard store.

Every function takes the current :class:`AppState` and returns the next one.
Nothing here mutates its input. Update and delete calls that name an unknown
id return the state they were given, unchanged. ``login`` is the only
operation that can fail.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Mapping, Optional, Sequence, TypeVar

from . import identifiers
from .state import AppState
from ..config import settings
from ..errors import AuthenticationError
from ..models.domain import FEEDBACK_STATUSES, Container, Dimensions, Feedback, User
from ..security import hash_password, verify_password

T = TypeVar("T")

_IMMUTABLE_KEYS = frozenset({"id", "created_at"})
_RESPONSE_KEYS = ("response", "responded_by", "responded_at")


def _field_names(record_type: type) -> frozenset[str]:
    return frozenset(item.name for item in fields(record_type))


def _clean_patch(record_type: type, patch: Mapping[str, Any]) -> dict[str, Any]:
    """Drop immutable and unknown keys from a patch."""
    allowed = _field_names(record_type) - _IMMUTABLE_KEYS
    return {key: value for key, value in patch.items() if key in allowed}


def find_record(records: Sequence[T], record_id: str) -> Optional[T]:
    for record in records:
        if record.id == record_id:  # type: ignore[attr-defined]
            return record
    return None


def _replace_record(records: tuple[T, ...], updated: T) -> tuple[T, ...]:
    return tuple(updated if record.id == updated.id else record for record in records)  # type: ignore[attr-defined]


def _remove_record(records: tuple[T, ...], record_id: str) -> tuple[T, ...]:
    return tuple(record for record in records if record.id != record_id)  # type: ignore[attr-defined]


def _coerce_dimensions(value: Any) -> Dimensions:
    if isinstance(value, Dimensions):
        return value
    return Dimensions(
        length=float(value["length"]),
        width=float(value["width"]),
        height=float(value["height"]),
    )


# ── Session ─────────────────────────────────────────────────


def _active_user(state: AppState, username: str) -> Optional[User]:
    return next(
        (candidate for candidate in state.users if candidate.username == username and candidate.is_active),
        None,
    )


def authenticate(state: AppState, username: str, password: str) -> User:
    """Return the active user matching the credentials or raise."""
    user = _active_user(state, username)
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError()
    return user


def sign_in(state: AppState, user: User) -> AppState:
    """Make ``user`` the current identity if its record is still unchanged."""
    if _active_user(state, user.username) != user:
        raise AuthenticationError()
    return replace(state, current_user=user)


def login(state: AppState, username: str, password: str) -> AppState:
    return sign_in(state, authenticate(state, username, password))


def logout(state: AppState) -> AppState:
    return replace(state, current_user=None)


def toggle_theme(state: AppState) -> AppState:
    return replace(state, theme="dark" if state.theme == "light" else "light")


# ── Users ───────────────────────────────────────────────────


def create_user(
    state: AppState,
    data: Mapping[str, Any],
    *,
    password_hash: Optional[str] = None,
    rounds: Optional[int] = None,
) -> AppState:
    """Append a user. ``password_hash``, when given, is used instead of hashing here."""
    if password_hash is None:
        password_hash = hash_password(data.get("password") or settings.demo_password, rounds=rounds)
    user = User(
        id=identifiers.new_id(),
        username=data["username"],
        email=data["email"],
        role=data.get("role", "user"),
        name=data["name"],
        created_at=identifiers.utc_now(),
        is_active=data.get("is_active", True),
        password_hash=password_hash,
    )
    return replace(state, users=state.users + (user,))


def update_user(
    state: AppState,
    user_id: str,
    patch: Mapping[str, Any],
    *,
    password_hash: Optional[str] = None,
    rounds: Optional[int] = None,
) -> AppState:
    current = find_record(state.users, user_id)
    if current is None:
        return state

    changes = _clean_patch(User, patch)
    # The hash is only ever derived from a plaintext password.
    changes.pop("password_hash", None)
    if password_hash is None and patch.get("password"):
        password_hash = hash_password(patch["password"], rounds=rounds)
    if password_hash is not None:
        changes["password_hash"] = password_hash

    updated = replace(current, **changes)
    current_user = state.current_user
    if current_user is not None and current_user.id == user_id:
        current_user = updated
    return replace(state, users=_replace_record(state.users, updated), current_user=current_user)


def delete_user(state: AppState, user_id: str) -> AppState:
    if find_record(state.users, user_id) is None:
        return state
    return replace(state, users=_remove_record(state.users, user_id))


# ── Containers ──────────────────────────────────────────────


def create_container(state: AppState, data: Mapping[str, Any], *, actor: Optional[str] = None) -> AppState:
    now = identifiers.utc_now()
    container = Container(
        id=identifiers.new_id(),
        code=data["code"],
        type=data.get("type", "20ft Standard"),
        status=data.get("status", "in_transit"),
        warehouse_id=data.get("warehouse_id", ""),
        notes=data.get("notes", ""),
        location=data.get("location", ""),
        weight=data.get("weight", 0),
        dimensions=_coerce_dimensions(data.get("dimensions", {"length": 6, "width": 2.4, "height": 2.6})),
        created_at=now,
        updated_at=now,
        last_updated_by=actor or data.get("last_updated_by", ""),
    )
    return replace(state, containers=state.containers + (container,))


def update_container(
    state: AppState,
    container_id: str,
    patch: Mapping[str, Any],
    *,
    actor: Optional[str] = None,
) -> AppState:
    current = find_record(state.containers, container_id)
    if current is None:
        return state

    changes = _clean_patch(Container, patch)
    if "dimensions" in changes:
        changes["dimensions"] = _coerce_dimensions(changes["dimensions"])
    if actor:
        changes["last_updated_by"] = actor
    changes["updated_at"] = identifiers.later_than(current.updated_at)

    updated = replace(current, **changes)
    return replace(state, containers=_replace_record(state.containers, updated))


def delete_container(state: AppState, container_id: str) -> AppState:
    if find_record(state.containers, container_id) is None:
        return state
    return replace(state, containers=_remove_record(state.containers, container_id))


# ── Feedback ────────────────────────────────────────────────


def create_feedback(state: AppState, data: Mapping[str, Any], *, author: Optional[User] = None) -> AppState:
    """Append a new ``pending`` feedback. Author fields default to ``author``."""

    feedback = Feedback(
        id=identifiers.new_id(),
        user_id=data.get("user_id") or (author.id if author else ""),
        user_name=data.get("user_name") or (author.name if author else ""),
        container_id=data.get("container_id") or None,
        message=data["message"],
        type=data.get("type", "general"),
        status="pending",
        created_at=identifiers.utc_now(),
    )
    return replace(state, feedbacks=state.feedbacks + (feedback,))


def update_feedback(
    state: AppState,
    feedback_id: str,
    patch: Mapping[str, Any],
    *,
    actor: Optional[str] = None,
) -> AppState:
    """Merge ``patch`` into a feedback record.

    Status never moves backwards; a regressing status in the patch is ignored.
    Response fields are written only on the transition into ``resolved``, all
    three together, with ``responded_at`` stamped here.
    """

    current = find_record(state.feedbacks, feedback_id)
    if current is None:
        return state

    changes = _clean_patch(Feedback, patch)
    for key in _RESPONSE_KEYS:
        changes.pop(key, None)
    if "container_id" in changes:
        changes["container_id"] = changes["container_id"] or None

    requested = changes.pop("status", current.status)
    if FEEDBACK_STATUSES.index(requested) > FEEDBACK_STATUSES.index(current.status):
        changes["status"] = requested
        if requested == "resolved":
            changes["response"] = patch.get("response") or current.response or ""
            changes["responded_by"] = patch.get("responded_by") or actor or ""
            changes["responded_at"] = identifiers.utc_now()

    updated = replace(current, **changes)
    return replace(state, feedbacks=_replace_record(state.feedbacks, updated))


def mark_feedback_reviewed(state: AppState, feedback_id: str) -> AppState:
    current = find_record(state.feedbacks, feedback_id)
    if current is None or current.status != "pending":
        return state
    return update_feedback(state, feedback_id, {"status": "reviewed"})


def respond_to_feedback(
    state: AppState,
    feedback_id: str,
    response: str,
    *,
    actor: Optional[str] = None,
) -> AppState:
    if not response.strip():
        return state
    return update_feedback(state, feedback_id, {"status": "resolved", "response": response}, actor=actor)
