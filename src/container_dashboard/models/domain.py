"""Domain records for users, containers, warehouses and feedback."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

Role = Literal["admin", "staff", "user"]
ContainerStatus = Literal["in_transit", "arrived", "incident", "returning"]
WarehouseStatus = Literal["available", "full", "overloaded"]
FeedbackType = Literal["general", "complaint", "suggestion"]
FeedbackStatus = Literal["pending", "reviewed", "resolved"]
Theme = Literal["light", "dark"]

ROLES: tuple[str, ...] = ("admin", "staff", "user")
CONTAINER_STATUSES: tuple[str, ...] = ("in_transit", "arrived", "incident", "returning")
WAREHOUSE_STATUSES: tuple[str, ...] = ("available", "full", "overloaded")
FEEDBACK_TYPES: tuple[str, ...] = ("general", "complaint", "suggestion")
# Ordered: a feedback record only ever moves forward through this tuple.
FEEDBACK_STATUSES: tuple[str, ...] = ("pending", "reviewed", "resolved")
THEMES: tuple[str, ...] = ("light", "dark")


@dataclass(frozen=True, slots=True)
class User:
    """An account allowed to sign in to the dashboard."""

    id: str
    username: str
    email: str
    role: Role
    name: str
    created_at: datetime
    is_active: bool
    password_hash: str = field(default="", repr=False)


@dataclass(frozen=True, slots=True)
class Dimensions:
    length: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Container:
    """A shipping container tracked through transit, arrival, incident and return."""

    id: str
    code: str
    type: str
    status: ContainerStatus
    warehouse_id: str
    notes: str
    location: str
    weight: float
    dimensions: Dimensions
    created_at: datetime
    updated_at: datetime
    last_updated_by: str


@dataclass(frozen=True, slots=True)
class Warehouse:
    """A storage facility. ``status`` is assigned, not derived from the load."""

    id: str
    name: str
    location: str
    capacity: int
    current_load: int
    status: WarehouseStatus
    containers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Feedback:
    """A user-submitted message, optionally about one container."""

    id: str
    user_id: str
    user_name: str
    message: str
    type: FeedbackType
    status: FeedbackStatus
    created_at: datetime
    container_id: Optional[str] = None
    response: Optional[str] = None
    responded_by: Optional[str] = None
    responded_at: Optional[datetime] = None
