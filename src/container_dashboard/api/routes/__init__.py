"""Route group exports."""

from . import containers, dashboard, feedback, health, session, users, warehouses

__all__ = ["containers", "dashboard", "feedback", "health", "session", "users", "warehouses"]
