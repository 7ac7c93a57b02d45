"""In-memory dashboard store."""

from .controller import StoreController
from .state import AppState, initial_state

__all__ = ["AppState", "StoreController", "initial_state"]
