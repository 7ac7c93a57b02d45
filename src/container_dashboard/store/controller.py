"""Session and store controller.

Owns the single :class:`AppState` of the process. All mutations go through
the methods below, which apply one of the pure functions in
:mod:`.operations` under a lock and swap the result in.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping, Optional

from . import operations
from .state import AppState, initial_state
from ..config import settings
from ..errors import AuthenticationError
from ..models.domain import THEMES, User
from ..persistence.preferences import PreferenceStore
from ..security import hash_password

logger = logging.getLogger(__name__)


class StoreController:
    def __init__(
        self,
        state: AppState,
        preferences: Optional[PreferenceStore] = None,
        *,
        theme_key: Optional[str] = None,
        bcrypt_rounds: Optional[int] = None,
    ) -> None:
        self._state = state
        self._lock = threading.RLock()
        self.preferences = preferences or PreferenceStore()
        self.theme_key = theme_key or settings.theme_key
        self.bcrypt_rounds = bcrypt_rounds

    @classmethod
    def from_fixtures(
        cls,
        preferences: Optional[PreferenceStore] = None,
        *,
        password: Optional[str] = None,
        bcrypt_rounds: Optional[int] = None,
    ) -> "StoreController":
        """Seed a controller and re-apply the stored theme, if any."""

        controller = cls(
            initial_state(settings.default_theme, password=password, rounds=bcrypt_rounds),
            preferences,
            bcrypt_rounds=bcrypt_rounds,
        )
        controller.load_theme()
        return controller

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def current_user(self) -> Optional[User]:
        return self._state.current_user

    def _apply(self, transition: Callable[[AppState], AppState]) -> AppState:
        with self._lock:
            self._state = transition(self._state)
            return self._state

    # Session

    def login(self, username: str, password: str) -> User:
        try:
            # Checked against a snapshot, outside the lock.
            user = operations.authenticate(self._state, username, password)
            state = self._apply(lambda current: operations.sign_in(current, user))
        except AuthenticationError:
            logger.warning("Rejected login for username '%s'", username)
            raise
        logger.info("User '%s' logged in", username)
        return state.current_user  # type: ignore[return-value]

    def logout(self) -> AppState:
        user = self.current_user
        state = self._apply(operations.logout)
        if user is not None:
            logger.info("User '%s' logged out", user.username)
        return state

    def _actor(self) -> Optional[str]:
        user = self.current_user
        return user.username if user else None

    # Theme

    def load_theme(self) -> AppState:
        stored = self.preferences.get(self.theme_key)
        if stored is None:
            return self._state
        if stored not in THEMES:
            logger.warning("Ignoring stored theme %r", stored)
            return self._state
        return self._apply(lambda current: current if current.theme == stored else operations.toggle_theme(current))

    def toggle_theme(self) -> AppState:
        with self._lock:
            state = operations.toggle_theme(self._state)
            self.preferences.set(self.theme_key, state.theme)
            self._state = state
        logger.info("Theme switched to %s", state.theme)
        return state

    # Users

    def _hash(self, password: str) -> str:
        return hash_password(password, rounds=self.bcrypt_rounds)

    def create_user(self, data: Mapping[str, Any]) -> AppState:
        password_hash = self._hash(data.get("password") or settings.demo_password)
        state = self._apply(lambda current: operations.create_user(current, data, password_hash=password_hash))
        logger.info("Created user '%s' (%s)", data.get("username"), state.users[-1].id)
        return state

    def update_user(self, user_id: str, patch: Mapping[str, Any]) -> AppState:
        password_hash = self._hash(patch["password"]) if patch.get("password") else None
        state = self._apply(
            lambda current: operations.update_user(current, user_id, patch, password_hash=password_hash)
        )
        logger.info("Updated user %s", user_id)
        return state

    def delete_user(self, user_id: str) -> AppState:
        state = self._apply(lambda current: operations.delete_user(current, user_id))
        logger.info("Deleted user %s", user_id)
        return state

    # Containers

    def create_container(self, data: Mapping[str, Any]) -> AppState:
        actor = self._actor()
        state = self._apply(lambda current: operations.create_container(current, data, actor=actor))
        logger.info("Created container %s (%s)", data.get("code"), state.containers[-1].id)
        return state

    def update_container(self, container_id: str, patch: Mapping[str, Any]) -> AppState:
        actor = self._actor()
        state = self._apply(lambda current: operations.update_container(current, container_id, patch, actor=actor))
        logger.info("Updated container %s", container_id)
        return state

    def delete_container(self, container_id: str) -> AppState:
        state = self._apply(lambda current: operations.delete_container(current, container_id))
        logger.info("Deleted container %s", container_id)
        return state

    # Feedback

    def create_feedback(self, data: Mapping[str, Any]) -> AppState:
        author = self.current_user
        state = self._apply(lambda current: operations.create_feedback(current, data, author=author))
        logger.info("Created %s feedback %s", state.feedbacks[-1].type, state.feedbacks[-1].id)
        return state

    def update_feedback(self, feedback_id: str, patch: Mapping[str, Any]) -> AppState:
        actor = self._actor()
        state = self._apply(lambda current: operations.update_feedback(current, feedback_id, patch, actor=actor))
        logger.info("Updated feedback %s", feedback_id)
        return state

    def mark_feedback_reviewed(self, feedback_id: str) -> AppState:
        state = self._apply(lambda current: operations.mark_feedback_reviewed(current, feedback_id))
        logger.info("Marked feedback %s as reviewed", feedback_id)
        return state

    def respond_to_feedback(self, feedback_id: str, response: str) -> AppState:
        actor = self._actor()
        state = self._apply(
            lambda current: operations.respond_to_feedback(current, feedback_id, response, actor=actor)
        )
        logger.info("Responded to feedback %s", feedback_id)
        return state
