"""File-backed key-value store for UI preferences."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..config import settings

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Thin wrapper around a single JSON object stored under the data root."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or settings.preferences_path).resolve()

    def read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable preference file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preference file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self.read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
