"""Application configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CDB_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Container Dashboard API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Directory holding the preference file.")
    preferences_file: str = Field(
        default="preferences.json",
        description="Name of the key-value file, relative to data_root.",
    )
    theme_key: str = Field(default="theme", description="Key under which the theme preference is stored.")
    default_theme: Literal["light", "dark"] = "light"
    demo_password: str = Field(
        default="password",
        description="Secret hashed into every seeded account and into accounts created without one.",
    )
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    log_level: str = Field(default="INFO")
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> tuple[str, ...]:
        """Accept a JSON array, a comma-separated string or any iterable of origins."""
        if isinstance(value, str):
            text = value.strip()
            value = json.loads(text) if text.startswith("[") else text.split(",")
        return tuple(origin for origin in (str(item).strip() for item in value) if origin)

    @property
    def preferences_path(self) -> Path:
        return self.data_root / self.preferences_file


settings = Settings()
