"""Settings management utilities for Note Keeper configuration.

Updates:
  v0.2.0 - 2026-10-10 - Load .env values through python-dotenv alongside the environment.
  v0.1.1 - 2026-10-08 - Accept comma-separated or JSON category lists.
  v0.1.0 - 2026-10-05 - Introduce NoteKeeperSettings with JSON/env precedence.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from core.category_registry import DEFAULT_CATEGORIES

_DOTENV_FALLBACK_PATH = ".env"

DEFAULT_DB_PATH = Path("data") / "note_keeper.db"
DEFAULT_STORAGE_LOCATION = "C:/Notes"

logger = logging.getLogger("note_keeper.settings")


def _read_dotenv_values() -> dict[str, str]:
    """Load ``.env`` entries into a mapping without mutating ``os.environ``."""
    env_file_override = os.getenv("NOTE_KEEPER_ENV_FILE")
    if env_file_override is not None:
        candidate = env_file_override.strip()
        if not candidate:
            return {}
        path = Path(candidate).expanduser()
    else:
        path = Path(_DOTENV_FALLBACK_PATH).expanduser()
    if not path.is_file():
        return {}
    raw_values = dotenv_values(str(path))
    return {str(key): str(value) for key, value in raw_values.items() if value is not None}


class SettingsError(Exception):
    """Raised when Note Keeper configuration cannot be loaded or validated."""


class NoteKeeperSettings(BaseSettings):
    """Application configuration sourced from environment variables or JSON files."""

    db_path: Path = Field(default=DEFAULT_DB_PATH)
    storage_location: str = Field(
        default=DEFAULT_STORAGE_LOCATION,
        description="Folder shown in the storage settings dialog; not used for I/O.",
    )
    categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Categories offered when editing a note.",
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": "NOTE_KEEPER_",
            "case_sensitive": False,
            "extra": "ignore",
        },
    )

    @field_validator("db_path", mode="before")
    def _normalise_path(cls, value: Any) -> Path:
        """Expand user home markers in the database path."""
        if value in (None, ""):
            return DEFAULT_DB_PATH
        return Path(str(value)).expanduser()

    @field_validator("storage_location", mode="before")
    def _strip_location(cls, value: object) -> str:
        if value is None:
            return DEFAULT_STORAGE_LOCATION
        return str(value).strip()

    @field_validator("categories", mode="before")
    def _parse_categories(cls, value: Any) -> list[str]:
        """Accept a list, a JSON array string, or a comma-separated string."""
        if value in (None, "", []):
            return list(DEFAULT_CATEGORIES)
        if isinstance(value, str):
            stripped = value.strip()
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError:
                parsed = [part for part in stripped.split(",")]
            value = parsed
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise ValueError("categories must be a list of labels")
        cleaned: list[str] = []
        for entry in cast("Sequence[object]", value):
            label = str(entry).strip()
            if label and label not in cleaned:
                cleaned.append(label)
        return cleaned or list(DEFAULT_CATEGORIES)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(db_path="...")).
            2. JSON configuration file (application settings).
            3. Environment variables / ``.env`` entries.
            4. File secrets.
        """

        def env_with_aliases(_: BaseSettings | None = None) -> dict[str, Any]:
            data: dict[str, Any] = {}
            config_dict = cast("dict[str, Any]", cls.model_config)
            prefix = str(config_dict.get("env_prefix", ""))
            dotenv = _read_dotenv_values()

            def _lookup(candidate: str) -> str | None:
                value = os.getenv(candidate)
                if value is None:
                    value = dotenv.get(candidate)
                if value is None:
                    return None
                stripped_value = str(value).strip()
                return stripped_value or None

            mapping = {
                "db_path": ["DB_PATH", "DATABASE_PATH"],
                "storage_location": ["STORAGE_LOCATION"],
                "categories": ["CATEGORIES"],
            }
            for field, keys in mapping.items():
                for key in keys:
                    value = _lookup(f"{prefix}{key}")
                    if value is not None:
                        data[field] = value
                        break
            return data

        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            cast("PydanticBaseSettingsSource", env_with_aliases),
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv("NOTE_KEEPER_CONFIG_JSON")
            candidates: list[Path] = []
            if explicit_path:
                candidates.append(Path(explicit_path).expanduser())
            candidates.append((Path("config") / "config.json").expanduser())

            for path in candidates:
                if not path.exists():
                    if explicit_path and path == candidates[0]:
                        raise SettingsError(f"Configuration file not found: {path}")
                    continue
                try:
                    raw_contents = path.read_text(encoding="utf-8")
                except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                    raise SettingsError(f"Unable to read configuration file: {path}") from exc
                try:
                    data = json.loads(raw_contents)
                except json.JSONDecodeError as exc:
                    raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
                if not isinstance(data, dict):
                    message = f"Configuration file {path} must contain a JSON object"
                    raise SettingsError(message)
                mapping_data = cast("Mapping[object, Any]", data)
                data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
                mapped: dict[str, Any] = {}
                if "database_path" in data_dict and "db_path" not in data_dict:
                    mapped["db_path"] = data_dict["database_path"]
                for key in ("db_path", "storage_location", "categories"):
                    if key in data_dict:
                        mapped[key] = data_dict[key]
                unknown = sorted(
                    key
                    for key in data_dict
                    if key not in mapped and key != "database_path"
                )
                if unknown:
                    logger.warning(
                        "Ignoring unknown key(s) %s in configuration file %s",
                        ", ".join(unknown),
                        path,
                    )
                return mapped
            return {}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> NoteKeeperSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return NoteKeeperSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Note Keeper configuration") from exc


__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_STORAGE_LOCATION",
    "NoteKeeperSettings",
    "SettingsError",
    "load_settings",
]
