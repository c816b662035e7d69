from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Shared with the renderer
MAP_WIDTH = 80
MAP_HEIGHT = 43

ROOM_MIN_SIZE = 6
ROOM_MAX_SIZE = 10
MAX_ROOMS = 30

_ENV_VARS = {
    "width": "DELVE_WIDTH",
    "height": "DELVE_HEIGHT",
    "room_min_size": "DELVE_ROOM_MIN",
    "room_max_size": "DELVE_ROOM_MAX",
    "max_rooms": "DELVE_MAX_ROOMS",
    "seed": "DELVE_SEED",
    "spawn_tables": "DELVE_SPAWN_TABLES",
}


@dataclass(frozen=True)
class GenerationSettings:
    """Parameters of the room-and-corridor generator.

    - room_min_size/room_max_size: inclusive bounds for room width and height,
      outer wall ring included.
    - max_rooms: number of placement attempts per level (not a room count).
    - seed: optional master seed; when set, each depth gets its own reproducible RNG.
    - spawn_tables: optional path to a YAML file replacing the bundled tables.
    """

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    room_min_size: int = ROOM_MIN_SIZE
    room_max_size: int = ROOM_MAX_SIZE
    max_rooms: int = MAX_ROOMS
    seed: Optional[str] = None
    spawn_tables: Optional[str] = None

    def validate(self) -> "GenerationSettings":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Map size must be positive, got {self.width}x{self.height}")
        if self.room_min_size < 3:
            raise ConfigError(f"room_min_size must be at least 3 to leave an interior, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ConfigError(
                f"room_max_size ({self.room_max_size}) must be smaller than the map ({self.width}x{self.height})"
            )
        if self.max_rooms < 0:
            raise ConfigError(f"max_rooms must be non-negative, got {self.max_rooms}")
        return self

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any]) -> "GenerationSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown generation settings: %s", ", ".join(unknown))
        values: Dict[str, Any] = {}
        for key in known & set(raw):
            value = raw[key]
            if value is None:
                continue
            if key in ("seed", "spawn_tables"):
                values[key] = str(value)
            else:
                try:
                    values[key] = int(value)
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"Setting '{key}' must be an integer, got {value!r}") from e
        return cls(**values).validate()

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "GenerationSettings":
        env = os.environ if environ is None else environ
        raw = {key: env[var] for key, var in _ENV_VARS.items() if env.get(var)}
        return cls.from_mapping(raw)

    @classmethod
    def from_yaml(cls, path: os.PathLike | str) -> "GenerationSettings":
        """Load settings from a YAML mapping. Missing fields fall back to defaults."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {p}")
        with p.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"{p}: expected a mapping at the top level")
        settings = cls.from_mapping(raw)
        logger.info("Loaded generation settings from %s", p)
        return settings

    def with_overrides(self, **changes: Any) -> "GenerationSettings":
        return replace(self, **{k: v for k, v in changes.items() if v is not None}).validate()


__all__ = ["GenerationSettings", "MAP_WIDTH", "MAP_HEIGHT"]
