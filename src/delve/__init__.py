from importlib.metadata import PackageNotFoundError, version

from .config import MAP_HEIGHT, MAP_WIDTH, GenerationSettings
from .core.random import RandomSource
from .dungeon.generator import LevelGenerator, LevelLayout, generate_level
from .dungeon.tiles import TileGrid, is_blocked
from .world.entities import Entity, new_player
from .world.roster import EntityRoster

__all__ = [
    "__version__",
    "Entity",
    "EntityRoster",
    "GenerationSettings",
    "LevelGenerator",
    "LevelLayout",
    "MAP_HEIGHT",
    "MAP_WIDTH",
    "RandomSource",
    "TileGrid",
    "generate_level",
    "is_blocked",
    "new_player",
]

try:
    __version__ = version("delve")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
