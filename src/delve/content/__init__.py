"""Level-scaled spawn tables, monster/item archetypes and room population."""

from .archetypes import DEFAULT_ARCHETYPES, ArchetypeRegistry, EquipmentSpec, ItemArchetype, MonsterArchetype
from .loader import default_spawn_tables, load_spawn_tables
from .placement import place_objects
from .tables import LevelTable, SpawnTables, Transition, from_dungeon_level

__all__ = [
    "ArchetypeRegistry",
    "DEFAULT_ARCHETYPES",
    "EquipmentSpec",
    "ItemArchetype",
    "LevelTable",
    "MonsterArchetype",
    "SpawnTables",
    "Transition",
    "default_spawn_tables",
    "from_dungeon_level",
    "load_spawn_tables",
    "place_objects",
]
