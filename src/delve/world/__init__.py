from .entities import (
    Ai,
    DeathCallback,
    Entity,
    Equipment,
    Fighter,
    ItemKind,
    Slot,
    new_player,
    new_stairs,
)
from .roster import EntityRoster

__all__ = [
    "Ai",
    "DeathCallback",
    "Entity",
    "EntityRoster",
    "Equipment",
    "Fighter",
    "ItemKind",
    "Slot",
    "new_player",
    "new_stairs",
]
