from __future__ import annotations

import logging
from typing import Iterator, List

from .entities import Entity

logger = logging.getLogger(__name__)


class EntityRoster:
    """Ordered entity collection with an explicit handle on the player.

    The player is always the first entry and survives ``reset()``; everything
    else belongs to the current level and is dropped when a new one is built.
    """

    def __init__(self, player: Entity) -> None:
        self.player = player
        self._entities: List[Entity] = [player]

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return any(e is entity for e in self._entities)

    @property
    def entities(self) -> List[Entity]:
        return list(self._entities)

    def add(self, entity: Entity) -> None:
        if entity is self.player:
            raise ValueError("The player is already part of the roster")
        self._entities.append(entity)

    def reset(self) -> None:
        dropped = len(self._entities) - 1
        self._entities = [self.player]
        logger.debug("Roster reset: dropped %d entities, kept player '%s'", dropped, self.player.name)

    def others(self) -> List[Entity]:
        """Every entity except the player."""
        return [e for e in self._entities if e is not self.player]

    def at(self, x: int, y: int) -> List[Entity]:
        return [e for e in self._entities if e.x == x and e.y == y]
