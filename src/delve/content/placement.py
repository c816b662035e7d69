from __future__ import annotations

import logging
from typing import List, Tuple

from ..core.random import RandomSource
from ..dungeon.rect import Rect
from ..dungeon.tiles import TileGrid, is_blocked
from ..world.entities import Entity
from ..world.roster import EntityRoster
from .archetypes import DEFAULT_ARCHETYPES, ArchetypeRegistry
from .tables import SpawnTables

logger = logging.getLogger(__name__)


def random_interior_point(room: Rect, rng: RandomSource) -> Tuple[int, int]:
    x = rng.randint(room.x1 + 1, room.x2 - 1)
    y = rng.randint(room.y1 + 1, room.y2 - 1)
    return x, y


def place_objects(
    room: Rect,
    grid: TileGrid,
    roster: EntityRoster,
    depth: int,
    rng: RandomSource,
    tables: SpawnTables,
    archetypes: ArchetypeRegistry = DEFAULT_ARCHETYPES,
) -> List[Entity]:
    """Populate one room with monsters, then items.

    The drawn counts are upper bounds: a spot that is blocked when sampled is
    skipped, not retried. Returns the entities added to the roster.
    """
    placed: List[Entity] = []

    num_monsters = rng.randint(0, tables.max_monsters_at(depth))
    monster_dist = tables.monster_distribution(depth)
    for _ in range(num_monsters):
        x, y = random_interior_point(room, rng)
        if is_blocked(x, y, grid, roster):
            logger.debug("Monster spot (%d, %d) blocked; skipping", x, y)
            continue
        key = monster_dist.sample(rng)
        monster = archetypes.monster(key).spawn(x, y)
        roster.add(monster)
        placed.append(monster)

    num_items = rng.randint(0, tables.max_items_at(depth))
    item_dist = tables.item_distribution(depth)
    for _ in range(num_items):
        x, y = random_interior_point(room, rng)
        if is_blocked(x, y, grid, roster):
            logger.debug("Item spot (%d, %d) blocked; skipping", x, y)
            continue
        key = item_dist.sample(rng)
        item = archetypes.item(key).spawn(x, y)
        roster.add(item)
        placed.append(item)

    logger.debug(
        "Room %s: requested %d monsters / %d items, placed %d entities",
        room,
        num_monsters,
        num_items,
        len(placed),
    )
    return placed


__all__ = ["place_objects", "random_interior_point"]
