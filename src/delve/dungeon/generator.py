from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..config import GenerationSettings
from ..content.archetypes import DEFAULT_ARCHETYPES, ArchetypeRegistry
from ..content.loader import default_spawn_tables, load_spawn_tables
from ..content.placement import place_objects
from ..content.tables import SpawnTables
from ..core.random import RandomSource
from ..exceptions import GenerationError
from ..rng import RNGManager
from ..world.entities import Entity, new_stairs
from ..world.roster import EntityRoster
from .rect import Rect
from .tiles import TileGrid, carve_h_tunnel, carve_room, carve_v_tunnel, create_grid

logger = logging.getLogger(__name__)


@dataclass
class LevelLayout:
    """Everything one generation call produced.

    ``rooms`` are in acceptance order: the player starts in the first, the stairs
    sit in the last.
    """

    depth: int
    grid: TileGrid
    rooms: List[Rect]
    stairs: Entity


class LevelGenerator:
    """Rooms-and-tunnels level generator.

    Rooms are proposed at random, rejected when they touch an accepted room,
    populated as they are accepted, and chained to the previous accepted room
    with an L-shaped tunnel.
    """

    def __init__(
        self,
        settings: Optional[GenerationSettings] = None,
        tables: Optional[SpawnTables] = None,
        archetypes: ArchetypeRegistry = DEFAULT_ARCHETYPES,
    ) -> None:
        self.settings = (settings or GenerationSettings()).validate()
        if tables is None:
            tables = (
                load_spawn_tables(self.settings.spawn_tables, archetypes)
                if self.settings.spawn_tables
                else default_spawn_tables()
            )
        self.tables = tables
        self.archetypes = archetypes

    def source_for(self, depth: int) -> RandomSource:
        if self.settings.seed is not None:
            return RNGManager(self.settings.seed).level_source(depth)
        return RandomSource()

    def generate(self, roster: EntityRoster, depth: int, rng: Optional[RandomSource] = None) -> LevelLayout:
        if depth < 0:
            raise GenerationError(f"Dungeon depth must be non-negative, got {depth}")
        if roster.player is None:
            raise GenerationError("Roster has no player to place")
        if rng is None:
            rng = self.source_for(depth)

        s = self.settings
        grid = create_grid(s.width, s.height)
        roster.reset()
        rooms: List[Rect] = []

        for _ in range(s.max_rooms):
            w = rng.randint(s.room_min_size, s.room_max_size)
            h = rng.randint(s.room_min_size, s.room_max_size)
            x = rng.randint(0, s.width - w - 1)
            y = rng.randint(0, s.height - h - 1)
            new_room = Rect.from_size(x, y, w, h)

            if any(new_room.intersects(other) for other in rooms):
                continue

            carve_room(grid, new_room)
            place_objects(new_room, grid, roster, depth, rng, self.tables, self.archetypes)

            new_x, new_y = new_room.center()
            if not rooms:
                roster.player.set_pos(new_x, new_y)
            else:
                prev_x, prev_y = rooms[-1].center()
                if rng.coin_flip():
                    carve_h_tunnel(grid, prev_x, new_x, prev_y)
                    carve_v_tunnel(grid, prev_y, new_y, new_x)
                else:
                    carve_v_tunnel(grid, prev_y, new_y, prev_x)
                    carve_h_tunnel(grid, prev_x, new_x, new_y)
            rooms.append(new_room)

        if not rooms:
            raise GenerationError(
                f"No room could be placed in {s.max_rooms} attempts on a {s.width}x{s.height} map"
            )

        stairs = new_stairs(*rooms[-1].center())
        roster.add(stairs)

        logger.info(
            "Generated level %d: %d rooms, %d entities, %d floor tiles",
            depth,
            len(rooms),
            len(roster),
            grid.floor_count(),
        )
        return LevelLayout(depth=depth, grid=grid, rooms=rooms, stairs=stairs)


def generate_level(
    roster: EntityRoster,
    depth: int,
    rng: Optional[RandomSource] = None,
    settings: Optional[GenerationSettings] = None,
) -> TileGrid:
    """Build a fresh level for ``depth``.

    Every entity but the player is discarded; the player is moved to the
    center of the first room. Returns the new tile grid.
    """
    return LevelGenerator(settings).generate(roster, depth, rng).grid


__all__ = ["LevelGenerator", "LevelLayout", "generate_level"]
