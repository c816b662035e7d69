from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

from .rect import Rect

if TYPE_CHECKING:  # pragma: no cover
    from ..world.entities import Entity


@dataclass
class Tile:
    """Map tile flags."""

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)


class TileGrid:
    """Fixed-size tile map indexed as ``tiles[x][y]``.

    Coordinates are (x, y) with (0,0) at top-left; x grows to the right, y grows down.
    Accessors do not bounds-check: callers keep coordinates inside the grid.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Invalid map size")
        self.width = width
        self.height = height
        self.tiles: List[List[Tile]] = [[Tile.wall() for _ in range(height)] for _ in range(width)]

    def tile(self, x: int, y: int) -> Tile:
        return self.tiles[x][y]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        return self.tiles[x][y].blocked

    def carve(self, x: int, y: int) -> None:
        self.tiles[x][y] = Tile.empty()

    def floor_count(self) -> int:
        return sum(1 for column in self.tiles for t in column if not t.blocked)


def create_grid(width: int, height: int) -> TileGrid:
    return TileGrid(width, height)


def carve_room(grid: TileGrid, room: Rect) -> None:
    for x, y in room.interior():
        grid.carve(x, y)


def carve_h_tunnel(grid: TileGrid, x_a: int, x_b: int, y: int) -> None:
    for x in range(min(x_a, x_b), max(x_a, x_b) + 1):
        grid.carve(x, y)


def carve_v_tunnel(grid: TileGrid, y_a: int, y_b: int, x: int) -> None:
    for y in range(min(y_a, y_b), max(y_a, y_b) + 1):
        grid.carve(x, y)


def is_blocked(x: int, y: int, grid: TileGrid, entities: Iterable["Entity"]) -> bool:
    """True if the tile is a wall or a blocking entity stands on it."""
    if grid.tiles[x][y].blocked:
        return True
    return any(e.blocks and e.x == x and e.y == y for e in entities)
