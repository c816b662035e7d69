from .rect import Rect
from .tiles import Tile, TileGrid, carve_h_tunnel, carve_room, carve_v_tunnel, create_grid, is_blocked

__all__ = [
    "Rect",
    "Tile",
    "TileGrid",
    "carve_h_tunnel",
    "carve_room",
    "carve_v_tunnel",
    "create_grid",
    "is_blocked",
]
