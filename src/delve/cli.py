from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from typing import Iterable, List, Optional

from . import __version__
from .config import GenerationSettings
from .dungeon.generator import LevelGenerator
from .dungeon.tiles import TileGrid
from .exceptions import ConfigError, ContentTableError, DataValidationError, GenerationError
from .logging_config import configure_logging
from .world.entities import Entity, new_player
from .world.roster import EntityRoster

logger = logging.getLogger(__name__)


def preview_lines(grid: TileGrid, entities: Iterable[Entity], player: Optional[Entity] = None) -> List[str]:
    """Plain-text dump of a level: '#' wall, '.' floor, entity glyphs on top, the player topmost."""
    rows = [["#" if grid.tiles[x][y].blocked else "." for x in range(grid.width)] for y in range(grid.height)]
    # blocking entities last so monsters cover items
    for e in sorted(entities, key=lambda e: e.blocks):
        rows[e.y][e.x] = e.glyph
    if player is not None:
        rows[player.y][player.x] = player.glyph
    return ["".join(r) for r in rows]


def population_summary(entities: Iterable[Entity]) -> str:
    counts = Counter(e.name for e in entities)
    return ", ".join(f"{name}={n}" for name, n in sorted(counts.items()))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="delve-gen", description="Generate and preview one dungeon level")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--depth", type=int, default=1, help="Dungeon level to generate (default: 1)")
    p.add_argument("--seed", default=None, help="Master seed for a reproducible level")
    p.add_argument("--config", default=None, help="YAML file with generation settings")
    p.add_argument("--tables", default=None, help="YAML file replacing the bundled spawn tables")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = GenerationSettings.from_yaml(args.config) if args.config else GenerationSettings.from_env()
        settings = settings.with_overrides(seed=args.seed, spawn_tables=args.tables)
        generator = LevelGenerator(settings)
        roster = EntityRoster(new_player())
        logger.info("Generating depth %d with %s", args.depth, settings)
        layout = generator.generate(roster, args.depth)
    except DataValidationError as e:
        print(e.to_human(), file=sys.stderr)
        return 2
    except (ConfigError, ContentTableError, GenerationError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for line in preview_lines(layout.grid, roster, roster.player):
        print(line)
    print(f"depth={layout.depth} rooms={len(layout.rooms)} {population_summary(roster.others())}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
