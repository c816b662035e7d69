from collections import deque
from itertools import combinations

import pytest

from delve import MAP_HEIGHT, MAP_WIDTH, generate_level, is_blocked
from delve.config import GenerationSettings
from delve.core.random import RandomSource
from delve.dungeon.generator import LevelGenerator
from delve.exceptions import GenerationError
from delve.world.colors import WHITE
from delve.world.entities import Entity, new_player
from delve.world.roster import EntityRoster

SEEDS = [1, 7, 42, 1234, 99999]


def generate(seed, depth=1, settings=None):
    roster = EntityRoster(new_player())
    layout = LevelGenerator(settings).generate(roster, depth, RandomSource(seed=seed))
    return roster, layout


def reachable_from(grid, start):
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if grid.in_bounds(nx, ny) and (nx, ny) not in seen and not grid.tiles[nx][ny].blocked:
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def snapshot(grid):
    return [[t.blocked for t in column] for column in grid.tiles]


@pytest.mark.parametrize("seed", SEEDS)
def test_grid_has_fixed_dimensions(seed):
    _roster, layout = generate(seed)
    grid = layout.grid
    assert (grid.width, grid.height) == (MAP_WIDTH, MAP_HEIGHT) == (80, 43)
    assert len(grid.tiles) == 80
    assert all(len(column) == 43 for column in grid.tiles)
    assert all(isinstance(t.blocked, bool) for column in grid.tiles for t in column)


@pytest.mark.parametrize("seed", SEEDS)
def test_accepted_rooms_never_intersect(seed):
    _roster, layout = generate(seed)
    assert layout.rooms
    for a, b in combinations(layout.rooms, 2):
        assert not a.intersects(b)


@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_stay_inside_the_map(seed):
    _roster, layout = generate(seed)
    for room in layout.rooms:
        assert 0 <= room.x1 and room.x2 < MAP_WIDTH
        assert 0 <= room.y1 and room.y2 < MAP_HEIGHT


@pytest.mark.parametrize("seed", SEEDS)
def test_player_starts_in_first_room(seed):
    roster, layout = generate(seed)
    assert roster.player.pos == layout.rooms[0].center()
    assert roster.entities[0] is roster.player


@pytest.mark.parametrize("seed", SEEDS)
def test_stairs_in_last_room(seed):
    roster, layout = generate(seed)
    stairs = layout.stairs
    assert stairs.pos == layout.rooms[-1].center()
    assert stairs.glyph == "<"
    assert not stairs.blocks
    assert stairs.always_visible
    assert roster.entities[-1] is stairs


@pytest.mark.parametrize("seed", SEEDS)
def test_every_room_reachable_from_player(seed):
    roster, layout = generate(seed)
    seen = reachable_from(layout.grid, roster.player.pos)
    for room in layout.rooms:
        assert room.center() in seen
    assert layout.stairs.pos in seen


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("depth", [1, 5, 9])
def test_content_only_on_free_floor(seed, depth):
    roster, layout = generate(seed, depth)
    monsters = [e for e in roster.others() if e.fighter is not None]
    for e in roster.others():
        assert not layout.grid.tiles[e.x][e.y].blocked
        assert any(r.contains_interior(e.x, e.y) for r in layout.rooms)
    positions = [m.pos for m in monsters]
    assert len(positions) == len(set(positions)), "two monsters share a tile"


def test_regeneration_discards_previous_level():
    roster, _layout = generate(3, depth=4)
    player = roster.player
    stale = roster.others()
    assert stale
    roster.add(Entity(1, 1, "x", "leftover", WHITE, blocks=False))

    grid = generate_level(roster, 5, RandomSource(seed=4))
    assert roster.player is player
    assert roster.entities[0] is player
    assert not any(e in roster for e in stale)
    assert all(e.name != "leftover" for e in roster)
    assert not is_blocked(player.x, player.y, grid, [])


@pytest.mark.parametrize("seed", SEEDS)
def test_same_seed_same_level(seed):
    roster_a, a = generate(seed, depth=6)
    roster_b, b = generate(seed, depth=6)
    assert snapshot(a.grid) == snapshot(b.grid)
    assert a.rooms == b.rooms
    assert [(e.name, e.pos) for e in roster_a] == [(e.name, e.pos) for e in roster_b]


def test_master_seed_reproduces_levels_per_depth():
    settings = GenerationSettings(seed="run-abc")
    gen = LevelGenerator(settings)
    ra, rb = EntityRoster(new_player()), EntityRoster(new_player())
    a = gen.generate(ra, 3)
    gen.generate(EntityRoster(new_player()), 8)  # unrelated draw in between
    b = gen.generate(rb, 3)
    assert snapshot(a.grid) == snapshot(b.grid)
    assert [(e.name, e.pos) for e in ra] == [(e.name, e.pos) for e in rb]

    other = gen.generate(EntityRoster(new_player()), 4)
    assert snapshot(other.grid) != snapshot(a.grid) or other.rooms != a.rooms


def test_different_seeds_differ():
    _ra, a = generate(11)
    _rb, b = generate(12)
    assert a.rooms != b.rooms


def test_deeper_levels_can_spawn_trolls():
    names = set()
    for seed in range(10):
        roster, _ = generate(seed, depth=8)
        names.update(e.name for e in roster.others())
    assert "troll" in names
    assert "orc" in names


def test_shallow_levels_never_spawn_trolls():
    for seed in range(10):
        roster, _ = generate(seed, depth=1)
        assert all(e.name != "troll" for e in roster)


def test_zero_rooms_fails_fast():
    roster = EntityRoster(new_player())
    with pytest.raises(GenerationError):
        LevelGenerator(GenerationSettings(max_rooms=0)).generate(roster, 1, RandomSource(seed=1))


def test_negative_depth_rejected():
    with pytest.raises(GenerationError):
        LevelGenerator().generate(EntityRoster(new_player()), -1)


def test_small_custom_map():
    settings = GenerationSettings(width=20, height=15, room_min_size=4, room_max_size=6, max_rooms=10)
    roster = EntityRoster(new_player())
    grid = generate_level(roster, 2, RandomSource(seed=8), settings)
    assert (grid.width, grid.height) == (20, 15)
    assert not grid.tiles[roster.player.x][roster.player.y].blocked
