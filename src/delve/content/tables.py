from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, NamedTuple, Sequence, Tuple, Union

from ..core.random import WeightedDistribution
from ..exceptions import ContentTableError

logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    """From dungeon level ``level`` onwards the table yields ``value``."""

    level: int
    value: int


TransitionLike = Union[Transition, Tuple[int, int]]


def from_dungeon_level(table: Sequence[TransitionLike], level: int) -> int:
    """Value of the highest transition whose level is <= ``level``; 0 if none applies.

    ``table`` may be in any order.
    """
    for threshold, value in sorted(table, key=lambda t: t[0], reverse=True):
        if level >= threshold:
            return value
    return 0


class LevelTable:
    """Depth-to-value step function.

    Transitions are sorted on construction; two transitions for the same level
    are rejected.
    """

    def __init__(self, transitions: Iterable[TransitionLike] = ()) -> None:
        ordered = sorted((Transition(int(lv), int(v)) for lv, v in transitions), key=lambda t: t.level)
        for prev, cur in zip(ordered, ordered[1:]):
            if cur.level <= prev.level:
                raise ContentTableError(f"Duplicate transition for level {cur.level}: {ordered}")
        self._transitions: Tuple[Transition, ...] = tuple(ordered)

    @classmethod
    def constant(cls, value: int) -> "LevelTable":
        return cls([Transition(0, value)])

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return self._transitions

    def value_at(self, level: int) -> int:
        return from_dungeon_level(self._transitions, level)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LevelTable):
            return NotImplemented
        return self._transitions == other._transitions

    def __repr__(self) -> str:
        return f"LevelTable({list(self._transitions)!r})"


def _weighted(weights: Mapping[str, LevelTable], level: int, what: str) -> WeightedDistribution[str]:
    entries: List[Tuple[str, int]] = [(key, table.value_at(level)) for key, table in weights.items()]
    try:
        return WeightedDistribution(entries)
    except ContentTableError as e:
        raise ContentTableError(f"Invalid {what} weights at level {level}: {e}") from e


@dataclass(frozen=True)
class SpawnTables:
    """Per-room spawn limits and per-type weights, all keyed by dungeon depth.

    Instances are read-only; the bundled defaults are cached and shared.
    """

    max_monsters: LevelTable
    max_items: LevelTable
    monster_weights: Mapping[str, LevelTable] = field(default_factory=dict)
    item_weights: Mapping[str, LevelTable] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "monster_weights", MappingProxyType(dict(self.monster_weights)))
        object.__setattr__(self, "item_weights", MappingProxyType(dict(self.item_weights)))

    def max_monsters_at(self, level: int) -> int:
        return self.max_monsters.value_at(level)

    def max_items_at(self, level: int) -> int:
        return self.max_items.value_at(level)

    def monster_distribution(self, level: int) -> WeightedDistribution[str]:
        return _weighted(self.monster_weights, level, "monster")

    def item_distribution(self, level: int) -> WeightedDistribution[str]:
        return _weighted(self.item_weights, level, "item")


__all__ = ["Transition", "LevelTable", "SpawnTables", "from_dungeon_level"]
