from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Generic, List, Sequence, Tuple, TypeVar

from ..exceptions import ContentTableError

logger = logging.getLogger(__name__)

K = TypeVar("K")


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests
    - provide helpers for weighted choice
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            # Non-deterministic seed using system random state
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b], both ends inclusive."""
        return self._rng.randint(a, b)

    def random(self) -> float:
        return self._rng.random()

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def weighted_choice(self, weights: "WeightedDistribution[K]") -> K:
        return weights.sample(self)


class WeightedDistribution(Generic[K]):
    """Categorical distribution over keys with non-negative integer weights.

    Validation happens at construction: an empty table, a negative weight or a
    table whose weights are all zero raises ContentTableError. Zero-weight
    categories are kept for introspection but can never be drawn.
    """

    def __init__(self, entries: Sequence[Tuple[K, int]]) -> None:
        if not entries:
            raise ContentTableError("Weighted distribution requires at least one category")
        keys: List[K] = []
        cumulative: List[int] = []
        total = 0
        for key, weight in entries:
            if weight < 0:
                raise ContentTableError(f"Weight for {key!r} must be non-negative, got {weight}")
            total += weight
            keys.append(key)
            cumulative.append(total)
        if total == 0:
            raise ContentTableError(
                "All weights are zero; cannot build a weighted distribution over %s" % (keys,)
            )
        self._entries = list(entries)
        self._keys = keys
        self._cumulative = cumulative
        self.total = total

    @property
    def entries(self) -> List[Tuple[K, int]]:
        return list(self._entries)

    def weight_of(self, key: K) -> int:
        for k, w in self._entries:
            if k == key:
                return w
        return 0

    def sample(self, rng: RandomSource) -> K:
        # r in [1, total]; the first bucket whose cumulative weight reaches r wins
        r = rng.randint(1, self.total)
        for key, c in zip(self._keys, self._cumulative):
            if r <= c:
                return key
        return self._keys[-1]  # pragma: no cover - unreachable with integer weights

    def __repr__(self) -> str:
        return f"WeightedDistribution({self._entries!r})"


__all__ = ["RandomSource", "WeightedDistribution"]
