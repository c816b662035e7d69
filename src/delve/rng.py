from __future__ import annotations

import hashlib
import json
import logging
import secrets
from dataclasses import dataclass, field
from typing import Any, Union

from .core.random import RandomSource

logger = logging.getLogger(__name__)

LEVEL_LAYOUT_DOMAIN = "level_layout"

Seed = Union[int, str, bytes, None]


def seed_bytes(seed: Seed) -> bytes:
    """Canonical byte form of a master seed.

    Ints and ``0x``-prefixed hex strings map to the same big-endian bytes, so
    ``255`` and ``"0xff"`` name the same run. Other strings are UTF-8 encoded.
    """
    if seed is None:
        return secrets.token_bytes(16)
    if isinstance(seed, bytes):
        return seed
    if isinstance(seed, str):
        text = seed.strip()
        try:
            seed = int(text, 16) if text.startswith("0x") else None
        except ValueError:
            seed = None
        if seed is None:
            return text.encode("utf-8")
    if isinstance(seed, int):
        if seed < 0:
            raise ValueError(f"Master seed must be non-negative, got {seed}")
        return seed.to_bytes((seed.bit_length() + 7) // 8 or 1, "big")
    raise TypeError("Unsupported seed type: %r" % (type(seed),))


@dataclass(frozen=True)
class RNGManager:
    """Derives per-level random sources from a single master seed.

    rngm = RNGManager("run-abc")
    rng = rngm.level_source(depth)

    Each depth gets its own BLAKE2b-derived seed, so the level at a given depth
    does not depend on how many numbers earlier levels consumed.
    """

    master_seed: Seed
    _master: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_master", seed_bytes(self.master_seed))
        if self.master_seed is None:
            logger.info("No master seed provided; generated random seed: %s", self._master.hex())

    def derive_seed(self, domain: str, *identifiers: Any) -> int:
        payload = json.dumps(
            {"domain": domain, "ids": identifiers, "master": self._master.hex(), "version": 1},
            sort_keys=True,
            separators=(",", ":"),
        )
        digest = hashlib.blake2b(payload.encode("utf-8"), digest_size=8).digest()
        derived = int.from_bytes(digest, "big")
        logger.debug("Derived seed for domain=%s ids=%s -> %d", domain, identifiers, derived)
        return derived

    def level_source(self, depth: int) -> RandomSource:
        return RandomSource(seed=self.derive_seed(LEVEL_LAYOUT_DOMAIN, depth))

    def get_master_seed_hex(self) -> str:
        return self._master.hex()
