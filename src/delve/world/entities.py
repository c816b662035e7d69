from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .colors import WHITE, Color


class Ai(str, Enum):
    BASIC = "basic"


class DeathCallback(str, Enum):
    PLAYER = "player"
    MONSTER = "monster"


class ItemKind(str, Enum):
    HEAL = "heal"
    LIGHTNING = "lightning"
    FIREBALL = "fireball"
    CONFUSE = "confuse"
    SWORD = "sword"
    SHIELD = "shield"


class Slot(str, Enum):
    LEFT_HAND = "left hand"
    RIGHT_HAND = "right hand"


@dataclass
class Fighter:
    """Combat stats; the combat system reads and mutates these, the generator only fills them in."""

    base_max_hp: int
    hp: int
    base_defense: int
    base_power: int
    xp: int
    on_death: DeathCallback


@dataclass
class Equipment:
    slot: Slot
    equipped: bool = False
    max_hp_bonus: int = 0
    power_bonus: int = 0
    defense_bonus: int = 0


@dataclass
class Entity:
    """A positioned thing on the map: player, monster, item or stairs."""

    x: int
    y: int
    glyph: str
    name: str
    color: Color
    blocks: bool
    alive: bool = False
    always_visible: bool = False
    fighter: Optional[Fighter] = None
    ai: Optional[Ai] = None
    item: Optional[ItemKind] = None
    equipment: Optional[Equipment] = None

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


def new_player(name: str = "player", x: int = 0, y: int = 0) -> Entity:
    return Entity(
        x,
        y,
        "@",
        name,
        WHITE,
        blocks=True,
        alive=True,
        fighter=Fighter(
            base_max_hp=100,
            hp=100,
            base_defense=1,
            base_power=2,
            xp=0,
            on_death=DeathCallback.PLAYER,
        ),
    )


def new_stairs(x: int, y: int) -> Entity:
    return Entity(x, y, "<", "stairs", WHITE, blocks=False, always_visible=True)
