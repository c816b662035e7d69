from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..exceptions import ContentTableError
from ..world import colors
from ..world.colors import Color
from ..world.entities import Ai, DeathCallback, Entity, Equipment, Fighter, ItemKind, Slot


@dataclass(frozen=True)
class MonsterArchetype:
    """Fixed stat block for one monster type."""

    key: str
    name: str
    glyph: str
    color: Color
    hp: int
    defense: int
    power: int
    xp: int

    def spawn(self, x: int, y: int) -> Entity:
        return Entity(
            x,
            y,
            self.glyph,
            self.name,
            self.color,
            blocks=True,
            alive=True,
            fighter=Fighter(
                base_max_hp=self.hp,
                hp=self.hp,
                base_defense=self.defense,
                base_power=self.power,
                xp=self.xp,
                on_death=DeathCallback.MONSTER,
            ),
            ai=Ai.BASIC,
        )


@dataclass(frozen=True)
class EquipmentSpec:
    slot: Slot
    max_hp_bonus: int = 0
    power_bonus: int = 0
    defense_bonus: int = 0


@dataclass(frozen=True)
class ItemArchetype:
    key: str
    name: str
    glyph: str
    color: Color
    kind: ItemKind
    equipment: Optional[EquipmentSpec] = None

    def spawn(self, x: int, y: int) -> Entity:
        entity = Entity(x, y, self.glyph, self.name, self.color, blocks=False, always_visible=True, item=self.kind)
        if self.equipment is not None:
            entity.equipment = Equipment(
                slot=self.equipment.slot,
                equipped=False,
                max_hp_bonus=self.equipment.max_hp_bonus,
                power_bonus=self.equipment.power_bonus,
                defense_bonus=self.equipment.defense_bonus,
            )
        return entity


class ArchetypeRegistry:
    """Closed set of monster and item archetypes, keyed by type tag.

    Spawn tables refer to these keys; an unknown key is a data error.
    """

    def __init__(
        self,
        monsters: Optional[Iterable[MonsterArchetype]] = None,
        items: Optional[Iterable[ItemArchetype]] = None,
    ) -> None:
        self._monsters: Dict[str, MonsterArchetype] = {}
        self._items: Dict[str, ItemArchetype] = {}
        if monsters is None and items is None:
            self._bootstrap_defaults()
            return
        for m in monsters or ():
            self.add_monster(m)
        for i in items or ():
            self.add_item(i)

    def add_monster(self, archetype: MonsterArchetype) -> None:
        if archetype.key in self._monsters:
            raise ContentTableError(f"Duplicate monster archetype: {archetype.key}")
        self._monsters[archetype.key] = archetype

    def add_item(self, archetype: ItemArchetype) -> None:
        if archetype.key in self._items:
            raise ContentTableError(f"Duplicate item archetype: {archetype.key}")
        self._items[archetype.key] = archetype

    def monster(self, key: str) -> MonsterArchetype:
        try:
            return self._monsters[key]
        except KeyError as e:
            raise ContentTableError(f"Unknown monster archetype: {key}") from e

    def item(self, key: str) -> ItemArchetype:
        try:
            return self._items[key]
        except KeyError as e:
            raise ContentTableError(f"Unknown item archetype: {key}") from e

    def monster_keys(self) -> List[str]:
        return list(self._monsters)

    def item_keys(self) -> List[str]:
        return list(self._items)

    def _bootstrap_defaults(self) -> None:
        self.add_monster(MonsterArchetype("orc", "orc", "o", colors.DESATURATED_GREEN, hp=20, defense=0, power=4, xp=35))
        self.add_monster(MonsterArchetype("troll", "troll", "T", colors.DARKER_GREEN, hp=30, defense=2, power=8, xp=100))

        self.add_item(ItemArchetype("heal", "healing potion", "!", colors.VIOLET, ItemKind.HEAL))
        self.add_item(ItemArchetype("lightning", "scroll of lightning bolt", "#", colors.LIGHT_YELLOW, ItemKind.LIGHTNING))
        self.add_item(ItemArchetype("fireball", "scroll of fireball", "#", colors.LIGHT_YELLOW, ItemKind.FIREBALL))
        self.add_item(ItemArchetype("confuse", "scroll of confusion", "#", colors.LIGHT_YELLOW, ItemKind.CONFUSE))
        self.add_item(
            ItemArchetype("sword", "sword", "/", colors.SKY, ItemKind.SWORD, EquipmentSpec(Slot.RIGHT_HAND, power_bonus=3))
        )
        self.add_item(
            ItemArchetype("shield", "shield", "[", colors.SKY, ItemKind.SHIELD, EquipmentSpec(Slot.LEFT_HAND, defense_bonus=1))
        )


DEFAULT_ARCHETYPES = ArchetypeRegistry()

__all__ = [
    "ArchetypeRegistry",
    "DEFAULT_ARCHETYPES",
    "EquipmentSpec",
    "ItemArchetype",
    "MonsterArchetype",
]
