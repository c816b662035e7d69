from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft7Validator

from ..exceptions import ContentTableError, DataValidationError
from .archetypes import DEFAULT_ARCHETYPES, ArchetypeRegistry
from .tables import LevelTable, SpawnTables

logger = logging.getLogger(__name__)

_DATA_PKG = "delve.data"
SPAWN_TABLES_SCHEMA = "spawn_tables"


@dataclass(frozen=True)
class SchemaInfo:
    name: str
    uri: str
    schema: Dict[str, Any]


class SchemaRegistry:
    """Registry for bundled JSON Schemas.

    Discovers schemas in the ``schemas`` directory of the ``delve.data`` package.
    A schema's "name" is its filename without the ".schema.json" suffix.
    """

    def __init__(self) -> None:
        self._schemas_by_name: dict[str, SchemaInfo] = {}
        self._load_all()

    def _load_all(self) -> None:
        schema_dir = resources.files(_DATA_PKG).joinpath("schemas")
        for entry in schema_dir.iterdir():
            if not entry.name.endswith(".schema.json"):
                continue
            name = entry.name[: -len(".schema.json")]
            with entry.open("rb") as fh:
                schema = json.load(fh)
            uri = schema.get("$id") or f"resource://{_DATA_PKG}/schemas/{entry.name}"
            self._schemas_by_name[name] = SchemaInfo(name=name, uri=uri, schema=schema)
            logger.debug("Registered schema '%s' (uri=%s)", name, uri)

    def get(self, name: str) -> Optional[SchemaInfo]:
        return self._schemas_by_name.get(name)

    def names(self) -> list[str]:
        return sorted(self._schemas_by_name.keys())

    def make_validator(self, name: str) -> Draft7Validator:
        info = self.get(name)
        if not info:
            raise KeyError(f"Schema not found: {name}")
        return Draft7Validator(info.schema)

    def validate(self, data: Any, name: str) -> None:
        try:
            validator = self.make_validator(name)
        except KeyError as e:
            raise DataValidationError(f"Unknown schema: {name}") from e
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        if errors:
            raise DataValidationError(f"YAML validation failed for schema '{name}'", errors)


@lru_cache(maxsize=1)
def default_schemas() -> SchemaRegistry:
    return SchemaRegistry()


def _weight_table(raw: Any) -> LevelTable:
    if isinstance(raw, int):
        return LevelTable.constant(raw)
    return LevelTable(raw)


def parse_spawn_tables(data: Dict[str, Any], archetypes: ArchetypeRegistry = DEFAULT_ARCHETYPES) -> SpawnTables:
    """Build SpawnTables from an already-validated mapping and check archetype keys."""
    tables = SpawnTables(
        max_monsters=LevelTable(data["max_monsters"]),
        max_items=LevelTable(data["max_items"]),
        monster_weights={k: _weight_table(v) for k, v in data["monsters"].items()},
        item_weights={k: _weight_table(v) for k, v in data["items"].items()},
    )
    for key in tables.monster_weights:
        archetypes.monster(key)
    for key in tables.item_weights:
        archetypes.item(key)
    return tables


def load_spawn_tables(
    path: os.PathLike | str | None = None,
    archetypes: ArchetypeRegistry = DEFAULT_ARCHETYPES,
) -> SpawnTables:
    """Load spawn tables from YAML, validate them and resolve archetype keys.

    With no path, the tables bundled with the package are used.
    Raises:
        DataValidationError: if the document does not match the schema
        ContentTableError: for duplicate levels or unknown archetype keys
        FileNotFoundError: if ``path`` does not exist
    """
    if path is None:
        text = resources.files(_DATA_PKG).joinpath("spawn_tables.yaml").read_text(encoding="utf-8")
        source = "<bundled>"
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Spawn tables not found: {p}")
        text = p.read_text(encoding="utf-8")
        source = str(p)

    raw = yaml.safe_load(text) or {}
    default_schemas().validate(raw, SPAWN_TABLES_SCHEMA)
    try:
        tables = parse_spawn_tables(raw, archetypes)
    except ContentTableError as e:
        raise ContentTableError(f"{source}: {e}") from e
    logger.info(
        "Loaded spawn tables from %s (%d monster types, %d item types)",
        source,
        len(tables.monster_weights),
        len(tables.item_weights),
    )
    return tables


@lru_cache(maxsize=1)
def default_spawn_tables() -> SpawnTables:
    return load_spawn_tables()


__all__ = [
    "SchemaRegistry",
    "default_schemas",
    "default_spawn_tables",
    "load_spawn_tables",
    "parse_spawn_tables",
]
