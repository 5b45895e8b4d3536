"""Sector records and the builders that create them from level documents."""

from .sector import GameObjectSpec, Sector, SpawnPoint, TileMap
from .sector_parser import SchemaVersion, build_sector, from_legacy_mapping, from_mapping, from_nothing

__all__ = [
    "GameObjectSpec",
    "Sector",
    "SpawnPoint",
    "TileMap",
    "SchemaVersion",
    "build_sector",
    "from_legacy_mapping",
    "from_mapping",
    "from_nothing",
]
