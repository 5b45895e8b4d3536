"""
sector_parser.py

Builds ``Sector`` records from document mappings. Two incompatible document
shapes exist: the current one, where each sector is its own ``(sector ...)``
child, and the legacy flat one, where the sector fields sit directly on the
level root. Each shape has its own entry point; ``build_sector`` picks one
from a ``SchemaVersion``.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict

from tux_levels.reader.document import ReaderMapping, ReaderObject
from tux_levels.sectors.sector import GameObjectSpec, Sector, SpawnPoint, TileMap
from tux_levels.utils.config import Config

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from tux_levels.level import Level

logger = logging.getLogger(__name__)

_SECTOR_FIELDS = {"name", "music", "gravity", "ambient-light", "init-script"}

# (document key, layer name, solid, z-pos)
_LEGACY_LAYERS = (
    ("background-tm", "background", False, -100),
    ("interactive-tm", "interactive", True, 0),
    ("foreground-tm", "foreground", False, 100),
)


class SchemaVersion(Enum):
    LEGACY = Config.LEGACY_FORMAT_VERSION
    CURRENT = Config.CURRENT_FORMAT_VERSION


def _property_value(child: ReaderObject) -> Any:
    nested = child.get_mapping()
    if nested.keys():
        return _object_properties(nested)
    values = child.get_values()
    if not values:
        return None
    return values[0] if len(values) == 1 else values


def _object_properties(mapping: ReaderMapping) -> Dict[str, Any]:
    """Converts an object's fields into plain dicts, lists and scalars.

    Keys that appear more than once, such as the ``node`` entries of a path,
    map to a list holding one value per occurrence in document order.
    """
    counts = Counter(key for key, _ in mapping.get_iter())
    properties: Dict[str, Any] = {}
    for key, child in mapping.get_iter():
        value = _property_value(child)
        if counts[key] > 1:
            properties.setdefault(key, []).append(value)
        else:
            properties[key] = value
    return properties


def _parse_tilemap(mapping: ReaderMapping) -> TileMap:
    width = mapping.get_int("width", 0)
    height = mapping.get_int("height", 0)
    return TileMap.from_tile_list(
        mapping.get_list("tiles", []),
        width,
        height,
        name=mapping.get_string("name", ""),
        solid=mapping.get_bool("solid", False),
        z_pos=mapping.get_int("z-pos", 0),
    )


def _parse_spawnpoint(mapping: ReaderMapping) -> SpawnPoint:
    return SpawnPoint(
        name=mapping.get_string("name", ""),
        x=mapping.get_float("x", 0.0),
        y=mapping.get_float("y", 0.0),
    )


def _add_spawnpoint(sector: Sector, spawnpoint: SpawnPoint, editable: bool) -> None:
    sector.spawnpoints.append(spawnpoint)
    if editable:
        # The editor manipulates spawn points as regular objects.
        sector.objects.append(
            GameObjectSpec("spawnpoint", {"name": spawnpoint.name, "x": spawnpoint.x, "y": spawnpoint.y})
        )


def from_mapping(level: "Level", mapping: ReaderMapping, editable: bool) -> Sector:
    """Builds a sector from a current-format ``(sector ...)`` mapping.

    Args:
        level (Level): Level the sector will belong to.
        mapping (ReaderMapping): Body of the ``sector`` node.
        editable (bool): Whether editor-only data should be retained.

    Returns:
        Sector: The populated sector; not yet attached to ``level``.

    Raises:
        ValueError: If a tilemap's tile count does not match its size.
    """
    sector = Sector(editable=editable, level=level)
    sector.name = mapping.get_string("name", sector.name)
    sector.music = mapping.get_string("music", sector.music)
    sector.gravity = mapping.get_float("gravity", sector.gravity)
    sector.init_script = mapping.get_string("init-script", sector.init_script)

    light = mapping.get_list("ambient-light")
    if light is not None and len(light) >= 3:
        sector.ambient_light = tuple(float(component) for component in light[:3])

    for key, child in mapping.get_iter():
        if key in _SECTOR_FIELDS:
            continue
        child_mapping = child.get_mapping()
        if key == "tilemap":
            sector.tilemaps.append(_parse_tilemap(child_mapping))
        elif key == "spawnpoint":
            _add_spawnpoint(sector, _parse_spawnpoint(child_mapping), editable)
        else:
            sector.objects.append(GameObjectSpec(key, _object_properties(child_mapping)))

    logger.debug("Parsed sector '%s' with %d objects", sector.name, len(sector.objects))
    return sector


def from_legacy_mapping(level: "Level", mapping: ReaderMapping, editable: bool) -> Sector:
    """Builds the single implied sector of a version 1 level.

    The legacy shape keeps tile layers, music and spawn position directly on
    the level root; objects are listed inside one ``(objects ...)`` child.
    """
    sector = Sector(name=Config.DEFAULT_SECTOR_NAME, editable=editable, level=level)

    music = mapping.get_string("music")
    if music:
        sector.music = music if "/" in music else Config.LEGACY_MUSIC_DIR + music
    sector.gravity = mapping.get_float("gravity", sector.gravity)

    width = mapping.get_int("width", 0)
    height = mapping.get_int("height", 0)
    for key, layer_name, solid, z_pos in _LEGACY_LAYERS:
        tiles = mapping.get_list(key)
        if tiles is None:
            if solid:
                sector.tilemaps.append(TileMap.empty(width, height, name=layer_name, solid=True, z_pos=z_pos))
            continue
        sector.tilemaps.append(TileMap.from_tile_list(tiles, width, height, name=layer_name, solid=solid, z_pos=z_pos))

    x = mapping.get_float("start_pos_x", Config.LEGACY_SPAWN_POINT[0])
    y = mapping.get_float("start_pos_y", Config.LEGACY_SPAWN_POINT[1])
    _add_spawnpoint(sector, SpawnPoint(Config.DEFAULT_SECTOR_NAME, x, y), editable)

    objects = mapping.get_mapping("objects")
    if objects is not None:
        for key, child in objects.get_iter():
            sector.objects.append(GameObjectSpec(key, _object_properties(child.get_mapping())))

    return sector


def from_nothing(level: "Level") -> Sector:
    """Builds a sector with default content for a brand-new level."""
    width = Config.DEFAULT_SECTOR_WIDTH
    height = Config.DEFAULT_SECTOR_HEIGHT
    sector = Sector(level=level)
    sector.tilemaps.append(TileMap.empty(width, height, name="background", z_pos=-100))
    sector.tilemaps.append(TileMap.empty(width, height, name="interactive", solid=True, z_pos=0))
    sector.tilemaps.append(TileMap.empty(width, height, name="foreground", z_pos=100))
    sector.spawnpoints.append(SpawnPoint(Config.DEFAULT_SECTOR_NAME, *Config.DEFAULT_SPAWN_POINT))
    sector.objects.append(GameObjectSpec("camera", {"name": "Camera"}))
    return sector


def build_sector(version: SchemaVersion, level: "Level", mapping: ReaderMapping, editable: bool) -> Sector:
    """Dispatches to the builder matching the document schema."""
    if version is SchemaVersion.LEGACY:
        return from_legacy_mapping(level, mapping, editable)
    if version is SchemaVersion.CURRENT:
        return from_mapping(level, mapping, editable)
    raise ValueError(f"No sector builder for schema {version!r}")


__all__ = [
    "SchemaVersion",
    "from_mapping",
    "from_legacy_mapping",
    "from_nothing",
    "build_sector",
]
