"""
sector.py

Plain data holders describing one sector of a level: its tile layers, spawn
points and the game objects placed in it. Nothing here simulates or renders;
the records are what a game or editor would instantiate from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import numpy as np

from tux_levels.utils.config import Config

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from tux_levels.level import Level


@dataclass(eq=False)
class TileMap:
    """One tile layer.

    Attributes:
        name (str): Layer name, may be empty.
        solid (bool): Whether the layer takes part in collision.
        z_pos (int): Drawing order relative to other layers.
        tiles (np.ndarray): Tile ids shaped ``(height, width)``.
    """

    name: str = ""
    solid: bool = False
    z_pos: int = 0
    tiles: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=np.uint32))

    @property
    def width(self) -> int:
        return int(self.tiles.shape[1])

    @property
    def height(self) -> int:
        return int(self.tiles.shape[0])

    @classmethod
    def from_tile_list(
        cls, tiles: List[int], width: int, height: int, name: str = "", solid: bool = False, z_pos: int = 0
    ) -> "TileMap":
        """Builds a layer from a flat row-major list of tile ids.

        Raises:
            ValueError: If the tile count does not match ``width * height``.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid tilemap size {width}x{height}")
        if len(tiles) != width * height:
            raise ValueError(
                f"Tilemap '{name}' has {len(tiles)} tiles, expected {width * height} ({width}x{height})"
            )
        data = np.asarray(tiles, dtype=np.uint32).reshape((height, width))
        return cls(name=name, solid=solid, z_pos=z_pos, tiles=data)

    @classmethod
    def empty(cls, width: int, height: int, name: str = "", solid: bool = False, z_pos: int = 0) -> "TileMap":
        return cls(name=name, solid=solid, z_pos=z_pos, tiles=np.zeros((height, width), dtype=np.uint32))

    def count_nonempty(self) -> int:
        return int(np.count_nonzero(self.tiles))


@dataclass
class SpawnPoint:
    name: str
    x: float
    y: float


@dataclass
class GameObjectSpec:
    """A game object as written in the document: its kind and raw fields."""

    kind: str
    properties: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Sector:
    """A self-contained playable area belonging to a level."""

    name: str = ""
    music: str = ""
    gravity: float = Config.DEFAULT_GRAVITY
    ambient_light: Tuple[float, float, float] = Config.DEFAULT_AMBIENT_LIGHT
    init_script: str = ""
    tilemaps: List[TileMap] = field(default_factory=list)
    objects: List[GameObjectSpec] = field(default_factory=list)
    spawnpoints: List[SpawnPoint] = field(default_factory=list)
    editable: bool = False
    level: Optional["Level"] = field(default=None, repr=False, compare=False)

    def set_name(self, name: str) -> None:
        self.name = name

    def get_spawnpoint(self, name: str) -> Optional[SpawnPoint]:
        for spawnpoint in self.spawnpoints:
            if spawnpoint.name == name:
                return spawnpoint
        return None

    def get_solid_tilemaps(self) -> List[TileMap]:
        return [tilemap for tilemap in self.tilemaps if tilemap.solid]

    def count_objects(self, kinds) -> int:
        """Counts placed objects whose kind is in ``kinds``."""
        return sum(1 for obj in self.objects if obj.kind in kinds)

    def get_coins(self) -> int:
        return self.count_objects(Config.COIN_KINDS)

    def get_badguys(self) -> int:
        return self.count_objects(Config.BADGUY_KINDS)

    def get_secrets(self) -> int:
        return self.count_objects(Config.SECRET_KINDS)

    def get_size(self) -> Tuple[int, int]:
        """Returns the (width, height) in tiles of the largest layer."""
        if not self.tilemaps:
            return (0, 0)
        return (max(t.width for t in self.tilemaps), max(t.height for t in self.tilemaps))


__all__ = ["TileMap", "SpawnPoint", "GameObjectSpec", "Sector"]
