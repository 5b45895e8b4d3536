from typing import Any, Dict, List, Optional

from tux_levels.sectors.sector import Sector
from tux_levels.statistics import Statistics
from tux_levels.utils.config import Config


class Level:
    """A named collection of sectors plus the metadata shared by all of them.

    Instances are filled in by ``LevelParser``; a fresh ``Level`` only carries
    type defaults.
    """

    def __init__(self) -> None:
        self.filename = ""
        self.name = ""
        self.author = ""
        self.contact = ""
        self.license = ""
        self.tileset = Config.DEFAULT_TILESET
        self.target_time = 0.0
        self.sectors: List[Sector] = []
        self.stats = Statistics()

    def add_sector(self, sector: Sector) -> None:
        """Appends ``sector`` and makes this level its owner."""
        sector.level = self
        self.sectors.append(sector)

    def get_sector(self, name: str) -> Optional[Sector]:
        for sector in self.sectors:
            if sector.name == name:
                return sector
        return None

    def get_sector_count(self) -> int:
        return len(self.sectors)

    def get_total_coins(self) -> int:
        return sum(sector.get_coins() for sector in self.sectors)

    def get_total_badguys(self) -> int:
        return sum(sector.get_badguys() for sector in self.sectors)

    def get_total_secrets(self) -> int:
        return sum(sector.get_secrets() for sector in self.sectors)

    def is_worldmap(self) -> bool:
        return self.filename.endswith(Config.WORLDMAP_EXTENSION)

    def get_metadata(self) -> Dict[str, Any]:
        """Returns descriptive attributes suitable for listings and logs.

        Returns:
            Dict[str, Any]: Copy of the level's metadata fields.
        """
        return {
            "filename": self.filename,
            "name": self.name,
            "author": self.author,
            "contact": self.contact,
            "license": self.license,
            "tileset": self.tileset,
            "target_time": self.target_time,
            "worldmap": self.is_worldmap(),
            "sectors": [sector.name for sector in self.sectors],
        }


__all__ = ["Level"]
