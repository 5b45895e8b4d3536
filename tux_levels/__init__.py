"""
tux_levels Package

Loads SuperTux-style level documents (``.stl`` levels and ``.stwm`` worldmaps)
into in-memory ``Level`` objects and creates new, empty levels. It consists of:

  - reader: the S-expression document reader with typed, optional field access.
  - sectors: sector records and the builders for current and legacy documents.
  - level / statistics: the level aggregate and its derived totals.
  - level_parser: version detection, field population, error wrapping, the
    cheap name lookup and new-level creation.
  - filenames: collision-free file names for new levels and worldmaps.
  - utils: configuration, the virtual filesystem, translations and CLI parsing.
"""

from tux_levels.errors import DocumentParseError, LevelError, LevelFormatError, LevelReadError
from tux_levels.level import Level
from tux_levels.level_parser import (
    LevelParser,
    create_new,
    create_new_worldmap,
    load_from_path,
    load_from_stream,
    read_level_name,
)

__all__ = [
    "DocumentParseError",
    "LevelError",
    "LevelFormatError",
    "LevelReadError",
    "Level",
    "LevelParser",
    "create_new",
    "create_new_worldmap",
    "load_from_path",
    "load_from_stream",
    "read_level_name",
]
