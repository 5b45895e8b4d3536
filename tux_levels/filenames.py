"""
filenames.py

Picks file names for newly created levels that do not clash with files
already present in the target directory. The directory is only used to check
for existing files; the returned names are relative to it.
"""

from typing import Callable, Tuple

from tux_levels.utils.config import Config

ExistsCheck = Callable[[str], bool]


def _first_free_index(basedir: str, basename: str, extension: str, exists: ExistsCheck) -> int:
    num = 1
    while exists(f"{basedir}/{basename}{num}{extension}"):
        num += 1
    return num


def find_free_level_filename(basedir: str, exists: ExistsCheck) -> Tuple[str, str]:
    """Finds the first unused ``level<N>.stl`` in ``basedir``.

    Args:
        basedir (str): Directory that will contain the level.
        exists (Callable[[str], bool]): Reports whether a path is taken.

    Returns:
        Tuple[str, str]: The relative filename and a default display name
        (``"Level <N>"``).
    """
    num = _first_free_index(basedir, Config.LEVEL_BASENAME, Config.LEVEL_EXTENSION, exists)
    filename = f"{Config.LEVEL_BASENAME}{num}{Config.LEVEL_EXTENSION}"
    return filename, f"{Config.LEVEL_DISPLAY_PREFIX} {num}"


def find_free_worldmap_filename(basedir: str, exists: ExistsCheck) -> str:
    """Finds an unused worldmap filename in ``basedir``.

    ``worldmap.stwm`` is preferred; once taken, ``worldmap<N>.stwm`` is used
    with the lowest free ``N`` starting at 1.
    """
    plain = f"{Config.WORLDMAP_BASENAME}{Config.WORLDMAP_EXTENSION}"
    if not exists(f"{basedir}/{plain}"):
        return plain
    num = _first_free_index(basedir, Config.WORLDMAP_BASENAME, Config.WORLDMAP_EXTENSION, exists)
    return f"{Config.WORLDMAP_BASENAME}{num}{Config.WORLDMAP_EXTENSION}"


__all__ = ["find_free_level_filename", "find_free_worldmap_filename"]
