"""
translations.py

Process-wide translation catalogue used for ``(_ "...")`` strings inside level
documents. Level packs ship their own ``locale`` directory next to the level
files; loading a level registers that directory so subsequent lookups use it.
"""

import gettext
import logging
from typing import Optional

from tux_levels.utils.config import Config
from tux_levels.utils.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)

_active: gettext.NullTranslations = gettext.NullTranslations()
_active_dir: Optional[str] = None


def register_translation_directory(filename: str, vfs: Optional[VirtualFileSystem] = None) -> None:
    """Activates the translation catalogue that belongs to ``filename``.

    The catalogue is looked up in ``<dir of filename>/locale``. Missing
    catalogues fall back to the untranslated strings; this never raises.

    Args:
        filename (str): Virtual path of the level file being loaded.
        vfs (Optional[VirtualFileSystem]): Filesystem used to locate the level.
    """
    global _active, _active_dir

    vfs = vfs or VirtualFileSystem()
    try:
        real = vfs.real_path(filename)
    except ValueError:
        real = None
    if real is None:
        logger.debug("No real path for '%s'; keeping current translations.", filename)
        return

    locale_dir = real.parent / Config.LOCALE_DIRNAME
    if str(locale_dir) == _active_dir:
        return

    _active = gettext.translation(Config.TRANSLATION_DOMAIN, localedir=str(locale_dir), fallback=True)
    _active_dir = str(locale_dir)
    logger.debug("Registered translation directory %s", locale_dir)


def gettext_text(message: str) -> str:
    """Translates ``message`` with the currently registered catalogue."""
    return _active.gettext(message)


def reset_translations() -> None:
    """Drops the active catalogue, reverting to untranslated strings."""
    global _active, _active_dir
    _active = gettext.NullTranslations()
    _active_dir = None


__all__ = ["register_translation_directory", "gettext_text", "reset_translations"]
