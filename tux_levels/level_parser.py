"""
level_parser.py

Turns level documents into ``Level`` objects and creates new, empty levels.

Two document schemas exist. Version 1 files are flat: the level root carries
the name, the author and the fields of its only sector. Version 2 files carry
explicit metadata and any number of ``(sector ...)`` children. Files without a
``version`` field are version 1.

Loading from a path always fails with ``LevelReadError`` naming the path, no
matter what went wrong underneath. ``get_level_name`` never fails; it returns
an empty string for anything that is not a readable level.
"""

import functools
import logging
from typing import IO, Callable, Optional

from tux_levels.errors import LevelFormatError, LevelReadError
from tux_levels.filenames import find_free_level_filename, find_free_worldmap_filename
from tux_levels.level import Level
from tux_levels.reader.document import ReaderDocument, ReaderMapping
from tux_levels.sectors import sector_parser
from tux_levels.sectors.sector_parser import SchemaVersion
from tux_levels.utils.config import Config
from tux_levels.utils.translations import register_translation_directory
from tux_levels.utils.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)

TranslationRegistrar = Callable[[str], None]


def _default_registrar(vfs: VirtualFileSystem) -> TranslationRegistrar:
    return functools.partial(register_translation_directory, vfs=vfs)


class LevelParser:
    """Populates one ``Level`` from a document or from defaults.

    A parser is bound to a single level and a single ``editable`` flag for
    its whole lifetime; the public static constructors create both and
    discard the parser once the level is returned.
    """

    def __init__(
        self,
        level: Level,
        editable: bool,
        vfs: Optional[VirtualFileSystem] = None,
        register_translations: Optional[TranslationRegistrar] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """Binds the parser to its level.

        Args:
            level (Level): Level that receives everything read.
            editable (bool): Passed to every sector builder; keeps editor-only data.
            vfs (Optional[VirtualFileSystem]): Filesystem used for path-based loads.
            register_translations (Optional[Callable[[str], None]]): Called with
                the level path before reading it. Defaults to registering the
                level directory's gettext catalogue.
            log (Optional[logging.Logger]): Sink for diagnostics; defaults to
                this module's logger.
        """
        self._level = level
        self._editable = editable
        self._vfs = vfs
        self._register_translations = register_translations
        self._log = log or logger

    # --- Public entry points ----------------------------------------------
    @staticmethod
    def get_level_name(
        filename: str,
        vfs: Optional[VirtualFileSystem] = None,
        register_translations: Optional[TranslationRegistrar] = None,
        log: Optional[logging.Logger] = None,
    ) -> str:
        """Reads only the display name of the level stored at ``filename``.

        No version handling and no sector construction take place, which
        keeps this cheap enough for directory listings.

        Returns:
            str: The level's ``name`` field, or an empty string if the file
            is not a level or cannot be read for any reason.
        """
        vfs = vfs or VirtualFileSystem()
        register_translations = register_translations or _default_registrar(vfs)
        log = log or logger
        try:
            register_translations(filename)
            with ReaderDocument.from_file(filename, vfs) as doc:
                root = doc.get_root()
                if root.get_name() != Config.LEVEL_ROOT_TAG:
                    return ""
                return root.get_mapping().get_string("name", "")
        except Exception as e:
            log.warning("Problem getting name of '%s': %s", filename, e)
            return ""

    @staticmethod
    def from_stream(stream: IO, context: str, editable: bool, log: Optional[logging.Logger] = None) -> Level:
        """Loads a level from an open stream without touching the filesystem."""
        level = Level()
        parser = LevelParser(level, editable, log=log)
        parser.load_stream(stream, context)
        return level

    @staticmethod
    def from_file(
        filename: str,
        editable: bool,
        vfs: Optional[VirtualFileSystem] = None,
        register_translations: Optional[TranslationRegistrar] = None,
        log: Optional[logging.Logger] = None,
    ) -> Level:
        """Loads the level stored at virtual path ``filename``.

        Raises:
            LevelReadError: If the file cannot be read or is not a valid level.
        """
        level = Level()
        parser = LevelParser(level, editable, vfs=vfs, register_translations=register_translations, log=log)
        parser.load_file(filename)
        return level

    @staticmethod
    def from_nothing(basedir: str, vfs: Optional[VirtualFileSystem] = None) -> Level:
        """Creates an empty level under the first free ``level<N>.stl`` name in ``basedir``."""
        vfs = vfs or VirtualFileSystem()
        level = Level()
        parser = LevelParser(level, False, vfs=vfs)
        level_file, level_name = find_free_level_filename(basedir, vfs.exists)
        parser.create(level_file, level_name, worldmap=False)
        return level

    @staticmethod
    def from_nothing_worldmap(basedir: str, name: str, vfs: Optional[VirtualFileSystem] = None) -> Level:
        """Creates an empty worldmap called ``name`` under a free filename in ``basedir``."""
        vfs = vfs or VirtualFileSystem()
        level = Level()
        parser = LevelParser(level, False, vfs=vfs)
        parser.create(find_free_worldmap_filename(basedir, vfs.exists), name, worldmap=True)
        return level

    # --- Loading ----------------------------------------------------------
    def load_stream(self, stream: IO, context: str) -> None:
        with ReaderDocument.from_stream(stream, context) as doc:
            self.load_document(doc)

    def load_file(self, filepath: str) -> None:
        """Loads ``filepath`` into the bound level.

        ``level.filename`` is set before anything is read, so it is valid even
        when loading fails.

        Raises:
            LevelReadError: Wrapping whatever error occurred while reading.
        """
        self._level.filename = filepath
        vfs = self._vfs or VirtualFileSystem()
        register_translations = self._register_translations or _default_registrar(vfs)
        try:
            register_translations(filepath)
        except Exception as e:
            self._log.warning("Could not register translations for '%s': %s", filepath, e)

        try:
            with ReaderDocument.from_file(filepath, vfs) as doc:
                self.load_document(doc)
        except Exception as e:
            raise LevelReadError(filepath, str(e)) from e

    def load_document(self, doc: ReaderDocument) -> None:
        """Fills the bound level from a parsed document.

        Raises:
            LevelFormatError: If the root node is not a level.
        """
        root = doc.get_root()
        if root.get_name() != Config.LEVEL_ROOT_TAG:
            raise LevelFormatError(f"file is not a {Config.LEVEL_ROOT_TAG} file.")

        mapping = root.get_mapping()
        version = mapping.get_int("version", Config.LEGACY_FORMAT_VERSION)

        if version == SchemaVersion.LEGACY.value:
            self._log.info("[%s] level uses old format: version %d", doc.get_filename(), version)
            self._load_old_format(mapping)
        elif version == SchemaVersion.CURRENT.value:
            self._load_current_format(mapping, doc.get_filename())
        else:
            self._log.warning("[%s] level format version %d is not supported", doc.get_filename(), version)

        self._level.stats.init(self._level)

    def _load_current_format(self, mapping: ReaderMapping, filename: str) -> None:
        self._apply_optional(mapping.get_string, "tileset", "tileset")
        self._apply_optional(mapping.get_string, "name", "name")
        self._apply_optional(mapping.get_string, "author", "author")
        self._apply_optional(mapping.get_string, "contact", "contact")
        self._apply_optional(mapping.get_string, "license", "license")
        self._apply_optional(mapping.get_float, "target-time", "target_time")

        for key, child in mapping.get_iter():
            if key == Config.SECTOR_KEY:
                sector = sector_parser.build_sector(
                    SchemaVersion.CURRENT, self._level, child.get_mapping(), self._editable
                )
                self._level.add_sector(sector)

        if not self._level.license:
            self._log.warning(
                '[%s] The level author "%s" did not specify a license for this level "%s". '
                "You might not be allowed to share it.",
                filename,
                self._level.author,
                self._level.name,
            )

    def _load_old_format(self, mapping: ReaderMapping) -> None:
        self._apply_optional(mapping.get_string, "name", "name")
        self._apply_optional(mapping.get_string, "author", "author")

        sector = sector_parser.build_sector(SchemaVersion.LEGACY, self._level, mapping, self._editable)
        self._level.add_sector(sector)

    def _apply_optional(self, getter: Callable, key: str, attribute: str) -> None:
        """Copies ``key`` onto the level attribute when present.

        Absent or mistyped fields leave the attribute at its current value.
        """
        value = getter(key)
        if value is not None:
            setattr(self._level, attribute, value)

    # --- Creation ---------------------------------------------------------
    def create(self, filepath: str, levelname: str, worldmap: bool) -> None:
        """Fills the bound level with defaults and one sector named ``main``."""
        self._level.filename = filepath
        self._level.name = levelname
        self._level.license = Config.DEFAULT_LICENSE
        self._level.tileset = Config.WORLDMAP_TILESET if worldmap else Config.DEFAULT_TILESET

        sector = sector_parser.from_nothing(self._level)
        sector.set_name(Config.DEFAULT_SECTOR_NAME)
        self._level.add_sector(sector)

        self._level.stats.init(self._level)


load_from_stream = LevelParser.from_stream
load_from_path = LevelParser.from_file
create_new = LevelParser.from_nothing
create_new_worldmap = LevelParser.from_nothing_worldmap
read_level_name = LevelParser.get_level_name


__all__ = [
    "LevelParser",
    "load_from_stream",
    "load_from_path",
    "create_new",
    "create_new_worldmap",
    "read_level_name",
]
