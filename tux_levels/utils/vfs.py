"""
vfs.py

A small read-only virtual filesystem modelled after PhysFS. One or more real
directories are mounted into a single search path; virtual paths always use
forward slashes and are resolved against the mounted roots in mount order, the
first root that contains the file wins.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Iterable, List, Optional, Union

from tux_levels.utils.config import Config

logger = logging.getLogger(__name__)


class VirtualFileSystem:
    """Resolves virtual paths against an ordered list of mounted directories."""

    def __init__(self, search_paths: Optional[Iterable[Union[str, Path]]] = None) -> None:
        """Initialises the search path.

        Args:
            search_paths: Directories to mount, in priority order. Defaults to
                ``Config.DEFAULT_DATA_DIR`` when omitted, or to the current
                working directory if that is unset.
        """
        self._roots: List[Path] = []
        if search_paths is None:
            search_paths = [Config.DEFAULT_DATA_DIR or Path.cwd()]
        for path in search_paths:
            self.mount(path)

    @property
    def roots(self) -> List[Path]:
        return list(self._roots)

    def mount(self, path: Union[str, Path]) -> None:
        """Appends a real directory to the search path."""
        root = Path(path)
        if not root.is_dir():
            logger.warning("Mounting '%s' which is not a directory.", root)
        self._roots.append(root)

    @staticmethod
    def normalise(virtual_path: str) -> PurePosixPath:
        """Converts a virtual path into a relative, slash-separated form.

        Raises:
            ValueError: If the path tries to escape the mounted roots.
        """
        parts = [part for part in str(virtual_path).replace("\\", "/").split("/") if part not in ("", ".")]
        if ".." in parts:
            raise ValueError(f"Virtual path may not contain '..': {virtual_path}")
        return PurePosixPath(*parts) if parts else PurePosixPath(".")

    def real_path(self, virtual_path: str) -> Optional[Path]:
        """Returns the real path backing ``virtual_path``, or None if absent."""
        relative = self.normalise(virtual_path)
        for root in self._roots:
            candidate = root.joinpath(*relative.parts)
            if candidate.exists():
                return candidate
        return None

    def exists(self, virtual_path: str) -> bool:
        """Checks whether any mounted root contains ``virtual_path``."""
        return self.real_path(virtual_path) is not None

    def open(self, virtual_path: str) -> BinaryIO:
        """Opens ``virtual_path`` for binary reading.

        Raises:
            FileNotFoundError: If no mounted root contains the file.
        """
        real = self.real_path(virtual_path)
        if real is None or not real.is_file():
            raise FileNotFoundError(f"Couldn't open file '{virtual_path}': not found")
        return real.open("rb")


__all__ = ["VirtualFileSystem"]
