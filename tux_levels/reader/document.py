"""
document.py

Read access to parsed level documents. A ``ReaderDocument`` owns the parsed
tree; ``ReaderObject`` is a named node and ``ReaderMapping`` exposes typed,
optional field lookups plus ordered iteration over a node's children.
"""

from __future__ import annotations

import io
import logging
from typing import Any, BinaryIO, Iterator, List, Optional, TextIO, Tuple, Union

from tux_levels.reader.lexer import SList, Symbol, parse_sexpr
from tux_levels.utils.translations import gettext_text
from tux_levels.utils.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_translatable(value: Any) -> bool:
    return (
        isinstance(value, SList)
        and len(value) == 2
        and isinstance(value[0], Symbol)
        and value[0] == "_"
        and isinstance(value[1], str)
        and not isinstance(value[1], Symbol)
    )


def _unwrap(value: Any) -> Any:
    if _is_translatable(value):
        return gettext_text(value[1])
    return value


class ReaderMapping:
    """Key/value view over the children of a node.

    Each child of the form ``(key value...)`` is addressable by ``key``; when
    a key repeats, lookups return the first occurrence while ``get_iter``
    yields all of them in document order.
    """

    def __init__(self, items: List[Any], context: str = "<stream>") -> None:
        self._items = items
        self.context = context

    def _values(self, key: str) -> Any:
        for item in self._items:
            if isinstance(item, SList) and item and isinstance(item[0], Symbol) and item[0] == key:
                return item[1:]
        return _MISSING

    def _single(self, key: str) -> Any:
        values = self._values(key)
        if values is _MISSING or len(values) != 1:
            return _MISSING
        return _unwrap(values[0])

    def has(self, key: str) -> bool:
        return self._values(key) is not _MISSING

    def keys(self) -> List[str]:
        return [str(key) for key, _ in self.get_iter()]

    def get(self, key: str, default: Any = None) -> Any:
        """Returns the raw value stored under ``key``.

        Single values are returned as-is, several values as a list. Absent
        keys and keys without any value return ``default``.
        """
        values = self._values(key)
        if values is _MISSING or not values:
            return default
        if len(values) == 1:
            value = _unwrap(values[0])
            return default if isinstance(value, SList) else value
        return [_unwrap(value) for value in values]

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._single(key)
        if isinstance(value, str):
            return str(value)
        return default

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        value = self._single(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        value = self._single(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return default

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        value = self._single(key)
        if isinstance(value, bool):
            return value
        return default

    def get_list(self, key: str, default: Optional[list] = None) -> Optional[list]:
        """Returns all scalar values under ``key`` as a list."""
        values = self._values(key)
        if values is _MISSING:
            return default
        unwrapped = [_unwrap(value) for value in values]
        if any(isinstance(value, SList) for value in unwrapped):
            return default
        return unwrapped

    def get_mapping(self, key: str) -> Optional["ReaderMapping"]:
        """Returns the nested mapping stored under ``key``, if any."""
        values = self._values(key)
        if values is _MISSING:
            return None
        return ReaderMapping(list(values), self.context)

    def get_iter(self) -> Iterator[Tuple[str, "ReaderObject"]]:
        """Yields ``(key, child)`` pairs in document order."""
        for item in self._items:
            if isinstance(item, SList) and item and isinstance(item[0], Symbol):
                yield str(item[0]), ReaderObject(item, self.context)


class ReaderObject:
    """A named node, e.g. the document root or a ``sector`` child."""

    def __init__(self, node: SList, context: str = "<stream>") -> None:
        self._node = node
        self.context = context

    @property
    def line(self) -> int:
        return self._node.line

    def get_name(self) -> str:
        if self._node and isinstance(self._node[0], Symbol):
            return str(self._node[0])
        return ""

    def get_mapping(self) -> ReaderMapping:
        return ReaderMapping(list(self._node[1:]), self.context)

    def get_values(self) -> List[Any]:
        """Returns the node's scalar values as plain Python objects.

        Nested lists are skipped, symbols become ``str`` and translatable
        strings are resolved.
        """
        values = []
        for value in self._node[1:]:
            value = _unwrap(value)
            if isinstance(value, SList):
                continue
            values.append(str(value) if isinstance(value, Symbol) else value)
        return values


class ReaderDocument:
    """A parsed document together with the name it was read from.

    Documents are context managers so callers can scope them with ``with``;
    leaving the block drops the parsed tree.
    """

    def __init__(self, root: SList, filename: str) -> None:
        self._root: Optional[SList] = root
        self._filename = filename

    @classmethod
    def from_stream(cls, stream: Union[BinaryIO, TextIO, io.IOBase], context: str = "<stream>") -> "ReaderDocument":
        """Parses a document from an open text or binary stream.

        Args:
            stream: Readable stream positioned at the start of the document.
            context (str): Label used in diagnostics in place of a filename.
        """
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return cls(parse_sexpr(data, context), context)

    @classmethod
    def from_file(cls, filename: str, vfs: Optional[VirtualFileSystem] = None) -> "ReaderDocument":
        """Parses the document at a virtual path.

        Raises:
            FileNotFoundError: If the path does not exist in ``vfs``.
            DocumentParseError: If the contents are not a valid document.
        """
        vfs = vfs or VirtualFileSystem()
        with vfs.open(filename) as stream:
            return cls.from_stream(stream, filename)

    def get_filename(self) -> str:
        return self._filename

    def get_root(self) -> ReaderObject:
        if self._root is None:
            raise ValueError(f"Document '{self._filename}' has already been released")
        return ReaderObject(self._root, self._filename)

    def close(self) -> None:
        self._root = None

    def __enter__(self) -> "ReaderDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["ReaderDocument", "ReaderObject", "ReaderMapping"]
