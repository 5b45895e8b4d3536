"""Exception kinds raised while reading level documents."""


class LevelError(Exception):
    """Base class for every error raised by tux_levels."""


class DocumentParseError(LevelError, ValueError):
    """The raw document text is not a well-formed S-expression."""


class LevelFormatError(LevelError, ValueError):
    """The document parsed, but its root node is not a level."""


class LevelReadError(LevelError, RuntimeError):
    """Loading a level from a path failed.

    Whatever went wrong underneath is folded into the message, which always
    names the offending path. The original exception is kept as ``__cause__``.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Problem when reading level '{path}': {message}")
        self.path = path


__all__ = ["LevelError", "DocumentParseError", "LevelFormatError", "LevelReadError"]
