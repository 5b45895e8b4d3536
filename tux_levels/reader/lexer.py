"""
lexer.py

Tokenizer and tree builder for the S-expression dialect used by level files.
The output is a tree of ``SList`` nodes (lists that remember their source
line) holding ``Symbol``, ``str``, ``int``, ``float`` and ``bool`` atoms.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Union

from tux_levels.errors import DocumentParseError


class Symbol(str):
    """Bare identifier atom, e.g. ``sector`` or ``target-time``."""

    def __repr__(self) -> str:
        return f"Symbol({str(self)!r})"


class SList(list):
    """A parenthesised list; ``line`` is where its opening paren appeared."""

    def __init__(self, items=(), line: int = 0) -> None:
        super().__init__(items)
        self.line = line


Atom = Union[Symbol, str, int, float, bool]


@dataclass
class Token:
    kind: str
    value: object
    line: int


_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}
_INTEGER = re.compile(r"[+-]?\d+\Z")
_REAL = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?\Z")
_DELIMITERS = set('()";') | set(" \t\r\n")


def tokenize(text: str, context: str = "<stream>") -> Iterator[Token]:
    """Yields tokens from ``text``.

    Raises:
        DocumentParseError: On unterminated strings or unknown ``#`` literals.
    """
    i = 0
    line = 1
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\n":
            line += 1
            i += 1
        elif ch in " \t\r":
            i += 1
        elif ch == ";":
            while i < length and text[i] != "\n":
                i += 1
        elif ch == "(":
            yield Token("(", ch, line)
            i += 1
        elif ch == ")":
            yield Token(")", ch, line)
            i += 1
        elif ch == '"':
            start_line = line
            i += 1
            chars: List[str] = []
            while True:
                if i >= length:
                    raise DocumentParseError(f"{context}:{start_line}: unterminated string")
                ch = text[i]
                if ch == '"':
                    i += 1
                    break
                if ch == "\\" and i + 1 < length:
                    chars.append(_ESCAPES.get(text[i + 1], text[i + 1]))
                    i += 2
                    continue
                if ch == "\n":
                    line += 1
                chars.append(ch)
                i += 1
            yield Token("string", "".join(chars), start_line)
        else:
            start = i
            while i < length and text[i] not in _DELIMITERS:
                i += 1
            word = text[start:i]
            yield Token("atom", _convert_atom(word, context, line), line)


def _convert_atom(word: str, context: str, line: int) -> Atom:
    if word.startswith("#"):
        if word in ("#t", "#true"):
            return True
        if word in ("#f", "#false"):
            return False
        raise DocumentParseError(f"{context}:{line}: unknown literal '{word}'")
    if _INTEGER.match(word):
        return int(word)
    if _REAL.match(word):
        return float(word)
    return Symbol(word)


def parse_sexpr(text: str, context: str = "<stream>") -> SList:
    """Parses exactly one top-level list from ``text``.

    Args:
        text (str): Document source.
        context (str): Label used to prefix error messages.

    Returns:
        SList: The top-level list.

    Raises:
        DocumentParseError: If the text is empty, unbalanced, does not start
            with a list, or has content after the first list.
    """
    stack: List[SList] = []
    root = None
    for token in tokenize(text, context):
        if root is not None:
            raise DocumentParseError(f"{context}:{token.line}: unexpected content after end of document")
        if token.kind == "(":
            stack.append(SList(line=token.line))
        elif token.kind == ")":
            if not stack:
                raise DocumentParseError(f"{context}:{token.line}: unexpected ')'")
            done = stack.pop()
            if stack:
                stack[-1].append(done)
            else:
                root = done
        else:
            if not stack:
                raise DocumentParseError(f"{context}:{token.line}: expected '(' at start of document")
            stack[-1].append(token.value)

    if stack:
        raise DocumentParseError(f"{context}:{stack[-1].line}: unbalanced '(' never closed")
    if root is None:
        raise DocumentParseError(f"{context}: document is empty")
    return root


__all__ = ["Symbol", "SList", "Token", "tokenize", "parse_sexpr"]
