import gettext
import io
import re

import pytest

from tux_levels.errors import DocumentParseError
from tux_levels.reader import ReaderDocument, SList, Symbol, parse_sexpr
from tux_levels.utils import translations


def _mapping(text):
    return ReaderDocument.from_stream(io.StringIO(text), "test").get_root().get_mapping()


def test_parse_atoms():
    tree = parse_sexpr('(root "text" sym 12 -3 4.5 1e3 #t #f)')

    assert tree[0] == Symbol("root") and isinstance(tree[0], Symbol)
    assert tree[1] == "text" and not isinstance(tree[1], Symbol)
    assert tree[2] == Symbol("sym")
    assert tree[3] == 12 and isinstance(tree[3], int)
    assert tree[4] == -3
    assert tree[5] == 4.5
    assert tree[6] == 1000.0
    assert tree[7] is True and tree[8] is False


def test_parse_string_escapes_and_comments():
    tree = parse_sexpr('; leading comment\n(root "a \\"quoted\\" line\\nnext" ; trailing\n)')
    assert tree[1] == 'a "quoted" line\nnext'


def test_parse_tracks_lines():
    tree = parse_sexpr("(root\n\n  (child 1))")
    assert tree.line == 1
    assert isinstance(tree[1], SList)
    assert tree[1].line == 3


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("   ; only a comment", "empty"),
        ("(root (child 1)", "test:1: unbalanced"),
        (")", re.escape("test:1: unexpected ')'")),
        ('(root "never closed)', "unterminated string"),
        ("(root) (other)", "after end of document"),
        ("(root))", "after end of document"),
        ("root", re.escape("expected '(' at start of document")),
        ("(root #x)", "unknown literal"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(DocumentParseError, match=message):
        parse_sexpr(text, "test")


def test_error_reports_line_number():
    with pytest.raises(DocumentParseError, match=r"^test:3: "):
        parse_sexpr('(root\n  (a 1)\n  (b "open\n', "test")


def test_root_name_and_filename():
    doc = ReaderDocument.from_stream(io.StringIO("(supertux-level (name \"x\"))"), "ctx-label")
    assert doc.get_filename() == "ctx-label"
    assert doc.get_root().get_name() == "supertux-level"


def test_document_released_after_with_block():
    with ReaderDocument.from_stream(io.StringIO("(root)"), "ctx") as doc:
        assert doc.get_root().get_name() == "root"
    with pytest.raises(ValueError):
        doc.get_root()


def test_typed_getters():
    mapping = _mapping('(root (s "str") (i 3) (f 2.5) (b #t) (l 1 2 3) (sym word))')

    assert mapping.get_string("s") == "str"
    assert mapping.get_string("sym") == "word"
    assert mapping.get_int("i") == 3
    assert mapping.get_float("f") == 2.5
    assert mapping.get_float("i") == 3.0
    assert mapping.get_bool("b") is True
    assert mapping.get_list("l") == [1, 2, 3]
    assert mapping.get("l") == [1, 2, 3]
    assert mapping.get("i") == 3


def test_typed_getters_fall_back_on_mismatch():
    mapping = _mapping('(root (s "str") (i 3) (b #t) (l 1 2))')

    assert mapping.get_int("s", 7) == 7
    assert mapping.get_int("b", 7) == 7
    assert mapping.get_float("b", 1.5) == 1.5
    assert mapping.get_string("i", "fallback") == "fallback"
    assert mapping.get_bool("i") is None
    assert mapping.get_int("l", 0) == 0


def test_absent_keys_return_default():
    mapping = _mapping("(root)")

    assert mapping.get("missing") is None
    assert mapping.get("missing", "x") == "x"
    assert mapping.get_string("missing", "") == ""
    assert mapping.get_mapping("missing") is None
    assert not mapping.has("missing")


def test_repeated_keys_iterate_in_order():
    mapping = _mapping('(root (sector (name "a")) (other 1) (sector (name "b")))')

    pairs = list(mapping.get_iter())
    assert [key for key, _ in pairs] == ["sector", "other", "sector"]
    names = [child.get_mapping().get_string("name") for key, child in pairs if key == "sector"]
    assert names == ["a", "b"]
    assert mapping.get_mapping("sector").get_string("name") == "a"


def test_translatable_strings_use_active_catalogue(monkeypatch):
    class Upper(gettext.NullTranslations):
        def gettext(self, message):
            return message.upper()

    mapping = _mapping('(root (name (_ "hello")) (plain "hello"))')
    assert mapping.get_string("name") == "hello"

    monkeypatch.setattr(translations, "_active", Upper())
    assert mapping.get_string("name") == "HELLO"
    assert mapping.get_string("plain") == "hello"


def test_from_file_reads_through_vfs(vfs):
    with ReaderDocument.from_file("levels/forest.stl", vfs) as doc:
        assert doc.get_filename() == "levels/forest.stl"
        assert doc.get_root().get_mapping().get_int("version") == 2


def test_from_file_missing(vfs):
    with pytest.raises(FileNotFoundError):
        ReaderDocument.from_file("levels/nope.stl", vfs)
