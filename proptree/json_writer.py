"""Writing property trees as JSON text."""

from __future__ import annotations

from typing import Iterator, TextIO

from .basic_tree import BasicTree
from .ptree import PtreeError

__all__ = [
    "JsonParserError",
    "create_escapes",
    "verify_json",
    "write_json",
    "to_json_string",
]

_HEX_DIGITS = "0123456789ABCDEF"

_SHORT_ESCAPES = {
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "/": "\\/",
    '"': '\\"',
    "\\": "\\\\",
}

_INDENT_WIDTH = 4


class JsonParserError(PtreeError):
    """Reading or writing JSON failed."""

    def __init__(self, message: str, filename: str = "", line: int = 0) -> None:
        where = f"{filename}({line}): " if filename else ""
        super().__init__(f"{where}{message}")
        self.message = message
        self.filename = filename
        self.line = line


def _passes_through(code: int) -> bool:
    return (
        code in (0x20, 0x21)
        or 0x23 <= code <= 0x2E
        or 0x30 <= code <= 0x5B
        or code >= 0x5D
    )


def _escape_char(ch: str) -> str:
    code = ord(ch)
    if _passes_through(code):
        return ch
    short = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    code = min(code, 0xFFFF)
    return "\\u" + "".join(_HEX_DIGITS[(code >> shift) & 0xF] for shift in (12, 8, 4, 0))


def create_escapes(s: str) -> str:
    """Escape ``s`` for use inside a JSON string literal.

    Characters from U+005D upwards are written unchanged.
    """
    return "".join(_escape_char(ch) for ch in s)


def verify_json(tree: BasicTree, depth: int = 0) -> bool:
    """Return whether ``tree`` can be represented as JSON.

    The root must hold no data, and no node may hold both data and children.
    """
    if depth == 0 and tree.data:
        return False
    if tree.data and not tree.empty():
        return False
    return all(verify_json(child, depth + 1) for _, child in tree)


def _chunks(tree: BasicTree, indent: int, pretty: bool) -> Iterator[str]:
    if indent > 0 and tree.empty():
        yield '"' + create_escapes(tree.data) + '"'
        return
    is_array = indent > 0 and tree.count("") == len(tree)
    opening, closing = ("[", "]") if is_array else ("{", "}")
    inner_pad = " " * (_INDENT_WIDTH * (indent + 1))
    yield opening
    if pretty:
        yield "\n"
    last = len(tree) - 1
    for position, (key, child) in enumerate(tree):
        if pretty:
            yield inner_pad
        if not is_array:
            yield '"' + create_escapes(key) + '":'
            if pretty:
                yield " "
        yield from _chunks(child, indent + 1, pretty)
        if position < last:
            yield ","
        if pretty:
            yield "\n"
    if pretty:
        yield " " * (_INDENT_WIDTH * indent)
    yield closing


def _render(tree: BasicTree, pretty: bool, filename: str) -> str:
    if not verify_json(tree, 0):
        raise JsonParserError(
            "ptree contains data that cannot be represented in JSON format",
            filename,
            0,
        )
    return "".join(_chunks(tree, 0, pretty)) + "\n"


def write_json(
    stream: TextIO, tree: BasicTree, pretty: bool = True, filename: str = ""
) -> None:
    """Write ``tree`` as JSON to the text stream ``stream``.

    Raises JsonParserError if the tree cannot be represented in JSON or
    the stream cannot be written.
    """
    text = _render(tree, pretty, filename)
    try:
        stream.write(text)
        stream.flush()
    except OSError as exc:
        raise JsonParserError("write error", filename, 0) from exc


def to_json_string(tree: BasicTree, pretty: bool = True) -> str:
    """Return ``tree`` as JSON text, ending with a newline."""
    return _render(tree, pretty, "")