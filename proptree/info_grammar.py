"""Syntax checking for the INFO property tree format.

The grammar, with ``;`` comments and whitespace skipped between tokens::

    escape_seq = one of 0 a b f n r t v " ' \\
    chr        = any char except space, \\ { } # "  |  \\ escape_seq
    qchr       = any char except " newline \\       |  \\ escape_seq
    string     = chr+                      (no skipping inside)
    qstring    = '"' qchr* '"'             (no skipping inside)
    cstring    = '"' qchr* '"' '\\'         (no skipping inside)
    key        = string | qstring
    value      = string | qstring | cstring+ qstring | nothing
    entry      = key value ['{' entry* '}']
    info       = entry* end

Alternatives are tried in order and the first one that matches is kept.
``#include`` directives are not recognised.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .ptree import PtreeError

__all__ = ["InfoParserError", "is_valid_info", "main"]

_SPACE = frozenset(" \t\n\v\f\r")
_ESCAPES = frozenset("0abfnrtv\"'\\")
_NOT_IN_CHR = frozenset('\\{}#"')
_NOT_IN_QCHR = frozenset('"\n\\')


class InfoParserError(PtreeError):
    """Reading INFO data failed."""

    def __init__(self, message: str, filename: str = "", line: int = 0) -> None:
        where = f"{filename}({line}): " if filename else ""
        super().__init__(f"{where}{message}")
        self.message = message
        self.filename = filename
        self.line = line


class _Checker:
    """Recursive-descent recogniser; each rule returns the end position or None."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.end = len(text)

    def skip(self, pos: int) -> int:
        text, end = self.text, self.end
        while pos < end:
            ch = text[pos]
            if ch in _SPACE:
                pos += 1
            elif ch == ";":
                newline = text.find("\n", pos)
                pos = end if newline < 0 else newline + 1
            else:
                break
        return pos

    def _escape(self, pos: int) -> Optional[int]:
        # ``pos`` is at a backslash.
        if pos + 1 < self.end and self.text[pos + 1] in _ESCAPES:
            return pos + 2
        return None

    def chr(self, pos: int) -> Optional[int]:
        if pos >= self.end:
            return None
        ch = self.text[pos]
        if ch == "\\":
            return self._escape(pos)
        if ch in _SPACE or ch in _NOT_IN_CHR:
            return None
        return pos + 1

    def qchr(self, pos: int) -> Optional[int]:
        if pos >= self.end:
            return None
        ch = self.text[pos]
        if ch == "\\":
            return self._escape(pos)
        if ch in _NOT_IN_QCHR:
            return None
        return pos + 1

    def _expect(self, pos: int, ch: str) -> Optional[int]:
        if pos < self.end and self.text[pos] == ch:
            return pos + 1
        return None

    def string(self, pos: int) -> Optional[int]:
        start = cur = self.skip(pos)
        while (nxt := self.chr(cur)) is not None:
            cur = nxt
        return cur if cur > start else None

    def quoted(self, pos: int, continued: bool = False) -> Optional[int]:
        cur = self._expect(self.skip(pos), '"')
        if cur is None:
            return None
        while (nxt := self.qchr(cur)) is not None:
            cur = nxt
        cur = self._expect(cur, '"')
        if cur is not None and continued:
            cur = self._expect(cur, "\\")
        return cur

    def key(self, pos: int) -> Optional[int]:
        found = self.string(pos)
        return found if found is not None else self.quoted(pos)

    def value(self, pos: int) -> int:
        for rule in (self.string, self.quoted):
            found = rule(pos)
            if found is not None:
                return found
        cur = self.quoted(pos, continued=True)
        if cur is not None:
            while (nxt := self.quoted(cur, continued=True)) is not None:
                cur = nxt
            last = self.quoted(cur)
            if last is not None:
                return last
        return pos

    def entry(self, pos: int) -> Optional[int]:
        cur = self.key(pos)
        if cur is None:
            return None
        cur = self.value(cur)
        block = self._block(cur)
        return cur if block is None else block

    def _block(self, pos: int) -> Optional[int]:
        cur = self._expect(self.skip(pos), "{")
        if cur is None:
            return None
        cur = self.entries(cur)
        return self._expect(self.skip(cur), "}")

    def entries(self, pos: int) -> int:
        while (nxt := self.entry(pos)) is not None:
            pos = nxt
        return pos

    def info(self) -> bool:
        return self.skip(self.entries(0)) == self.end


def is_valid_info(text: str) -> bool:
    """Return whether ``text`` as a whole is well-formed INFO data."""
    return _Checker(text).info()


_SAMPLE_BLOCK = (
    "key1 data1\n{\n\tkey data\n}\n"
    'key2 "data2  " {\n\tkey data\n}\n'
    'key3 "data"\n\t "3" {\n\tkey data\n}\n'
    "\n"
    '"key4" data4\n{\n\tkey data\n}\n'
)

_SAMPLES = (
    "\n"
    + _SAMPLE_BLOCK
    + '"key.5" "data.5" { \n\tkey data \n}\n'
    + '"key6" "data"\n\t   "6" {\n\tkey data\n}\n'
    + "   \n"
    + _SAMPLE_BLOCK
    + '"key.5" "data.5" {\n\tkey data\n}\n'
    + '"key6" "data"\n\t   "6" {\n\tkey data\n}\n'
    + '\\\\key\\t7 data7\\n\\"data7\\"\n{\n\tkey data\n}\n'
    + '"\\\\key\\t8" "data8\\n\\"data8\\""\n{\n\tkey data\n}\n'
    + "\n",
    "key1\nkey2\nkey3\nkey4\n",
)


def _read(filename: str) -> str:
    try:
        return Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InfoParserError("cannot open file", filename, 0) from exc


def _report(ok: bool) -> None:
    print(f"Parse result: {'Success' if ok else 'Failure'}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check each named INFO file, or the built-in samples when none are given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        for sample in _SAMPLES:
            _report(is_valid_info(sample))
        return 0
    status = 0
    for filename in args:
        try:
            text = _read(filename)
        except InfoParserError as exc:
            print(exc, file=sys.stderr)
            status = 1
            continue
        _report(is_valid_info(text))
    return status


if __name__ == "__main__":
    sys.exit(main())