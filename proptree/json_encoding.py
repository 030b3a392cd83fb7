"""Character classes and UTF-8 handling for JSON text held as bytes."""

from __future__ import annotations

from typing import Union

__all__ = [
    "EncodingError",
    "is_ws",
    "decode_hexdigit",
    "encode_codepoint",
    "read_codepoint",
    "skip_introduction",
]

CharLike = Union[str, int]
ByteData = Union[bytes, bytearray, memoryview]

# Number of trailing bytes for a byte >= 0x80, indexed by bits 3..6.
# -1 marks a stray trailing byte or a lead byte of a disallowed length.
_TRAIL_TABLE = (-1,) * 8 + (1,) * 4 + (2,) * 2 + (3,) + (-1,)

_BOM_LEAD = 0xEF


class EncodingError(ValueError):
    """The input holds a byte sequence that is not allowed in JSON text."""

    def __init__(self, position: int, message: str = "invalid code sequence") -> None:
        super().__init__(message)
        self.position = position
        self.message = message


def _as_char(c: CharLike) -> str:
    return chr(c) if isinstance(c, int) else c


def is_ws(c: CharLike) -> bool:
    """Return whether ``c`` is JSON whitespace."""
    return _as_char(c) in (" ", "\t", "\n", "\r")


def decode_hexdigit(c: CharLike) -> int:
    """Return the value of the hex digit ``c``, or -1 if it is not one."""
    ch = _as_char(c)
    if len(ch) != 1:
        return -1
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return -1


def _trail(bits: int) -> int:
    return 0x80 | (bits & 0x3F)


def encode_codepoint(codepoint: int) -> bytes:
    """Return the UTF-8 bytes of ``codepoint``.

    Codepoints above U+10FFFF produce no bytes.  Surrogate codepoints are
    encoded like any other three-byte codepoint.
    """
    if codepoint < 0:
        raise ValueError("codepoint must not be negative")
    if codepoint <= 0x7F:
        return bytes([codepoint])
    if codepoint <= 0x7FF:
        return bytes([0xC0 | (codepoint >> 6), _trail(codepoint)])
    if codepoint <= 0xFFFF:
        return bytes(
            [0xE0 | (codepoint >> 12), _trail(codepoint >> 6), _trail(codepoint)]
        )
    if codepoint <= 0x10FFFF:
        return bytes(
            [
                0xF0 | (codepoint >> 18),
                _trail(codepoint >> 12),
                _trail(codepoint >> 6),
                _trail(codepoint),
            ]
        )
    return b""


def read_codepoint(data: ByteData, pos: int) -> tuple[bytes, int]:
    """Read one UTF-8 encoded codepoint starting at ``pos``.

    Returns the bytes of the codepoint and the position after it.
    Control characters below 0x20, stray trailing bytes, lead bytes of
    sequences longer than four bytes, and truncated or malformed
    sequences raise EncodingError.
    """
    lead = data[pos]
    end = pos + 1
    if lead <= 0x7F:
        if lead < 0x20:
            raise EncodingError(pos)
        return bytes([lead]), end
    trailing = _TRAIL_TABLE[(lead & 0x7F) >> 3]
    if trailing == -1:
        raise EncodingError(pos)
    for _ in range(trailing):
        if end >= len(data) or (data[end] & 0xC0) != 0x80:
            raise EncodingError(end)
        end += 1
    return bytes(data[pos:end]), end


def skip_introduction(data: ByteData, pos: int = 0) -> int:
    """Skip a byte order mark at ``pos``; return the position after it."""
    if pos < len(data) and data[pos] == _BOM_LEAD:
        return min(pos + 3, len(data))
    return pos