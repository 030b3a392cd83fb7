"""Conversion between the string data held in a tree and Python values."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Generic, TypeVar

__all__ = ["StreamTranslator", "translator_for"]

T = TypeVar("T")

# Characters that stream extraction treats as whitespace.
_WS = " \t\n\v\f\r"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# Enough significant digits to round-trip any IEEE double.
_FLOAT_DIGITS = 17


def _strip(text: str) -> str:
    return text.strip(_WS)


class StreamTranslator(Generic[T]):
    """Translate between strings and values of one external type.

    ``get_value`` returns ``None`` when the text cannot be read as the
    type as a whole; leading and trailing whitespace is ignored.
    ``put_value`` returns the text form of a value, or ``None`` if it
    cannot be produced.
    """

    def __init__(self, type_: type[T]) -> None:
        self.type_ = type_

    def __repr__(self) -> str:
        return f"StreamTranslator({self.type_.__name__})"

    def get_value(self, text: str) -> T | None:
        if self.type_ is str:
            return text  # type: ignore[return-value]
        body = _strip(text)
        if self.type_ is bool:
            return self._read_bool(body)  # type: ignore[return-value]
        if self.type_ is int:
            if not _INT_RE.fullmatch(body):
                return None
            return int(body)  # type: ignore[return-value]
        if self.type_ is float:
            if not _FLOAT_RE.fullmatch(body):
                return None
            return float(body)  # type: ignore[return-value]
        if not body:
            return None
        try:
            return self.type_(body)  # type: ignore[call-arg]
        except (ValueError, TypeError, ArithmeticError):
            return None

    def put_value(self, value: Any) -> str | None:
        if self.type_ is str:
            return str(value)
        if self.type_ is bool:
            return "true" if value else "false"
        if self.type_ is float:
            try:
                return format(float(value), f".{_FLOAT_DIGITS}g")
            except (ValueError, TypeError, OverflowError):
                return None
        if self.type_ is int:
            try:
                return str(int(value))
            except (ValueError, TypeError, OverflowError):
                return None
        try:
            return str(value)
        except (ValueError, TypeError):
            return None

    @staticmethod
    def _read_bool(body: str) -> bool | None:
        # Numeric form first (only 0 and 1 are valid), then the word form.
        if _INT_RE.fullmatch(body):
            number = int(body)
            if number in (0, 1):
                return bool(number)
            return None
        if body == "true":
            return True
        if body == "false":
            return False
        return None


@lru_cache(maxsize=None)
def translator_for(type_: type[T]) -> StreamTranslator[T]:
    """Return the default translator between tree strings and ``type_``."""
    return StreamTranslator(type_)