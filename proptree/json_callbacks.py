"""Builds a property tree from the events of a JSON parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .ptree import PropertyTree

__all__ = ["StandardCallbacks"]

_NULL = "null"
_TRUE = "true"
_FALSE = "false"


class _Kind(Enum):
    ARRAY = auto()
    OBJECT = auto()
    KEY = auto()
    LEAF = auto()


@dataclass
class _Layer:
    kind: _Kind
    tree: PropertyTree


class StandardCallbacks:
    """Receive parser events and build a PropertyTree from them.

    Every JSON value becomes a node; scalars are stored as their text,
    array elements get empty keys and object members keep their names.
    """

    tree_type = PropertyTree

    def __init__(self) -> None:
        self._root = self.tree_type()
        self._key = ""
        self._stack: list[_Layer] = []

    # Scalars --------------------------------------------------------------

    def on_null(self) -> None:
        self._new_value()
        self._current_value = _NULL

    def on_boolean(self, b: bool) -> None:
        self._new_value()
        self._current_value = _TRUE if b else _FALSE

    def on_number(self, text: str) -> None:
        self._new_value()
        self._current_value = text

    def on_begin_number(self) -> None:
        self._new_value()

    def on_digit(self, d: str) -> None:
        self._current_value += d

    def on_end_number(self) -> None:
        pass

    def on_begin_string(self) -> None:
        self._new_value()

    def on_code_units(self, units: str) -> None:
        self._current_value += units

    def on_code_unit(self, c: str) -> None:
        self._current_value += c

    def on_end_string(self) -> None:
        pass

    # Containers -----------------------------------------------------------

    def on_begin_array(self) -> None:
        self._new_tree()
        self._stack[-1].kind = _Kind.ARRAY

    def on_end_array(self) -> None:
        self._close_container()

    def on_begin_object(self) -> None:
        self._new_tree()
        self._stack[-1].kind = _Kind.OBJECT

    def on_end_object(self) -> None:
        self._close_container()

    def output(self) -> PropertyTree:
        """Return the tree built so far."""
        return self._root

    # For subclasses -------------------------------------------------------

    def _is_key(self) -> bool:
        return self._stack[-1].kind is _Kind.KEY

    @property
    def _current_value(self) -> str:
        layer = self._stack[-1]
        if layer.kind is _Kind.KEY:
            return self._key
        return layer.tree.data

    @_current_value.setter
    def _current_value(self, text: str) -> None:
        layer = self._stack[-1]
        if layer.kind is _Kind.KEY:
            self._key = text
        else:
            layer.tree.data = text

    # Internals ------------------------------------------------------------

    def _close_container(self) -> None:
        if self._stack[-1].kind is _Kind.LEAF:
            self._stack.pop()
        self._stack.pop()

    def _new_tree(self) -> PropertyTree:
        while self._stack and self._stack[-1].kind is _Kind.LEAF:
            self._stack.pop()
        if not self._stack:
            self._stack.append(_Layer(_Kind.LEAF, self._root))
            return self._root
        layer = self._stack[-1]
        if layer.kind is _Kind.ARRAY:
            child = layer.tree.push_back("", self.tree_type())
        elif layer.kind is _Kind.KEY:
            child = layer.tree.push_back(self._key, self.tree_type())
            layer.kind = _Kind.OBJECT
        else:
            raise RuntimeError("an object member must start with a key string")
        self._stack.append(_Layer(_Kind.LEAF, child))
        return child

    def _new_value(self) -> None:
        while self._stack and self._stack[-1].kind is _Kind.LEAF:
            self._stack.pop()
        if self._stack and self._stack[-1].kind is _Kind.OBJECT:
            self._stack[-1].kind = _Kind.KEY
            self._key = ""
            return
        self._new_tree()