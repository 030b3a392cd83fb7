"""Property trees addressed by separator-delimited paths."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar, Union

from .basic_tree import BasicTree
from .translator import translator_for

__all__ = [
    "PtreeError",
    "PtreeBadData",
    "PtreeBadPath",
    "PropertyTree",
    "CaseInsensitivePropertyTree",
    "split_path",
]

PathLike = Union[str, Iterable[str]]
TreeT = TypeVar("TreeT", bound="PropertyTree")

_MISSING: Any = object()


class PtreeError(RuntimeError):
    """Base class of all property tree errors."""


class PtreeBadData(PtreeError):
    """A value could not be converted to or from the tree's data."""

    def __init__(self, message: str, data: Any) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


class PtreeBadPath(PtreeError):
    """A path did not lead to a node."""

    def __init__(self, message: str, path: Any) -> None:
        super().__init__(f"{message} ({_path_text(path)})")
        self.message = message
        self.path = path


def split_path(path: PathLike, separator: str = ".") -> list[str]:
    """Split ``path`` into keys.

    An empty string is the empty path, naming the tree itself.  A single
    trailing separator is ignored; empty segments elsewhere name empty
    keys.  A non-string iterable is taken as already split.
    """
    if not isinstance(path, str):
        return list(path)
    if not path:
        return []
    parts = path.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _path_text(path: Any, separator: str = ".") -> str:
    if isinstance(path, str):
        return path
    try:
        return separator.join(path)
    except TypeError:
        return str(path)


def _resolve_translator(type_: Any, default: Any) -> Any:
    if type_ is None:
        type_ = str if default is _MISSING else type(default)
    if isinstance(type_, type):
        return type_, translator_for(type_)
    # A custom translator object exposing get_value/put_value.
    return type(type_), type_


class PropertyTree(BasicTree):
    """A tree of string data whose nodes are reached by dotted paths."""

    path_separator = "."

    def _keys(self, path: PathLike) -> list[str]:
        return split_path(path, self.path_separator)

    def _walk(self, path: PathLike) -> Optional[PropertyTree]:
        node: Optional[BasicTree] = self
        for key in self._keys(path):
            node = node.find(key)  # type: ignore[union-attr]
            if node is None:
                return None
        return node  # type: ignore[return-value]

    def _force_parent(self, path: PathLike) -> tuple[PropertyTree, str]:
        keys = self._keys(path)
        if not keys:
            raise ValueError("empty path not allowed here")
        node: BasicTree = self
        for key in keys[:-1]:
            child = node.find(key)
            if child is None:
                child = node.push_back(key, type(self)())
            node = child
        return node, keys[-1]  # type: ignore[return-value]

    # Child access ---------------------------------------------------------

    def get_child(self, path: PathLike, default: Any = _MISSING) -> Any:
        """Return the node at ``path``; ``default`` or PtreeBadPath if absent."""
        node = self._walk(path)
        if node is not None:
            return node
        if default is _MISSING:
            raise PtreeBadPath("No such node", path)
        return default

    def get_child_optional(self, path: PathLike) -> Optional[PropertyTree]:
        """Return the node at ``path``, or None."""
        return self._walk(path)

    def put_child(self, path: PathLike, child: BasicTree) -> PropertyTree:
        """Set a copy of ``child`` at ``path``, replacing the first match."""
        parent, fragment = self._force_parent(path)
        existing = parent.find(fragment)
        if existing is not None:
            replacement = child.copy()
            existing.swap(replacement)
            return existing  # type: ignore[return-value]
        return parent.push_back(fragment, child)  # type: ignore[return-value]

    def add_child(self, path: PathLike, child: BasicTree) -> PropertyTree:
        """Append a copy of ``child`` at ``path``, even if the key exists."""
        parent, fragment = self._force_parent(path)
        return parent.push_back(fragment, child)  # type: ignore[return-value]

    # Values ---------------------------------------------------------------

    def get_value(self, type_: Any = None, default: Any = _MISSING) -> Any:
        """Return this node's data converted to ``type_``.

        Without ``type_`` the type of ``default`` is used, else ``str``.
        A failed conversion returns ``default`` or raises PtreeBadData.
        """
        target, translator = _resolve_translator(type_, default)
        value = translator.get_value(self.data)
        if value is not None:
            return value
        if default is _MISSING:
            raise PtreeBadData(
                f'conversion of data to type "{target.__name__}" failed',
                self.data,
            )
        return default

    def get_value_optional(self, type_: Any = None) -> Any:
        """Return this node's data converted to ``type_``, or None."""
        _, translator = _resolve_translator(type_, _MISSING)
        return translator.get_value(self.data)

    def get(
        self, path: PathLike, type_: Any = None, default: Any = _MISSING
    ) -> Any:
        """Return the value at ``path`` converted to ``type_``.

        With ``default`` given, a missing node or failed conversion returns
        it; otherwise PtreeBadPath or PtreeBadData is raised.
        """
        if default is _MISSING:
            return self.get_child(path).get_value(type_)
        if type_ is None:
            type_ = type(default)
        value = self.get_optional(path, type_)
        return default if value is None else value

    def get_optional(self, path: PathLike, type_: Any = None) -> Any:
        """Return the converted value at ``path``, or None."""
        node = self._walk(path)
        if node is None:
            return None
        return node.get_value_optional(type_)

    def put_value(self, value: Any) -> None:
        """Store ``value``, converted to a string, as this node's data."""
        text = translator_for(type(value)).put_value(value)
        if text is None:
            raise PtreeBadData(
                f'conversion of type "{type(value).__name__}" to data failed',
                None,
            )
        self.data = text

    def put(self, path: PathLike, value: Any) -> PropertyTree:
        """Set the value at ``path``, creating nodes as needed."""
        node = self._walk(path)
        if node is None:
            node = self.put_child(path, type(self)())
        node.put_value(value)
        return node

    def add(self, path: PathLike, value: Any) -> PropertyTree:
        """Append a new node holding ``value`` at ``path``."""
        node = self.add_child(path, type(self)())
        node.put_value(value)
        return node


class CaseInsensitivePropertyTree(PropertyTree):
    """A property tree whose keys compare without regard to case."""

    def _order_key(self, key: str) -> Any:
        return key.lower()