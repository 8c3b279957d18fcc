from __future__ import annotations
import itertools
from collections.abc import Collection, Iterator
from typing import Any

_EXHAUSTED = object()


class CollectionCursor:
    """Forward cursor over any sized iterable; copies share input through itertools.tee."""
    __slots__ = ("owner", "pos", "_it", "_value")

    def __init__(self, owner: Collection, it: Iterator | None = None, pos: int = 0):
        self.owner = owner
        self.pos = pos
        self._it = iter(owner) if it is None else it
        self._value = next(self._it, _EXHAUSTED)

    @property
    def exhausted(self) -> bool:
        return self._value is _EXHAUSTED

    def read(self) -> Any:
        if self._value is _EXHAUSTED:
            raise IndexError("read past the end of the collection")
        return self._value

    def advance(self) -> CollectionCursor:
        self._value = next(self._it, _EXHAUSTED)
        self.pos += 1
        return self

    def copy(self) -> CollectionCursor:
        mine, theirs = itertools.tee(self._it)
        self._it = mine
        dup = object.__new__(CollectionCursor)
        dup.owner, dup.pos, dup._it, dup._value = self.owner, self.pos, theirs, self._value
        return dup

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CollectionCursor):
            return self.owner is other.owner and self.pos == other.pos
        if isinstance(other, CollectionEnd):
            return other.owner is self.owner and self.exhausted
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CollectionCursor(pos={self.pos})"


class CollectionEnd:
    __slots__ = ("owner",)

    def __init__(self, owner: Collection):
        self.owner = owner

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CollectionCursor):
            return other == self
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class CollectionSource:
    """Sized, forward-only source over sets, dict views and other collections."""
    cursor_type = CollectionCursor
    sentinel_type = CollectionEnd
    borrowed = True

    def __init__(self, collection: Collection):
        self.collection = collection

    def begin(self) -> CollectionCursor: return CollectionCursor(self.collection)
    def end(self) -> CollectionEnd: return CollectionEnd(self.collection)
    def size(self) -> int: return len(self.collection)

    def __repr__(self) -> str:
        return f"CollectionSource({self.collection!r})"
