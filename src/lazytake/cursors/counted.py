from __future__ import annotations
import functools
from typing import Any, Generic, TypeVar

from .protocols import DefaultSentinel
from lazytake.capability import counted_category
from lazytake.models.capabilities import Category

T = TypeVar("T")


def _comparable(a: object, b: object) -> bool:
    """Inner cursors are comparable when one's type is a base of the other's
    (e.g. SequenceCursor and ConstSequenceCursor)."""
    return isinstance(a, type(b)) or isinstance(b, type(a))


@functools.total_ordering
class CountedCursor(Generic[T]):
    """
    Cursor that yields at most `count` elements of `inner`, advancing `inner`
    only when another element is actually wanted.

    Over an N-element traversal the inner cursor moves N-1 times: the last
    step only brings the count to zero. Equality, ordering and distance look
    at the remaining count alone, never at the inner position.
    """
    __slots__ = ("_inner", "_remaining")

    def __init__(self, inner: Any, n: int):
        self._inner = inner
        self._remaining = n

    @property
    def base(self) -> Any: return self._inner

    @property
    def count(self) -> int: return self._remaining

    @property
    def category(self) -> Category:
        return counted_category(type(self._inner))

    @property
    def single_pass(self) -> bool:
        return self.category is Category.INPUT

    # element access
    def read(self) -> T:
        return self._inner.read()

    def write(self, value: T) -> None:
        self._inner.write(value)

    def move(self) -> T:
        mv = getattr(self._inner, "move", None)
        return mv() if mv is not None else self._inner.read()

    def swap(self, other: CountedCursor) -> None:
        self._inner.swap(other._inner)

    # traversal
    def advance(self) -> CountedCursor[T]:
        if self._remaining > 1:
            self._inner.advance()
        self._remaining -= 1
        return self

    def copy(self) -> CountedCursor[T]:
        if self.single_pass:
            raise TypeError(f"{type(self._inner).__name__} is single-pass and cannot be copied")
        return CountedCursor(self._inner.copy(), self._remaining)

    def as_const(self) -> CountedCursor[T]:
        return CountedCursor(self._inner.as_const(), self._remaining)

    def distance_to(self, other: Any) -> int:
        """Same as ``self - other``: ``other.count - self.count``."""
        return self - other

    # comparisons
    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountedCursor):
            if not _comparable(self._inner, other._inner):
                return NotImplemented
            return self._remaining == other._remaining
        if isinstance(other, DefaultSentinel):
            return self._remaining == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, CountedCursor) and _comparable(self._inner, other._inner):
            return other._remaining < self._remaining
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __sub__(self, other: object) -> int:
        if isinstance(other, CountedCursor):
            if not _comparable(self._inner, other._inner):
                return NotImplemented
            return other._remaining - self._remaining
        if isinstance(other, DefaultSentinel):
            return -self._remaining
        return NotImplemented

    def __rsub__(self, other: object) -> int:
        if isinstance(other, DefaultSentinel):
            return self._remaining
        return NotImplemented

    def __repr__(self) -> str:
        return f"CountedCursor({self._inner!r}, {self._remaining})"
