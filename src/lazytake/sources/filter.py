from __future__ import annotations
from typing import Any, Callable

from lazytake.capability import category_of
from lazytake.sources.adapt import as_source
from lazytake.models.capabilities import Category


class FilterCursor:
    """Position of the next element of `inner` satisfying `pred`."""
    __slots__ = ("inner", "end", "pred")

    def __init__(self, inner: Any, end: Any, pred: Callable[[Any], bool]):
        self.inner = inner
        self.end = end
        self.pred = pred

    def _satisfy(self) -> None:
        while self.inner != self.end and not self.pred(self.inner.read()):
            self.inner.advance()

    def read(self) -> Any: return self.inner.read()

    def advance(self) -> FilterCursor:
        self.inner.advance()
        self._satisfy()
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterCursor):
            return self.inner == other.inner
        if isinstance(other, FilterEnd):
            return self.inner == other.end
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class ForwardFilterCursor(FilterCursor):
    __slots__ = ()

    def copy(self) -> ForwardFilterCursor:
        return ForwardFilterCursor(self.inner.copy(), self.end, self.pred)


class FilterEnd:
    __slots__ = ("end",)

    def __init__(self, end: Any):
        self.end = end

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterCursor):
            return other.inner == self.end
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class FilterSource:
    """Elements of another source that satisfy a predicate. Never sized."""
    sentinel_type = FilterEnd

    def __init__(self, source: Any, pred: Callable[[Any], bool]):
        self.source = as_source(source)
        self.pred = pred
        forward = category_of(self.source.cursor_type) >= Category.FORWARD
        self.cursor_type = ForwardFilterCursor if forward else FilterCursor
        self.borrowed = getattr(self.source, "borrowed", False)

    def begin(self) -> FilterCursor:
        cur = self.cursor_type(self.source.begin(), self.source.end(), self.pred)
        cur._satisfy()
        return cur

    def end(self) -> FilterEnd:
        return FilterEnd(self.source.end())

    def __repr__(self) -> str:
        return f"FilterSource({self.source!r})"
