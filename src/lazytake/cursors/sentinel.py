from __future__ import annotations
from typing import Any

from .counted import CountedCursor


class EndSentinel:
    """
    End of a bounded traversal whose source length is unknown.

    A counted cursor is at the end once its count reaches zero or its inner
    cursor reaches the source's own end, whichever happens first. The inner
    cursor may come from the mutable or the const iteration of the source.
    """
    __slots__ = ("_end",)

    def __init__(self, inner_end: Any):
        self._end = inner_end

    @property
    def base(self) -> Any: return self._end

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountedCursor):
            return other.count == 0 or other.base == self._end
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EndSentinel({self._end!r})"
