from __future__ import annotations
from typing import Optional

from lazytake.cursors.protocols import Unreachable, unreachable


class CountCursor:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def read(self) -> int: return self.value

    def advance(self) -> CountCursor:
        self.value += 1
        return self

    def copy(self) -> CountCursor: return CountCursor(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountCursor):
            return self.value == other.value
        if isinstance(other, CountBound):
            return self.value == other.stop
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CountCursor({self.value})"


class CountBound:
    """Upper bound of a finite count; measures distance without moving cursors."""
    __slots__ = ("stop",)

    def __init__(self, stop: int):
        self.stop = stop

    def distance_from(self, cursor: CountCursor) -> int:
        return self.stop - cursor.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountCursor):
            return other.value == self.stop
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CountBound({self.stop})"


class CountSource:
    """
    Integers counting up from `start`, forever or until `stop` (exclusive).

    Forward-only and unsized. A finite count still knows how far its end is,
    so bounding it only needs one distance query; an infinite one never ends.
    """
    cursor_type = CountCursor
    borrowed = True

    def __init__(self, start: int = 0, stop: Optional[int] = None):
        self.start = start
        self.stop = None if stop is None else max(start, stop)
        self.sentinel_type = Unreachable if stop is None else CountBound

    def begin(self) -> CountCursor: return CountCursor(self.start)

    def end(self):
        return unreachable if self.stop is None else CountBound(self.stop)

    def __repr__(self) -> str:
        return f"CountSource({self.start}, {self.stop})"
