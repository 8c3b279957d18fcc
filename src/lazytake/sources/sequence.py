from __future__ import annotations
from collections.abc import MutableSequence, Sequence
from typing import Any


class ConstSequenceCursor:
    """Random-access, read-only position in a Python sequence."""
    __slots__ = ("seq", "pos")

    def __init__(self, seq: Sequence, pos: int = 0):
        self.seq = seq
        self.pos = pos

    def read(self) -> Any: return self.seq[self.pos]
    def move(self) -> Any: return self.seq[self.pos]

    def advance(self) -> ConstSequenceCursor:
        self.pos += 1
        return self

    def retreat(self) -> ConstSequenceCursor:
        self.pos -= 1
        return self

    def copy(self) -> ConstSequenceCursor:
        return type(self)(self.seq, self.pos)

    def offset(self, n: int) -> ConstSequenceCursor:
        return type(self)(self.seq, self.pos + n)

    def as_const(self) -> ConstSequenceCursor:
        return ConstSequenceCursor(self.seq, self.pos)

    def __sub__(self, other: object) -> int:
        if isinstance(other, ConstSequenceCursor) and other.seq is self.seq:
            return self.pos - other.pos
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstSequenceCursor):
            return self.seq is other.seq and self.pos == other.pos
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self.pos})"


class SequenceCursor(ConstSequenceCursor):
    """Writable position in a mutable sequence."""
    __slots__ = ()

    def write(self, value: Any) -> None:
        self.seq[self.pos] = value

    def swap(self, other: SequenceCursor) -> None:
        self.seq[self.pos], other.seq[other.pos] = other.seq[other.pos], self.seq[self.pos]


class SequenceSource:
    """Sized, random-access source over a list, tuple, range, str, ..."""
    const_cursor_type = ConstSequenceCursor
    const_sentinel_type = ConstSequenceCursor
    borrowed = True

    def __init__(self, seq: Sequence):
        self.seq = seq
        self.cursor_type = SequenceCursor if isinstance(seq, MutableSequence) else ConstSequenceCursor
        self.sentinel_type = self.cursor_type

    def begin(self): return self.cursor_type(self.seq, 0)
    def end(self): return self.cursor_type(self.seq, len(self.seq))
    def cbegin(self) -> ConstSequenceCursor: return ConstSequenceCursor(self.seq, 0)
    def cend(self) -> ConstSequenceCursor: return ConstSequenceCursor(self.seq, len(self.seq))
    def size(self) -> int: return len(self.seq)

    def __repr__(self) -> str:
        return f"SequenceSource({self.seq!r})"
