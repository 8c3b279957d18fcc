from __future__ import annotations
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# Capability contracts. Only method presence is checked, on the *type*,
# so probing never has to create (and possibly consume) a cursor.

@runtime_checkable
class InputCursor(Protocol[T_co]):
    """Readable cursor that can be advanced at least once; may be single-pass."""

    def read(self) -> T_co: ...
    def advance(self) -> Any: ...


@runtime_checkable
class ForwardCursor(InputCursor[T_co], Protocol[T_co]):
    """Revisitable cursor: copies advance independently of the original."""

    def copy(self) -> Any: ...


@runtime_checkable
class BidirectionalCursor(ForwardCursor[T_co], Protocol[T_co]):
    def retreat(self) -> Any: ...


@runtime_checkable
class RandomAccessCursor(BidirectionalCursor[T_co], Protocol[T_co]):
    def offset(self, n: int) -> Any: ...
    def __sub__(self, other: Any) -> int: ...


@runtime_checkable
class SizedSentinel(Protocol):
    """End marker able to tell how far a cursor is from it without moving it."""

    def distance_from(self, cursor: Any) -> int: ...


@runtime_checkable
class SizedSource(Protocol):
    def size(self) -> int: ...


class DefaultSentinel:
    """Bare terminal marker: a counted cursor is at the end when its count is 0."""
    __slots__ = ()
    _instance: DefaultSentinel | None = None

    def __new__(cls) -> DefaultSentinel:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "default_sentinel"


class Unreachable:
    """End of an unbounded source; no cursor ever compares equal to it."""
    __slots__ = ()
    _instance: Unreachable | None = None

    def __new__(cls) -> Unreachable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is self

    def __hash__(self) -> int: return id(self)
    def __repr__(self) -> str: return "unreachable"


default_sentinel = DefaultSentinel()
unreachable = Unreachable()
