from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, TextIO

_EMPTY = object()


class IteratorCursor:
    """
    The single cursor of an IteratorSource. Reads and advances go through the
    source, so every cursor taken from it shares one position.
    """
    __slots__ = ("source",)

    def __init__(self, source: IteratorSource):
        self.source = source

    def read(self) -> Any: return self.source._read()

    def advance(self) -> IteratorCursor:
        self.source._advance()
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IteratorEnd):
            return other.source is self.source and self.source._at_end()
        if isinstance(other, IteratorCursor):
            return other.source is self.source
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IteratorCursor({self.source!r})"


class IteratorEnd:
    __slots__ = ("source",)

    def __init__(self, source: IteratorSource):
        self.source = source

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IteratorCursor):
            return other == self
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class IteratorSource:
    """
    Single-pass source over a Python iterator.

    The next item is pulled from the iterator only when it is read, when the
    cursor is compared against the end, or when the cursor is advanced past an
    item nobody looked at. Items never pulled stay in the iterator. An item
    that was read counts as handed out: the next begin() starts after it.
    """
    cursor_type = IteratorCursor
    sentinel_type = IteratorEnd
    borrowed = False

    def __init__(self, iterable: Iterable):
        self._it: Iterator = iter(iterable)
        self._value: Any = _EMPTY
        self._consumed = False
        self._done = False

    def _fill(self) -> None:
        if self._value is _EMPTY and not self._done:
            try:
                self._value = next(self._it)
            except StopIteration:
                self._done = True

    def _read(self) -> Any:
        self._fill()
        if self._done:
            raise IndexError("read past the end of the iterator")
        self._consumed = True
        return self._value

    def _advance(self) -> None:
        self._fill()
        self._value = _EMPTY
        self._consumed = False

    def _at_end(self) -> bool:
        self._fill()
        return self._done

    def begin(self) -> IteratorCursor:
        if self._consumed:
            self._advance()
        return IteratorCursor(self)

    def end(self) -> IteratorEnd: return IteratorEnd(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def read_tokens(stream: TextIO, parse: Callable[[str], Any] = str) -> Iterator[Any]:
    """
    Yield whitespace-separated tokens from `stream`, reading one character at
    a time so nothing past the current token (and its delimiter) is consumed.
    """
    while True:
        ch = stream.read(1)
        while ch and ch.isspace():
            ch = stream.read(1)
        if not ch:
            return
        buf = []
        while ch and not ch.isspace():
            buf.append(ch)
            ch = stream.read(1)
        yield parse("".join(buf))


class TokenStreamSource(IteratorSource):
    """Tokens of a text stream parsed with `parse` (int by default)."""

    def __init__(self, stream: TextIO, parse: Callable[[str], Any] = int):
        super().__init__(read_tokens(stream, parse))
        self.stream = stream
