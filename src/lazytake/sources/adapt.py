from __future__ import annotations
from collections.abc import Collection, Iterable, Sequence
from typing import Any

from lazytake.capability import UnsupportedSourceError
from .collection import CollectionSource
from .sequence import SequenceSource
from .stream import IteratorSource


def is_source(obj: Any) -> bool:
    return callable(getattr(obj, "begin", None)) and callable(getattr(obj, "end", None))


def as_source(obj: Any) -> Any:
    """
    Adapt a plain Python object to the begin()/end() source interface.

    Objects that already are sources pass through unchanged. Sequences get
    random access, other sized collections forward cursors, and anything
    else that is merely iterable becomes a single-pass source.
    """
    if is_source(obj):
        return obj
    if isinstance(obj, Sequence):
        return SequenceSource(obj)
    if isinstance(obj, Collection):
        return CollectionSource(obj)
    if isinstance(obj, Iterable):
        return IteratorSource(obj)
    raise UnsupportedSourceError(f"cannot iterate over {type(obj).__name__}")
