from __future__ import annotations
import functools
import logging
from typing import Any

from lazytake.cursors.protocols import (
    BidirectionalCursor,
    ForwardCursor,
    InputCursor,
    RandomAccessCursor,
    SizedSentinel,
    SizedSource,
)
from lazytake.models.capabilities import Capabilities, Category, Tier

logger = logging.getLogger(__name__)


class UnsupportedSourceError(TypeError):
    pass


def category_of(cursor_type: type) -> Category:
    """Strongest traversal category the cursor type satisfies."""
    if issubclass(cursor_type, RandomAccessCursor):
        return Category.RANDOM_ACCESS
    if issubclass(cursor_type, BidirectionalCursor):
        return Category.BIDIRECTIONAL
    if issubclass(cursor_type, ForwardCursor):
        return Category.FORWARD
    if issubclass(cursor_type, InputCursor):
        return Category.INPUT
    raise UnsupportedSourceError(f"{cursor_type.__name__} is not a cursor (needs read() and advance())")


@functools.lru_cache(maxsize=None)
def counted_category(cursor_type: type) -> Category:
    """
    Category reported by a CountedCursor over `cursor_type`.

    Never stronger than FORWARD (counted cursors compare by remaining count,
    so they cannot offer positional guarantees beyond that) and INPUT
    whenever the wrapped cursor is single-pass.
    """
    return min(category_of(cursor_type), Category.FORWARD)


@functools.lru_cache(maxsize=None)
def _classify(source_type: type, cursor_type: type, sentinel_type: type, sized: bool) -> Capabilities:
    cat = category_of(cursor_type)
    random_access = cat >= Category.RANDOM_ACCESS
    sized_sentinel = issubclass(sentinel_type, SizedSentinel)

    if sized and random_access:
        tier = Tier.RANDOM_ACCESS
    elif sized:
        tier = Tier.SIZED
    elif sized_sentinel:
        tier = Tier.DISTANCE
    else:
        tier = Tier.LAZY

    caps = Capabilities(
        source=source_type.__name__,
        cursor=cursor_type.__name__,
        category=cat,
        counted_category=min(cat, Category.FORWARD),
        single_pass=cat is Category.INPUT,
        sized=sized,
        random_access=random_access,
        sized_sentinel=sized_sentinel,
        tier=tier,
    )
    logger.debug("classified %s over %s as tier %s", caps.source, caps.cursor, tier.value)
    return caps


def probe_source(source: Any, *, const: bool = False) -> Capabilities:
    """
    Classify `source` without touching its cursors.

    Reads the declared ``cursor_type``/``sentinel_type`` (or their
    ``const_*`` counterparts when `const` is set and the source has them).
    """
    if not (callable(getattr(source, "begin", None)) and callable(getattr(source, "end", None))):
        raise UnsupportedSourceError(f"{type(source).__name__} has no begin()/end()")
    try:
        cursor_type = source.cursor_type
        sentinel_type = source.sentinel_type
    except AttributeError as e:
        raise UnsupportedSourceError(f"{type(source).__name__} does not declare its cursor types") from e
    if const:
        cursor_type = getattr(source, "const_cursor_type", cursor_type)
        sentinel_type = getattr(source, "const_sentinel_type", sentinel_type)
    return _classify(type(source), cursor_type, sentinel_type, isinstance(source, SizedSource))
