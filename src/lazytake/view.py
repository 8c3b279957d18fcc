from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from lazytake.capability import probe_source
from lazytake.cursors.counted import CountedCursor
from lazytake.cursors.protocols import default_sentinel
from lazytake.cursors.sentinel import EndSentinel
from lazytake.models.capabilities import Capabilities, Tier
from lazytake.sources.adapt import as_source

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BoundedView(Generic[T]):
    """
    At most the first `count` elements of `base`.

    How begin()/end() are built depends on what the source can do:

      - random-access + sized: the source's own cursors, end placed at
        ``min(size, count)``;
      - sized: a CountedCursor clamped to ``min(size, count)``, bare end;
      - distance to end known: a CountedCursor clamped to that distance, bare end;
      - anything else: an unclamped CountedCursor and an EndSentinel that
        stops at the count or at the source's end, whichever comes first.

    In every case the source cursor is never advanced past the last element
    handed out, so a single-pass source keeps everything after it.
    `count` must not be negative; this is not checked.
    """
    __slots__ = ("_base", "_count", "_caps", "_ccaps")

    def __init__(self, base: Any, count: int):
        self._base = as_source(base)
        self._count = count
        self._caps: Optional[Capabilities] = None
        self._ccaps: Optional[Capabilities] = None

    @property
    def base(self) -> Any: return self._base

    @property
    def count(self) -> int: return self._count

    @property
    def capabilities(self) -> Capabilities:
        if self._caps is None:
            self._caps = probe_source(self._base)
            logger.debug("bounded view over %s: tier=%s count=%d",
                         self._caps.source, self._caps.tier.value, self._count)
        return self._caps

    @property
    def const_capabilities(self) -> Capabilities:
        if not self._has_const():
            return self.capabilities
        if self._ccaps is None:
            self._ccaps = probe_source(self._base, const=True)
        return self._ccaps

    @property
    def tier(self) -> Tier: return self.capabilities.tier

    @property
    def borrowed(self) -> bool:
        """True when the view may outlive the scope that created it, like its base."""
        return bool(getattr(self._base, "borrowed", False))

    @property
    def sized(self) -> bool: return self.capabilities.sized

    def _has_const(self) -> bool:
        return callable(getattr(self._base, "cbegin", None)) and callable(getattr(self._base, "cend", None))

    # ---- begin / end ----

    def _begin(self, caps: Capabilities, first: Callable[[], Any], last: Callable[[], Any]) -> Any:
        tier = caps.tier
        if tier is Tier.RANDOM_ACCESS:
            return first()
        if tier is Tier.SIZED:
            return CountedCursor(first(), self.size())
        if tier is Tier.DISTANCE:
            it = first()
            return CountedCursor(it, min(self._count, last().distance_from(it)))
        return CountedCursor(first(), self._count)

    def _end(self, caps: Capabilities, first: Callable[[], Any], last: Callable[[], Any]) -> Any:
        tier = caps.tier
        if tier is Tier.RANDOM_ACCESS:
            return first().offset(self.size())
        if tier is Tier.LAZY:
            return EndSentinel(last())
        return default_sentinel

    def begin(self) -> Any:
        return self._begin(self.capabilities, self._base.begin, self._base.end)

    def end(self) -> Any:
        return self._end(self.capabilities, self._base.begin, self._base.end)

    def cbegin(self) -> Any:
        if not self._has_const():
            return self.begin()
        return self._begin(self.const_capabilities, self._base.cbegin, self._base.cend)

    def cend(self) -> Any:
        if not self._has_const():
            return self.end()
        return self._end(self.const_capabilities, self._base.cbegin, self._base.cend)

    def size(self) -> int:
        if not self.sized:
            raise TypeError(f"{type(self._base).__name__} does not report a size")
        return min(self._base.size(), self._count)

    def __iter__(self) -> Iterator[T]:
        cur, end = self.begin(), self.end()
        while cur != end:
            yield cur.read()
            cur.advance()

    def __repr__(self) -> str:
        return f"BoundedView({self._base!r}, {self._count})"


def lazy_take(iterable: Iterable[T], n: int) -> BoundedView[T]:
    """
    View of the first `n` items of `iterable`, consuming no more of it than
    the items actually iterated.

        >>> it = iter([0, 1, 2])
        >>> list(lazy_take(it, 1))
        [0]
        >>> next(it)
        1
    """
    return BoundedView(iterable, n)
