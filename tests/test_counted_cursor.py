import pytest

from lazytake.cursors.counted import CountedCursor
from lazytake.cursors.protocols import default_sentinel
from lazytake.models.capabilities import Category
from lazytake.sources.count import CountCursor
from lazytake.sources.sequence import ConstSequenceCursor, SequenceCursor
from lazytake.sources.stream import IteratorSource


def test_inner_advanced_one_less_than_count():
    inner = CountCursor(0)
    cur = CountedCursor(inner, 3)
    seen = []
    while cur != default_sentinel:
        seen.append(cur.read())
        cur.advance()
    assert seen == [0, 1, 2]
    assert cur.count == 0
    # three elements handed out, inner moved only twice
    assert inner.value == 2


def test_last_advance_only_touches_the_count():
    inner = CountCursor(5)
    cur = CountedCursor(inner, 1)
    assert cur.advance() is cur
    assert inner.value == 5
    assert cur.count == 0


def test_equality_ignores_inner_position():
    a = CountedCursor(CountCursor(0), 2)
    b = CountedCursor(CountCursor(100), 2)
    assert a == b
    assert a != CountedCursor(CountCursor(0), 1)


def test_zero_count_equals_default_sentinel_both_ways():
    done = CountedCursor(CountCursor(0), 0)
    live = CountedCursor(CountCursor(0), 1)
    assert done == default_sentinel
    assert default_sentinel == done
    assert live != default_sentinel
    assert default_sentinel != live


def test_mutable_and_const_inner_cursors_compare():
    seq = [1, 2, 3]
    m = CountedCursor(SequenceCursor(seq, 0), 3)
    c = CountedCursor(ConstSequenceCursor(seq, 1), 3)
    assert m == c
    assert c == m
    assert not (m < c)


def test_unrelated_inner_cursors_do_not_compare():
    a = CountedCursor(CountCursor(0), 3)
    b = CountedCursor(ConstSequenceCursor([0, 1, 2]), 3)
    assert a != b
    with pytest.raises(TypeError):
        a < b
    with pytest.raises(TypeError):
        a - b


def test_ordering_is_reversed_by_remaining():
    first = CountedCursor(CountCursor(0), 3)
    middle = CountedCursor(CountCursor(1), 2)
    last = CountedCursor(CountCursor(2), 1)
    assert first < middle < last
    assert last > first
    assert first <= CountedCursor(CountCursor(9), 3)
    assert [c.count for c in sorted([last, first, middle])] == [3, 2, 1]


def test_distance_uses_remaining_counts():
    x = CountedCursor(CountCursor(0), 5)
    y = x.copy()
    y.advance().advance()
    assert y.count == 3
    assert y - x == 2
    assert x - y == -2
    assert x.distance_to(y) == y.count - x.count
    assert x - default_sentinel == -5
    assert default_sentinel - x == 5


def test_copy_advances_independently():
    x = CountedCursor(CountCursor(0), 5)
    y = x.copy()
    y.advance().advance()
    assert x.read() == 0 and x.count == 5
    assert y.read() == 2


def test_single_pass_cursor_cannot_be_copied():
    cur = CountedCursor(IteratorSource([1, 2]).begin(), 2)
    assert cur.category is Category.INPUT
    assert cur.single_pass
    with pytest.raises(TypeError):
        cur.copy()


def test_category_never_stronger_than_forward():
    cur = CountedCursor(ConstSequenceCursor([1], 0), 1)
    assert cur.category is Category.FORWARD
    assert not cur.single_pass


def test_write_move_and_swap_are_forwarded():
    seq = [1, 2, 3]
    a = CountedCursor(SequenceCursor(seq, 0), 3)
    b = CountedCursor(SequenceCursor(seq, 2), 1)
    a.swap(b)
    assert seq == [3, 2, 1]
    a.write(9)
    assert seq[0] == 9
    assert a.move() == 9
    # inner cursors without move() fall back to read()
    assert CountedCursor(CountCursor(4), 1).move() == 4


def test_as_const_keeps_count():
    seq = [1, 2, 3]
    a = CountedCursor(SequenceCursor(seq, 1), 2)
    c = a.as_const()
    assert type(c.base) is ConstSequenceCursor
    assert c.count == 2
    assert c == a
    assert c.read() == 2


def test_counted_cursor_is_unhashable():
    with pytest.raises(TypeError):
        hash(CountedCursor(CountCursor(0), 1))
