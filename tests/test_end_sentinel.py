from lazytake.cursors.counted import CountedCursor
from lazytake.cursors.sentinel import EndSentinel
from lazytake.sources.count import CountBound, CountCursor
from lazytake.sources.sequence import ConstSequenceCursor, SequenceCursor


def test_stops_at_source_end_before_count():
    end = EndSentinel(CountBound(3))
    cur = CountedCursor(CountCursor(0), 10)
    steps = 0
    while cur != end:
        cur.advance()
        steps += 1
    assert steps == 3
    assert cur.count == 7
    assert cur.base.value == 3


def test_stops_at_count_before_source_end():
    end = EndSentinel(CountBound(100))
    cur = CountedCursor(CountCursor(0), 2)
    cur.advance().advance()
    assert cur == end
    assert end == cur
    # the final step did not move the inner cursor
    assert cur.base.value == 1


def test_compares_against_const_inner_cursor():
    seq = [1, 2, 3]
    end = EndSentinel(SequenceCursor(seq, 3))
    assert CountedCursor(ConstSequenceCursor(seq, 3), 5) == end
    assert CountedCursor(ConstSequenceCursor(seq, 1), 5) != end


def test_not_equal_to_other_objects():
    end = EndSentinel(CountBound(0))
    assert end != 0
    assert end != CountCursor(0)
    assert end.base.stop == 0
