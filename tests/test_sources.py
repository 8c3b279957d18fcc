import io

import pytest

from lazytake.capability import UnsupportedSourceError
from lazytake.models.capabilities import Tier
from lazytake.sources.adapt import as_source
from lazytake.sources.collection import CollectionEnd, CollectionSource
from lazytake.sources.count import CountSource
from lazytake.sources.sequence import SequenceSource
from lazytake.sources.stream import IteratorSource, TokenStreamSource, read_tokens
from lazytake.view import BoundedView


def test_read_tokens_splits_on_any_whitespace():
    assert list(read_tokens(io.StringIO("  12  x\n3 \t"))) == ["12", "x", "3"]
    assert list(read_tokens(io.StringIO(""))) == []


def test_token_parse_errors_propagate():
    with pytest.raises(ValueError):
        list(BoundedView(TokenStreamSource(io.StringIO("1 x 3")), 5))


def test_token_stream_float_parser():
    src = TokenStreamSource(io.StringIO("1.5 2"), float)
    assert list(BoundedView(src, 5)) == [1.5, 2.0]


def test_iterator_read_past_end():
    cur = IteratorSource([]).begin()
    with pytest.raises(IndexError):
        cur.read()


def test_iterator_cursors_share_one_position():
    src = IteratorSource([1, 2, 3])
    a, b = src.begin(), src.begin()
    a.advance()
    assert b.read() == 2
    assert a == b


def test_collection_cursor_copies_are_independent():
    src = CollectionSource(dict.fromkeys("xyz"))
    a = src.begin()
    b = a.copy()
    a.advance()
    assert a.read() == "y"
    assert b.read() == "x"
    b.advance().advance()
    assert b.read() == "z"
    a.advance().advance()
    assert a == src.end()
    assert src.end() == a
    assert a != b


def test_collection_end_only_matches_its_own_collection():
    src = CollectionSource([])
    assert src.begin() == src.end()
    assert src.begin() != CollectionEnd(())


def test_count_with_stop_below_start_is_empty():
    src = CountSource(5, 2)
    view = BoundedView(src, 3)
    assert view.tier is Tier.DISTANCE
    assert list(view) == []


def test_string_is_a_sequence():
    assert list(BoundedView("hello", 3)) == ["h", "e", "l"]


def test_as_source_dispatch():
    seq = SequenceSource([1])
    assert as_source(seq) is seq
    assert isinstance(as_source([1]), SequenceSource)
    assert isinstance(as_source(range(3)), SequenceSource)
    assert isinstance(as_source({1}), CollectionSource)
    assert isinstance(as_source(x for x in [1]), IteratorSource)
    with pytest.raises(UnsupportedSourceError):
        as_source(3.5)


def test_unread_item_survives_a_new_begin():
    src = IteratorSource([5, 6])
    cur = src.begin()
    assert cur != src.end()  # pulls 5 without reading it
    assert src.begin().read() == 5
    assert src.begin().read() == 6
