import pytest

from noname.span import Span


def test_is_empty_when_start_is_zero():
    assert Span(0, 0, 5).is_empty()
    assert not Span(0, 3, 0).is_empty()


def test_end_is_start_plus_length():
    span = Span(1, 4, 3)
    assert span.end() - span.start == span.length


def test_merge_covers_both_spans():
    first = Span(2, 5, 3)
    second = Span(2, 20, 4)
    merged = first.merge_with(second)
    assert merged.filename_id == 2
    assert merged.start == first.start
    assert merged.end() == second.end()


def test_merge_with_itself_is_identity():
    span = Span(0, 7, 9)
    assert span.merge_with(span) == span


def test_merge_different_files_raises():
    with pytest.raises(ValueError):
        Span(0, 1, 1).merge_with(Span(1, 2, 1))


def test_defaults_and_ordering():
    assert Span() == Span(0, 0, 0)
    spans = [Span(1, 0, 0), Span(0, 5, 1), Span(0, 2, 8)]
    assert sorted(spans) == [Span(0, 2, 8), Span(0, 5, 1), Span(1, 0, 0)]


def test_span_is_hashable_and_immutable():
    span = Span(0, 1, 2)
    assert {span: "x"}[Span(0, 1, 2)] == "x"
    with pytest.raises(AttributeError):
        span.start = 3