import pytest

from slicey.errors import InvalidBoundary
from slicey.sliced import Sliced
from slicey.span import Span
from slicey.spanned import Spanned


def test_accessors() -> None:
    item = Spanned(42, Span(0, 5))
    assert item.value == 42
    assert item.unwrap() == 42
    assert item.into_value() == 42
    assert item.span == Span(0, 5)


def test_construction_needs_no_source() -> None:
    item = Spanned("far away", Span(1000, 2000))
    assert item.span.length() == 1000


def test_map_keeps_span() -> None:
    item = Spanned("42", Span(3, 5)).map(int)
    assert item == Spanned(42, Span(3, 5))


def test_with_span_replaces_span_only() -> None:
    item = Spanned("x", Span(0, 1))
    assert item.with_span(Span(4, 5)) == Spanned("x", Span(4, 5))
    assert item.with_range(Span(2, 2)).value == "x"
    assert item.span == Span(0, 1)


def test_combine_spans_both_operands() -> None:
    lhs = Spanned(1, Span(0, 1))
    rhs = Spanned(2, Span(4, 5))
    total = Spanned.combine(lhs, rhs, lambda a, b: a + b)
    assert total == Spanned(3, Span(0, 5))


def test_combine_propagates_errors() -> None:
    def fail(a: int, b: int) -> int:
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError, match="boom"):
        Spanned.combine(Spanned(1, Span(0, 1)), Spanned(0, Span(2, 3)), fail)


def test_equality_is_structural() -> None:
    assert Spanned([1], Span(0, 1)) == Spanned([1], Span(0, 1))
    assert Spanned(1, Span(0, 1)) != Spanned(1, Span(0, 2))


def test_unzip() -> None:
    assert Spanned(None, Span(0, 0)).unzip() is None
    assert Spanned(7, Span(0, 1)).unzip() == Spanned(7, Span(0, 1))


def test_copied_and_cloned() -> None:
    inner = [[1], [2]]
    item = Spanned(inner, Span(0, 1))
    shallow = item.copied()
    deep = item.cloned()
    assert shallow.value is not inner and shallow.value[0] is inner[0]
    assert deep.value == inner and deep.value[0] is not inner[0]


def test_with_source_round_trip() -> None:
    source = "hello world"
    sliced = Spanned("w", Span(6, 11)).with_source(source)
    assert isinstance(sliced, Sliced)
    assert sliced.slice() == "world"
    assert sliced.to_ranged() == Spanned("w", Span(6, 11))


def test_with_source_validates() -> None:
    with pytest.raises(InvalidBoundary):
        Spanned(0, Span(2, 3)).with_source("héllo")
