"""Values tagged with the span of text they came from."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from slicey.span import Span

if TYPE_CHECKING:
    from slicey.sliced import Sliced

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


@dataclass(frozen=True)
class Spanned(Generic[T]):
    """A value paired with a span; no source text is kept.

    The span is metadata only.  Pass the text to :meth:`Span.extract` or
    :meth:`with_source` to recover what the value was read from.
    """

    value: T
    span: Span

    def unwrap(self) -> T:
        return self.value

    def into_value(self) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Spanned[U]:
        """Apply ``f`` to the value, keeping the span.

        Only use this when ``f`` does not change which text the value covers.
        """
        return Spanned(f(self.value), self.span)

    def with_span(self, span: Span) -> Spanned[T]:
        return Spanned(self.value, span)

    with_range = with_span

    @staticmethod
    def combine(a: Spanned[T], b: Spanned[U], f: Callable[[T, U], V]) -> Spanned[V]:
        """Merge two values into one spanning both of their spans."""
        return Spanned(f(a.value, b.value), a.span.union(b.span))

    def unzip(self: Spanned[T | None]) -> Spanned[T] | None:
        if self.value is None:
            return None
        return Spanned(self.value, self.span)

    def copied(self) -> Spanned[T]:
        return Spanned(copy.copy(self.value), self.span)

    def cloned(self) -> Spanned[T]:
        return Spanned(copy.deepcopy(self.value), self.span)

    def with_source(self, source: str) -> Sliced[T]:
        from slicey.sliced import Sliced

        return Sliced(self.value, self.span, source)
