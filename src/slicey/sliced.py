"""Values tagged with a span and the source text it indexes."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from slicey import text
from slicey.errors import OutOfRange, SourceMismatch
from slicey.span import Span
from slicey.spanned import Spanned

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sliced(Generic[T]):
    """A value paired with a span of ``source``.

    Construction checks that the span ends within ``source`` and that both
    ends fall on UTF-8 character boundaries.  The source string is shared,
    never copied; two sliced values have the same source only when they hold
    the very same ``str`` object.
    """

    value: T
    span: Span
    source: str = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        text.check_span(self.span, self.source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sliced):
            return NotImplemented
        return (
            self.value == other.value
            and self.span == other.span
            and self.source is other.source
        )

    @staticmethod
    def of(value: T, source: str) -> Sliced[T]:
        return Sliced(value, Span(0, text.byte_length(source)), source)

    def unwrap(self) -> T:
        return self.value

    def into_value(self) -> T:
        return self.value

    def slice(self) -> str:
        return text.encode(self.source)[self.span.start : self.span.end].decode(
            text.ENCODING
        )

    def byte_slice(self) -> bytes:
        return text.encode(self.source)[self.span.start : self.span.end]

    def map(self, f: Callable[[T], U]) -> Sliced[U]:
        return Sliced(f(self.value), self.span, self.source)

    def to_ranged(self) -> Spanned[T]:
        return Spanned(self.value, self.span)

    to_spanned = to_ranged

    def reslice(self, span: Span) -> Sliced[T]:
        """Narrow to ``span``, which must sit inside the current span."""
        if not self.span.contains_span(span):
            logger.debug(
                "reslice %d:%d outside %d:%d",
                span.start,
                span.end,
                self.span.start,
                self.span.end,
            )
            raise OutOfRange(
                f"Span {span.start}:{span.end} is not within "
                f"{self.span.start}:{self.span.end}",
                span,
                self.source,
            )
        return Sliced(self.value, span, self.source)

    @staticmethod
    def combine(a: Sliced[T], b: Sliced[U], f: Callable[[T, U], V]) -> Sliced[V]:
        """Merge two values over the same source into one spanning both."""
        if a.source is not b.source:
            logger.debug("combine across sources at %r and %r", a.span, b.span)
            raise SourceMismatch("Cannot combine values from different sources", b.span)
        return Sliced(f(a.value, b.value), a.span.union(b.span), a.source)

    def unzip(self: Sliced[T | None]) -> Sliced[T] | None:
        if self.value is None:
            return None
        return Sliced(self.value, self.span, self.source)

    def copied(self) -> Sliced[T]:
        return Sliced(copy.copy(self.value), self.span, self.source)

    def cloned(self) -> Sliced[T]:
        return Sliced(copy.deepcopy(self.value), self.span, self.source)
