"""Half-open byte ranges over source text."""

from __future__ import annotations

from dataclasses import dataclass

from slicey import text
from slicey.errors import InvalidRange


@dataclass(frozen=True, order=True)
class Span:
    """Byte offsets ``[start, end)`` into some UTF-8 text.

    Spans order by ``(start, end)``.  An empty span contains no offsets but is
    still contained by any span that reaches its position.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        for offset in (self.start, self.end):
            if not isinstance(offset, int) or isinstance(offset, bool):
                raise InvalidRange(f"Span offsets must be integers, got {offset!r}")
        if self.start < 0 or self.end < 0:
            raise InvalidRange(
                f"Span offsets must be non-negative: {self.start}:{self.end}"
            )
        if self.start > self.end:
            raise InvalidRange(f"Span start {self.start} is after end {self.end}")

    @staticmethod
    def point(offset: int) -> Span:
        return Span(offset, offset)

    @staticmethod
    def over(a: Span, b: Span) -> Span:
        return a.union(b)

    @staticmethod
    def from_chars(source: str, start: int, end: int) -> Span:
        """Build a byte span from character indices into ``source``."""
        return Span(text.byte_offset(source, start), text.byte_offset(source, end))

    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains_offset(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def contains_span(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: Span) -> bool:
        return self.start < other.end and other.start < self.end

    def union(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))

    def extract(self, source: str) -> str:
        return text.decode_span(self, source)

    def __or__(self, other: Span) -> Span:
        if not isinstance(other, Span):
            return NotImplemented
        return self.union(other)

    def __contains__(self, item: int | Span) -> bool:
        if isinstance(item, Span):
            return self.contains_span(item)
        return self.contains_offset(item)
