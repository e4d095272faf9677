"""Error types raised when a span does not fit its source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slicey.span import Span


@dataclass
class SliceyError(Exception):
    message: str
    span: Span | None = None
    source: str | None = None

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        data = self.source.encode("utf-8")[self.span.start : self.span.end]
        snippet = data.decode("utf-8", errors="replace")
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"


class InvalidRange(SliceyError):
    """A span was built with ``start > end`` or a non-integer or negative offset."""


class OutOfBounds(SliceyError):
    """A span reaches past the end of its source text."""


class InvalidBoundary(SliceyError):
    """A span endpoint falls inside a multi-byte character."""


class OutOfRange(SliceyError):
    """A re-slice target is not inside the current span."""


class SourceMismatch(SliceyError):
    """Two sliced values over different source texts were combined."""


class InvalidSource(SliceyError):
    """A source string cannot be encoded as UTF-8 (e.g. a lone surrogate)."""
