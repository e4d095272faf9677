"""Attach source spans to values, with or without the source text."""

from slicey.errors import (
    InvalidBoundary,
    InvalidRange,
    InvalidSource,
    OutOfBounds,
    OutOfRange,
    SliceyError,
    SourceMismatch,
)
from slicey.sliced import Sliced
from slicey.span import Span
from slicey.spanned import Spanned

Range = Span
RangedValue = Spanned
SlicedValue = Sliced

__all__ = [
    "InvalidBoundary",
    "InvalidRange",
    "InvalidSource",
    "OutOfBounds",
    "OutOfRange",
    "Range",
    "RangedValue",
    "Sliced",
    "SlicedValue",
    "SliceyError",
    "SourceMismatch",
    "Span",
    "Spanned",
]
