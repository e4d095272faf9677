"""UTF-8 byte offset helpers for source strings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from slicey.errors import InvalidBoundary, InvalidSource, OutOfBounds

if TYPE_CHECKING:
    from slicey.span import Span

ENCODING = "utf-8"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def encode(source: str) -> bytes:
    """Return the UTF-8 bytes of ``source``.

    The few most recently used sources stay referenced by the cache, with
    their encoded bytes, until they are evicted or ``encode.cache_clear()``
    is called.
    """
    try:
        return source.encode(ENCODING)
    except UnicodeEncodeError as exc:
        logger.debug("source not encodable at %d: %s", exc.start, exc.reason)
        raise InvalidSource(
            f"Source is not valid {ENCODING} text at character {exc.start}"
        ) from exc


def byte_length(source: str) -> int:
    return len(encode(source))


def char_index(source: str, offset: int) -> int:
    """Convert a byte offset into ``source`` to a character index.

    The prefix before ``offset`` decodes strictly exactly when ``offset`` falls
    between two characters.
    """
    data = encode(source)
    if not 0 <= offset <= len(data):
        raise OutOfBounds(f"Byte offset {offset} outside source of length {len(data)}")
    try:
        return len(data[:offset].decode(ENCODING))
    except UnicodeDecodeError:
        raise InvalidBoundary(
            f"Byte offset {offset} is not on a character boundary"
        ) from None


def is_boundary(source: str, offset: int) -> bool:
    """Return True when ``offset`` lies between two characters of ``source``.

    Offsets past either end are never boundaries.
    """
    try:
        char_index(source, offset)
    except (OutOfBounds, InvalidBoundary):
        return False
    return True


def byte_offset(source: str, index: int) -> int:
    """Convert a character index into ``source`` to a byte offset."""
    if not 0 <= index <= len(source):
        logger.debug("char index %d outside %d-char source", index, len(source))
        raise OutOfBounds(
            f"Character index {index} outside source of length {len(source)}"
        )
    encode(source)
    return len(source[:index].encode(ENCODING))


def check_span(span: Span, source: str) -> None:
    """Raise unless ``span`` lies within ``source`` on character boundaries."""
    length = byte_length(source)
    if span.end > length:
        logger.debug("span %r past end of %d-byte source", span, length)
        raise OutOfBounds(f"Span ends past source of length {length}", span)
    for offset in (span.start, span.end):
        try:
            char_index(source, offset)
        except InvalidBoundary:
            logger.debug("span %r splits a character at %d", span, offset)
            raise InvalidBoundary(
                f"Offset {offset} is not on a character boundary", span, source
            ) from None


def decode_span(span: Span, source: str) -> str:
    check_span(span, source)
    return encode(source)[span.start : span.end].decode(ENCODING)
