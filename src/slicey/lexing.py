"""Run ``ply.lex`` lexers and tag their tokens with byte spans.

Install the ``lex`` extra for ``ply``; the core types do not import this module.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import ply.lex as lex  # type: ignore[import-untyped]

from slicey import text
from slicey.sliced import Sliced
from slicey.span import Span


@dataclass(frozen=True)
class Token:
    kind: str
    value: Any


class _ByteOffsets:
    """Character index to byte offset conversion for mostly increasing indices."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.offset = 0

    def __call__(self, index: int) -> int:
        if index < self.index:
            return text.byte_offset(self.source, index)
        self.offset += len(self.source[self.index : index].encode(text.ENCODING))
        self.index = index
        return self.offset


def sliced_tokens(lexer: lex.Lexer, source: str) -> Iterator[Sliced[Token]]:
    """Yield every token of ``source`` as a ``Sliced[Token]``.

    ply reports character positions; a token ends at ``tok.end`` when the rule
    sets one and otherwise where the lexer resumes after the match.
    """
    text.encode(source)
    to_bytes = _ByteOffsets(source)
    lexer.input(source)
    while True:
        tok = lexer.token()
        if tok is None:
            return
        end = getattr(tok, "end", lexer.lexpos)
        span = Span(to_bytes(tok.lexpos), to_bytes(end))
        yield Sliced(Token(tok.type, tok.value), span, source)
