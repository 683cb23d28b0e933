from __future__ import annotations

from dataclasses import dataclass

from ._error import Span

# --- Token kinds ---


@dataclass(frozen=True, slots=True)
class TStar:
    pass


@dataclass(frozen=True, slots=True)
class TDash:
    pass


@dataclass(frozen=True, slots=True)
class TSlash:
    pass


@dataclass(frozen=True, slots=True)
class TComma:
    pass


@dataclass(frozen=True, slots=True)
class TNumber:
    value: int


@dataclass(frozen=True, slots=True)
class TWord:
    text: str


@dataclass(frozen=True, slots=True)
class TOther:
    char: str


TokenKind = TStar | TDash | TSlash | TComma | TNumber | TWord | TOther


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    span: Span


_PUNCTUATION: dict[str, TokenKind] = {
    "*": TStar(),
    "-": TDash(),
    "/": TSlash(),
    ",": TComma(),
}

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"


class Lexer:
    """Pull-based tokenizer over a schedule line.

    Tokens are produced one at a time so that the parser can stop after the
    last field and hand the untouched remainder of the line to the command.
    Lexing never fails; characters outside the field alphabet come back as
    ``TOther`` and are rejected by the parser only if it needs them.
    """

    def __init__(self, input_text: str, start: int = 0) -> None:
        self._input = input_text
        self._pos = start
        self._peeked: Token | None = None

    @property
    def input_text(self) -> str:
        return self._input

    @property
    def pos(self) -> int:
        """Offset just past the last consumed token."""
        return self._pos

    def rest(self) -> str:
        return self._input[self._pos :]

    def peek(self) -> Token | None:
        if self._peeked is None:
            self._peeked = self._lex_at(self._pos)
        return self._peeked

    def advance(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self._pos = tok.span.end
            self._peeked = None
        return tok

    def reset(self, pos: int) -> None:
        self._pos = pos
        self._peeked = None

    def end_span(self) -> Span:
        start = self._skip_whitespace(self._pos)
        return Span(start, start)

    def _skip_whitespace(self, pos: int) -> int:
        while pos < len(self._input) and self._input[pos] in _WHITESPACE:
            pos += 1
        return pos

    def _lex_at(self, pos: int) -> Token | None:
        start = self._skip_whitespace(pos)
        if start >= len(self._input):
            return None

        ch = self._input[start]

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            return Token(kind, Span(start, start + 1))

        if ch in _DIGITS:
            end = start
            while end < len(self._input) and self._input[end] in _DIGITS:
                end += 1
            return Token(TNumber(int(self._input[start:end])), Span(start, end))

        if ch.isalpha():
            end = start
            while end < len(self._input) and self._input[end].isalnum():
                end += 1
            return Token(TWord(self._input[start:end]), Span(start, end))

        return Token(TOther(ch), Span(start, start + 1))
