from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ._ast import (
    DAY_ALIASES,
    All,
    BaseExpression,
    Exact,
    Field,
    FieldExpression,
    Plain,
    Range,
    Stepped,
)
from ._error import CronError, ParseError, Span
from ._lexer import (
    Lexer,
    TComma,
    TDash,
    TNumber,
    Token,
    TokenKind,
    TSlash,
    TStar,
    TWord,
)

_T = TypeVar("_T")


class _Parser:
    """Recursive-descent parser for field lists.

    Alternatives are tried in a fixed order and a failed alternative rewinds
    the lexer before the next one is tried: ``*`` before a range before an
    exact value, and a stepped expression before a plain one.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer

    def peek(self) -> Token | None:
        return self._lexer.peek()

    def peek_kind(self) -> TokenKind | None:
        tok = self._lexer.peek()
        return tok.kind if tok else None

    def advance(self) -> Token | None:
        return self._lexer.advance()

    def current_span(self) -> Span:
        tok = self.peek()
        if tok:
            return tok.span
        return self._lexer.end_span()

    def _error(self, message: str, span: Span) -> ParseError:
        return CronError.parse(message, span, self._lexer.input_text)

    def _attempt(self, production: Callable[[], _T]) -> _T | None:
        mark = self._lexer.pos
        try:
            return production()
        except ParseError:
            self._lexer.reset(mark)
            return None

    def _consume(self, expected: str, check: type) -> Token:
        span = self.current_span()
        tok = self.peek()
        if tok and isinstance(tok.kind, check):
            self.advance()
            return tok
        raise self._error(f"expected {expected}, got {self._found()}", span)

    def _found(self) -> str:
        tok = self.peek()
        if tok is None:
            return "end of input"
        return repr(self._lexer.input_text[tok.span.start : tok.span.end])

    # --- Grammar productions ---

    def parse_field_list(self, aliases: bool, max_val: int | None = None) -> list[FieldExpression]:
        exprs = [self._parse_field_expr(aliases, max_val)]
        while isinstance(self.peek_kind(), TComma):
            self.advance()
            exprs.append(self._parse_field_expr(aliases, max_val))
        return exprs

    def _parse_field_expr(self, aliases: bool, max_val: int | None) -> FieldExpression:
        span = self.current_span()
        stepped = self._attempt(lambda: self._parse_stepped(aliases))
        if stepped is None:
            return Plain(self._parse_base(aliases))
        if stepped.step == 0:
            raise self._error("step must be at least 1", Span(span.start, self._lexer.pos))
        if isinstance(stepped.start, Exact):
            self._reject_range_end(stepped.start.value, span.start, aliases, max_val)
        return stepped

    def _parse_stepped(self, aliases: bool) -> Stepped:
        start = self._parse_base(aliases)

        # `* /2` is not a step; the slash must touch the star
        if isinstance(start, All) and self.current_span().start != self._lexer.pos:
            raise self._error("expected '/' directly after '*'", self.current_span())

        self._consume("'/'", TSlash)
        return Stepped(start, self._parse_integer())

    def _reject_range_end(
        self, start: int, offset: int, aliases: bool, max_val: int | None
    ) -> None:
        """Fail on `a/s-b`: a range end cannot follow a step."""
        end = self._attempt(lambda: self._parse_range_end(aliases))
        if end is None:
            return
        span = Span(offset, self._lexer.pos)
        if max_val is not None and end > max_val:
            raise CronError.range(
                f"range {start}-{end} exceeds maximum {max_val}",
                span,
                self._lexer.input_text,
            )
        raise self._error("a step cannot be followed by a range end", span)

    def _parse_base(self, aliases: bool) -> BaseExpression:
        if isinstance(self.peek_kind(), TStar):
            self.advance()
            return All()

        rng = self._attempt(lambda: self._parse_range(aliases))
        if rng is not None:
            return rng

        return Exact(self._parse_unit(aliases))

    def _parse_range(self, aliases: bool) -> Range:
        start = self._parse_unit(aliases)
        end = self._parse_range_end(aliases)
        return Range(start, end)

    def _parse_range_end(self, aliases: bool) -> int:
        self._consume("'-'", TDash)
        return self._parse_unit(aliases)

    def _parse_unit(self, aliases: bool) -> int:
        k = self.peek_kind()
        if aliases and isinstance(k, TWord):
            span = self.current_span()
            value = DAY_ALIASES.get(k.text)
            if value is None:
                raise self._error(f"unknown day alias '{k.text}'", span)
            self.advance()
            return value
        return self._parse_integer()

    def _parse_integer(self) -> int:
        span = self.current_span()
        k = self.peek_kind()
        if not isinstance(k, TNumber):
            raise self._error(f"expected a number, got {self._found()}", span)
        self.advance()

        # digits running straight into letters, e.g. `5am`
        nxt = self.peek()
        if nxt is not None and isinstance(nxt.kind, TWord) and nxt.span.start == span.end:
            raise self._error("malformed number", Span(span.start, nxt.span.end))
        return k.value


def parse(
    input_text: str, *, aliases: bool = False, max_val: int | None = None
) -> list[FieldExpression]:
    """Parse the text of a single field into its comma-separated expressions.

    With ``aliases`` set, three-letter day names (``MON`` .. ``SUN``) are
    accepted wherever a number is. A stepped value followed by a range end
    (``30/30-150``) is a RangeError when the end is above ``max_val`` and a
    ParseError otherwise.
    """
    lexer = Lexer(input_text)
    parser = _Parser(lexer)
    exprs = parser.parse_field_list(aliases, max_val)

    if parser.peek():
        raise CronError.parse(
            "unexpected trailing input",
            Span(parser.current_span().start, len(input_text)),
            input_text,
        )

    return exprs


class LineParser:
    """Reads a schedule line one field at a time, then the command."""

    def __init__(self, input_text: str) -> None:
        self._lexer = Lexer(input_text)
        self._parser = _Parser(self._lexer)
        self._last_span = Span(0, 0)

    @property
    def last_span(self) -> Span:
        """Source span of the most recently parsed field."""
        return self._last_span

    def field(self, field: Field) -> list[FieldExpression]:
        start = self._parser.current_span().start
        if self._parser.peek() is None:
            raise CronError.parse(
                f"missing {field} field",
                Span(start, start),
                self._lexer.input_text,
            )
        exprs = self._parser.parse_field_list(field.accepts_aliases, field.max)
        self._last_span = Span(start, self._lexer.pos)
        return exprs

    def command(self) -> str:
        text = self._lexer.input_text
        start = self._lexer.pos
        command = self._lexer.rest().strip()
        if not command:
            raise CronError.parse("missing command", Span(start, len(text)), text)
        lead = len(text) - len(text.lstrip())
        for offset in range(lead, len(text.rstrip())):
            if text[offset] in "\r\n":
                raise CronError.parse(
                    "schedule must be a single line", Span(offset, offset + 1), text
                )
        return command
