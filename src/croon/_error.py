from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int


CronErrorKind = Literal["parse", "range"]


class CronError(Exception):
    kind: CronErrorKind
    span: Span | None
    input_text: str | None

    def __init__(
        self,
        kind: CronErrorKind,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.span = span
        self.input_text = input_text

    @classmethod
    def parse(cls, message: str, span: Span, input_text: str) -> ParseError:
        return ParseError(message, span, input_text)

    @classmethod
    def range(
        cls,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> RangeError:
        return RangeError(message, span, input_text)

    def display_rich(self) -> str:
        if self.span is not None and self.input_text is not None:
            out = f"error: {self}\n"
            out += f"  {self.input_text}\n"
            padding = " " * (self.span.start + 2)
            underline = "^" * max(self.span.end - self.span.start, 1)
            return out + padding + underline
        return f"error: {self}"


class ParseError(CronError):
    """The text does not match the schedule grammar."""

    def __init__(
        self,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__("parse", message, span, input_text)


class RangeError(CronError):
    """A range endpoint lies above its field's maximum."""

    def __init__(
        self,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__("range", message, span, input_text)
