from __future__ import annotations

from ._ast import (
    DAY_ALIASES,
    FIELD_ORDER,
    All,
    BaseExpression,
    Exact,
    Field,
    FieldExpression,
    Plain,
    Range,
    Stepped,
)
from ._error import CronError, CronErrorKind, ParseError, RangeError, Span
from ._expand import expand
from ._next import matches, next_from
from ._parser import parse
from ._table import CronTable, assemble

__all__ = [
    "CronTable",
    "assemble",
    "parse",
    "expand",
    "next_from",
    "matches",
    "CronError",
    "CronErrorKind",
    "ParseError",
    "RangeError",
    "Span",
    "Field",
    "FIELD_ORDER",
    "DAY_ALIASES",
    "All",
    "Exact",
    "Range",
    "BaseExpression",
    "Plain",
    "Stepped",
    "FieldExpression",
]
