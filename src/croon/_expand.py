from __future__ import annotations

from collections.abc import Iterable

from ._ast import All, BaseExpression, Exact, FieldExpression, Plain, Range, Stepped
from ._error import CronError


def expand(exprs: Iterable[FieldExpression], min_val: int, max_val: int) -> tuple[int, ...]:
    """Resolve a field's expressions to the ascending values they match.

    The result may be empty (a range written high-to-low matches nothing).
    Raises RangeError when a range endpoint is above ``max_val``.
    """
    values: set[int] = set()
    for expr in exprs:
        values.update(_expand_field_expr(expr, min_val, max_val))
    return tuple(sorted(values))


def _expand_field_expr(expr: FieldExpression, min_val: int, max_val: int) -> list[int]:
    match expr:
        case Plain(expr=base):
            return _expand_base(base, min_val, max_val)
        case Stepped(step=step) if step < 1:
            raise ValueError(f"step must be at least 1, got {step}")
        case Stepped(start=Exact(value=v), step=step):
            return list(range(v, max_val + 1, step))
        case Stepped(start=base, step=step):
            return _expand_base(base, min_val, max_val)[::step]
    raise TypeError(f"unknown field expression: {expr!r}")  # pragma: no cover


def _expand_base(expr: BaseExpression, min_val: int, max_val: int) -> list[int]:
    match expr:
        case All():
            return list(range(min_val, max_val + 1))
        case Exact(value=v):
            # Exact values are not bounds-checked.
            return [v]
        case Range(start=start, end=end):
            # Only the upper bound is checked; a start below min_val passes.
            if start > max_val or end > max_val:
                raise CronError.range(f"range {start}-{end} exceeds maximum {max_val}")
            return list(range(start, end + 1))
    raise TypeError(f"unknown base expression: {expr!r}")  # pragma: no cover
