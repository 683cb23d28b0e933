"""Property tests for expansion and next-occurrence search."""

from __future__ import annotations

from datetime import datetime

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from croon import (
    FIELD_ORDER,
    All,
    CronTable,
    Exact,
    Field,
    Plain,
    Range,
    RangeError,
    Stepped,
    assemble,
    expand,
)

fields = st.sampled_from(list(Field))


@st.composite
def field_text(draw: st.DrawFn, field: Field) -> str:
    """One valid field: a comma list of in-bounds items."""
    lo, hi = field.min, field.max

    def item() -> str:
        kind = draw(st.sampled_from(["all", "exact", "range", "stepped"]))
        a = draw(st.integers(lo, hi))
        b = draw(st.integers(a, hi))
        if kind == "all":
            return "*"
        if kind == "exact":
            return str(a)
        if kind == "range":
            return f"{a}-{b}"
        base = draw(st.sampled_from(["*", str(a), f"{a}-{b}"]))
        return f"{base}/{draw(st.integers(1, hi + 1))}"

    return ",".join(item() for _ in range(draw(st.integers(1, 3))))


@st.composite
def schedule_line(draw: st.DrawFn) -> str:
    parts = [draw(field_text(f)) for f in FIELD_ORDER]
    return " ".join(parts) + " run"


instants = st.datetimes(min_value=datetime(1970, 1, 1), max_value=datetime(2200, 12, 31))


class TestExpandProperties:
    @given(fields)
    def test_all_is_full_bounds(self, field: Field) -> None:
        assert expand([Plain(All())], field.min, field.max) == tuple(
            range(field.min, field.max + 1)
        )

    @given(fields, st.data())
    def test_exact_in_bounds_is_singleton(self, field: Field, data: st.DataObject) -> None:
        v = data.draw(st.integers(field.min, field.max))
        assert expand([Plain(Exact(v))], field.min, field.max) == (v,)

    @given(fields, st.data())
    def test_valid_range_is_inclusive(self, field: Field, data: st.DataObject) -> None:
        a = data.draw(st.integers(field.min, field.max))
        b = data.draw(st.integers(a, field.max))
        assert expand([Plain(Range(a, b))], field.min, field.max) == tuple(range(a, b + 1))

    @given(fields, st.data())
    def test_range_past_max_fails(self, field: Field, data: st.DataObject) -> None:
        a = data.draw(st.integers(0, field.max + 50))
        b = data.draw(st.integers(0, field.max + 50))
        assume(a > field.max or b > field.max)
        with pytest.raises(RangeError):
            expand([Plain(Range(a, b))], field.min, field.max)

    @given(fields, st.integers(1, 70))
    def test_stepped_all(self, field: Field, step: int) -> None:
        values = expand([Stepped(All(), step)], field.min, field.max)
        assert values[0] == field.min
        assert values[-1] <= field.max
        assert all(b - a == step for a, b in zip(values, values[1:]))
        assert values[-1] + step > field.max

    @given(fields, st.lists(st.integers(0, 70), max_size=10))
    def test_result_sorted_and_unique(self, field: Field, raw: list[int]) -> None:
        values = expand([Plain(Exact(v)) for v in raw], field.min, field.max)
        assert list(values) == sorted(set(raw))


class TestAssembleProperties:
    @given(schedule_line())
    def test_valid_lines_assemble_within_bounds(self, line: str) -> None:
        table = assemble(line)
        for field in FIELD_ORDER:
            values = table.values(field)
            assert all(field.min <= v <= field.max for v in values)
            assert list(values) == sorted(set(values))
        assert table.command == "run"


class TestNextProperties:
    @settings(max_examples=300)
    @given(schedule_line(), instants)
    def test_next_is_none_or_strictly_later(self, line: str, after: datetime) -> None:
        table = CronTable.parse(line)
        result = table.next_from(after)
        if result is not None:
            assert result > after
            assert table.matches(result)

    @given(instants)
    def test_every_minute_is_next_minute(self, after: datetime) -> None:
        table = CronTable.parse("* * * * * run")
        result = table.next_from(after)
        assert result is not None
        assert result > after
        assert (result - after.replace(second=0, microsecond=0)).total_seconds() == 60
