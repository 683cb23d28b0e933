from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

CASES_PATH = Path(__file__).parent / "cases.json"


def load_cases() -> dict:  # type: ignore[type-arg]
    with open(CASES_PATH) as f:
        return json.load(f)


def expected_values(shorthand: str | list[int]) -> tuple[int, ...]:
    """Expand the shorthand used in cases.json: either a list or 'lo-hi'."""
    if isinstance(shorthand, str):
        lo, hi = shorthand.split("-")
        return tuple(range(int(lo), int(hi) + 1))
    return tuple(shorthand)


def parse_instant(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s is not None else None
