from __future__ import annotations

from typing import Sequence

from ..model import OrderViolation
from .entries import Entry


def observed_order(entries: Sequence[Entry]) -> list[str]:
    return [e.sort_key for e in entries]


def expected_order(entries: Sequence[Entry]) -> list[str]:
    return sorted(observed_order(entries))


def sorted_entries(entries: Sequence[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda e: e.sort_key)


def check_order(section: str, entries: Sequence[Entry]) -> OrderViolation | None:
    current = observed_order(entries)
    expected = expected_order(entries)
    if current == expected:
        return None
    first = next(i for i, (have, want) in enumerate(zip(current, expected)) if have != want)
    return OrderViolation(
        section=section,
        observed=tuple(current),
        expected=tuple(expected),
        corrected=tuple(e.line for e in sorted_entries(entries)),
        misplaced=entries[first].line,
    )
