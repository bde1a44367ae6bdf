from __future__ import annotations

import difflib
from dataclasses import dataclass

from ...config.model import RosterConfig
from .entries import parse_entries
from .sections import find_block


@dataclass(frozen=True)
class FixResult:
    text: str
    reordered: tuple[str, ...]
    skipped: tuple[str, ...]

    @property
    def changed(self) -> bool:
        return bool(self.reordered)


def sort_sections(text: str, config: RosterConfig) -> FixResult:
    """Reorder each configured section's bullet block by first name.

    Lines outside the blocks are untouched and the sort is stable, so entries
    sharing a first name keep their relative order. Sections that are missing
    or hold a bullet whose name cannot be parsed are left as they are.
    """
    raw_lines = text.split("\n")
    view = [line[:-1] if line.endswith("\r") else line for line in raw_lines]
    reordered: list[str] = []
    skipped: list[str] = []
    for spec in config.sections:
        block = find_block(view, spec)
        if block is None:
            skipped.append(spec.name)
            continue
        entries, malformed = parse_entries(block.lines)
        if malformed or not entries:
            skipped.append(spec.name)
            continue
        order = sorted(range(len(entries)), key=lambda i: entries[i].sort_key)
        if order == list(range(len(entries))):
            continue
        raw_block = raw_lines[block.start : block.end]
        view_block = view[block.start : block.end]
        raw_lines[block.start : block.end] = [raw_block[i] for i in order]
        view[block.start : block.end] = [view_block[i] for i in order]
        reordered.append(spec.name)
    return FixResult(text="\n".join(raw_lines), reordered=tuple(reordered), skipped=tuple(skipped))


def render_diff(before: str, after: str, name: str) -> str:
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
        )
    )
