"""Locate a roster section and its bullet block.

A section is a heading line, exactly one blank line, then a run of bullet lines
starting with ``- [``. The run ends at the first line without that prefix.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...config.model import SectionSpec
from ...errors import SectionNotFound
from .document import document_lines

BULLET_PREFIX = "- ["


@dataclass(frozen=True)
class SectionBlock:
    spec: SectionSpec
    heading_index: int
    start: int
    lines: tuple[str, ...]

    @property
    def end(self) -> int:
        return self.start + len(self.lines)


def _bullet_run(lines: list[str], start: int) -> int:
    end = start
    while end < len(lines) and lines[end].startswith(BULLET_PREFIX):
        end += 1
    return end


def find_block(lines: list[str], spec: SectionSpec) -> SectionBlock | None:
    for idx, line in enumerate(lines):
        if line != spec.heading:
            continue
        blank = idx + 1
        if blank >= len(lines) or lines[blank] != "":
            continue
        start = blank + 1
        end = _bullet_run(lines, start)
        if end == start:
            continue
        return SectionBlock(spec=spec, heading_index=idx, start=start, lines=tuple(lines[start:end]))
    return None


def extract_section(text: str, spec: SectionSpec, document_name: str = "README.md") -> SectionBlock:
    block = find_block(document_lines(text), spec)
    if block is None:
        raise SectionNotFound(f"Section {spec.name} not found in {document_name}", section=spec.name)
    return block
