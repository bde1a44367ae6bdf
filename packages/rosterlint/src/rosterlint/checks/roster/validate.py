from __future__ import annotations

from ...config.model import SectionSpec
from ...errors import EmptySection
from ..model import SectionOutcome, Violation
from .affiliation import check_affiliations
from .entries import parse_entries
from .ordering import check_order, expected_order, observed_order
from .sections import extract_section


def check_section(text: str, spec: SectionSpec, document_name: str = "README.md") -> SectionOutcome:
    block = extract_section(text, spec, document_name)
    entries, skipped = parse_entries(block.lines)
    if not entries:
        raise EmptySection(f"No contributors found in {spec.name} section", section=spec.name)

    violations: list[Violation] = []
    order = check_order(spec.name, entries)
    if order is not None:
        violations.append(order)
    if spec.emeritus:
        violations.extend(check_affiliations(spec.name, block.lines))
    return SectionOutcome(
        section=spec.name,
        observed_order=tuple(observed_order(entries)),
        expected_order=tuple(expected_order(entries)),
        violations=tuple(violations),
        skipped_lines=tuple(skipped),
    )
