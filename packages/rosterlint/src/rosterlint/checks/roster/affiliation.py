from __future__ import annotations

from typing import Iterable

from ..model import AffiliationViolation
from .sections import BULLET_PREFIX


def find_affiliation(line: str) -> str | None:
    """Return the company text trailing an emeritus bullet, if any.

    Heuristic: the second ``", "`` separated segment counts as an affiliation
    unless it is empty, starts with ``http``, or the line ends with ``)``.
    """
    text = line.strip()
    if not text.startswith(BULLET_PREFIX) or ", " not in text or text.endswith(")"):
        return None
    candidate = text.split(", ")[1].strip()
    if not candidate or candidate.startswith("http"):
        return None
    return candidate


def check_affiliations(section: str, lines: Iterable[str]) -> list[AffiliationViolation]:
    violations: list[AffiliationViolation] = []
    for line in lines:
        company = find_affiliation(line)
        if company is not None:
            violations.append(AffiliationViolation(section=section, line=line.strip(), affiliation=company))
    return violations
