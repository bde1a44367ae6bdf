from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class Violation:
    section: str

    code: ClassVar[str] = "ROSTER_VIOLATION"

    @property
    def message(self) -> str:
        return self.lines()[0]

    def lines(self) -> list[str]:
        return [f"{self.section} section has a roster violation ({self.code})"]

    @property
    def source_line(self) -> str:
        return ""

    def detail(self) -> dict[str, object]:
        return {}

    def as_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "section": self.section,
            "message": self.message,
            "line": self.source_line,
            "detail": self.detail(),
        }


@dataclass(frozen=True)
class OrderViolation(Violation):
    """Entries of a section are not sorted by first name.

    `corrected` holds the section's original bullet lines re-emitted in sorted
    order so the document can be fixed by copy and paste.
    """

    observed: tuple[str, ...] = ()
    expected: tuple[str, ...] = ()
    corrected: tuple[str, ...] = ()
    misplaced: str = ""

    code: ClassVar[str] = "ORDER_VIOLATION"

    @property
    def source_line(self) -> str:
        return self.misplaced

    def lines(self) -> list[str]:
        out = [
            f"{self.section} section is not sorted alphabetically by first name",
            f"Current order: [{' '.join(self.observed)}]",
            f"Expected order: [{' '.join(self.expected)}]",
            "Correct ordering should be:",
        ]
        out.extend(f"  {line}" for line in self.corrected)
        return out

    def detail(self) -> dict[str, object]:
        return {"observed": list(self.observed), "expected": list(self.expected), "corrected": list(self.corrected)}


@dataclass(frozen=True)
class AffiliationViolation(Violation):
    line: str = ""
    affiliation: str = ""

    code: ClassVar[str] = "AFFILIATION_VIOLATION"

    @property
    def source_line(self) -> str:
        return self.line

    def lines(self) -> list[str]:
        return [
            f"{self.section} section contains company affiliation that should be removed: "
            f"{self.line} (company: {self.affiliation})"
        ]

    def detail(self) -> dict[str, object]:
        return {"line": self.line, "affiliation": self.affiliation}


@dataclass(frozen=True)
class SectionOutcome:
    section: str
    observed_order: tuple[str, ...] = ()
    expected_order: tuple[str, ...] = ()
    violations: tuple[Violation, ...] = ()
    skipped_lines: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class CheckResult:
    id: str
    section: str
    emeritus: bool
    status: CheckStatus
    duration_ms: int
    budget_ms: int
    outcome: SectionOutcome | None = None
    errors: tuple[str, ...] = ()

    def error_lines(self) -> list[str]:
        if self.outcome is None:
            return list(self.errors)
        out: list[str] = []
        for violation in self.outcome.violations:
            out.extend(violation.lines())
        return out

    def as_row(self) -> dict[str, object]:
        outcome = self.outcome
        return {
            "id": self.id,
            "section": self.section,
            "emeritus": self.emeritus,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "budget_ms": self.budget_ms,
            "budget_status": "pass" if self.duration_ms <= self.budget_ms else "warn",
            "observed_order": list(outcome.observed_order) if outcome else [],
            "expected_order": list(outcome.expected_order) if outcome else [],
            "skipped_lines": list(outcome.skipped_lines) if outcome else [],
            "errors": self.error_lines(),
            "violations": [v.as_dict() for v in outcome.violations] if outcome else [],
        }
