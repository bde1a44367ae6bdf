from __future__ import annotations

import pytest

from rosterlint.checks.roster.affiliation import check_affiliations, find_affiliation


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("- [Carol Lee], Acme Corp", "Acme Corp"),
        ("- [Carol Lee](https://github.com/clee), Acme Corp  ", "Acme Corp"),
        ("- [Carol Lee], Acme, Inc", "Acme"),
        ("- [Dave Kim] (https://example.com)", None),
        ("- [Dave Kim], Globex (former)", None),
        ("- [Grace Wu], https://github.com/gwu", None),
        ("- [Grace Wu](https://github.com/gwu)", None),
        ("- [Grace Wu],Acme", None),
        ("plain text, Acme", None),
    ],
)
def test_find_affiliation(line: str, expected: str | None) -> None:
    assert find_affiliation(line) == expected


def test_names_with_commas_are_flagged_as_written() -> None:
    assert find_affiliation("- [Smith, Jr.]") == "Jr.]"


def test_check_affiliations_reports_line_and_company() -> None:
    violations = check_affiliations("Emeritus Approvers", ["- [Carol Lee], Acme Corp", "- [Erin Moss]"])
    assert len(violations) == 1
    only = violations[0]
    assert only.line == "- [Carol Lee], Acme Corp"
    assert only.affiliation == "Acme Corp"
    assert only.message == (
        "Emeritus Approvers section contains company affiliation that should be removed: "
        "- [Carol Lee], Acme Corp (company: Acme Corp)"
    )
    assert only.as_dict()["line"] == "- [Carol Lee], Acme Corp"
