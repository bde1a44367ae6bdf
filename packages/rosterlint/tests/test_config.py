from __future__ import annotations

from pathlib import Path

import pytest

from rosterlint.cli import main
from rosterlint.config import DEFAULT_CONFIG_REL, DEFAULT_SECTIONS, RosterConfig, SectionSpec, load_roster_config
from rosterlint.errors import ConfigError
from rosterlint.exit_codes import ERR_CONFIG, ERR_DOCUMENT, ERR_FAIL, ERR_INTERNAL, ERR_USAGE, OK

ROOT = Path(__file__).resolve().parents[3]


def test_default_sections_match_roster_layout() -> None:
    assert [(s.name, s.emeritus) for s in DEFAULT_SECTIONS] == [
        ("Maintainers", False),
        ("Approvers", False),
        ("Emeritus Maintainers", True),
        ("Emeritus Approvers", True),
    ]
    assert [s.heading for s in DEFAULT_SECTIONS][2] == "### Emeritus Maintainers"
    assert [s.check_id for s in DEFAULT_SECTIONS][3] == "roster/emeritus-approvers-sorted"


def test_section_spec_rejects_blank_name() -> None:
    with pytest.raises(ValueError):
        SectionSpec("  ")


def test_select_by_name_or_check_id() -> None:
    config = RosterConfig()
    assert [s.name for s in config.select(["approvers"]).sections] == ["Approvers"]
    assert [s.name for s in config.select(["roster/maintainers-sorted"]).sections] == ["Maintainers"]
    assert config.select([]) is config


def test_builtin_config_when_no_file(tmp_path: Path) -> None:
    config = load_roster_config(tmp_path)
    assert config.source == "builtin"
    assert config.sections == DEFAULT_SECTIONS


def test_repo_default_config_file_is_valid() -> None:
    config = load_roster_config(ROOT)
    assert config.source.endswith(DEFAULT_CONFIG_REL)
    assert config.sections == DEFAULT_SECTIONS
    assert config.document == "README.md"


def test_yaml_config_overrides_sections(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text(
        "schema_version: 1\n"
        "document: docs/TEAM.md\n"
        "sections:\n"
        "  - name: Core\n"
        "    heading: '## Core Team'\n"
        "  - name: Alumni\n"
        "    emeritus: true\n"
        "    budget_ms: 50\n",
        encoding="utf-8",
    )
    config = load_roster_config(tmp_path, path)
    assert config.document == "docs/TEAM.md"
    assert [(s.name, s.heading, s.emeritus, s.budget_ms) for s in config.sections] == [
        ("Core", "## Core Team", False, 200),
        ("Alumni", "### Alumni", True, 50),
    ]


@pytest.mark.parametrize(
    "body",
    [
        "schema_version: 2\nsections:\n  - name: A\n",
        "schema_version: 1\nsections: []\n",
        "schema_version: 1\nsections:\n  - emeritus: true\n",
        "schema_version: 1\nsections:\n  - name: A\n    colour: red\n",
        "schema_version: 1\nsections:\n  - name: A\n  - name: A\n",
        "schema_version: 1\nsections:\n  - name: '   '\n",
        "schema_version: 1\nsections:\n  - name: Emeritus Approvers\n  - name: Emeritus-Approvers\n",
        "sections: [unclosed\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config_raises_config_error(tmp_path: Path, body: str) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        load_roster_config(tmp_path, path)
    assert exc.value.code == ERR_CONFIG


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="roster config not found"):
        load_roster_config(tmp_path, tmp_path / "nope.yaml")


def test_exit_codes_are_distinct() -> None:
    codes = [OK, ERR_FAIL, ERR_USAGE, ERR_CONFIG, ERR_DOCUMENT, ERR_INTERNAL]
    assert len(set(codes)) == len(codes)
    assert (OK, ERR_FAIL, ERR_USAGE) == (0, 1, 2)


def test_blank_section_name_is_config_error_not_internal(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("schema_version: 1\nsections:\n  - name: '   '\n", encoding="utf-8")
    assert main(["--quiet", "--run-id", "t", "--config", str(path), "sections"]) == ERR_CONFIG


def test_colliding_check_ids_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text(
        "schema_version: 1\nsections:\n  - name: Emeritus Approvers\n  - name: Emeritus-Approvers\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigError, match="roster/emeritus-approvers-sorted"):
        load_roster_config(tmp_path, path)
