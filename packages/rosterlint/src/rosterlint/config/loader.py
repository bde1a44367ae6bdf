from __future__ import annotations

from pathlib import Path

import yaml

from ..core.schema_utils import schema_errors
from ..core.yaml_utils import load_yaml
from ..errors import ConfigError
from .model import DEFAULT_DOCUMENT, RosterConfig, SectionSpec

DEFAULT_CONFIG_REL = "configs/rosterlint/roster.yaml"
CONFIG_SCHEMA = Path(__file__).with_name("roster-config.schema.json")


def _from_payload(payload: dict[str, object], source: str) -> RosterConfig:
    try:
        sections = tuple(
            SectionSpec(
                name=str(row["name"]),
                emeritus=bool(row.get("emeritus", False)),
                heading=str(row.get("heading", "")),
                budget_ms=int(row.get("budget_ms", 200)),
            )
            for row in payload["sections"]  # type: ignore[union-attr]
        )
    except ValueError as exc:
        raise ConfigError(f"{source}: {exc}") from exc
    ids = [s.check_id for s in sections]
    dupes = sorted({i for i in ids if ids.count(i) > 1})
    if dupes:
        raise ConfigError(f"{source}: duplicate section check ids: {', '.join(dupes)}")
    return RosterConfig(document=str(payload.get("document", DEFAULT_DOCUMENT)), sections=sections, source=source)


def load_config_file(path: Path) -> RosterConfig:
    if not path.is_file():
        raise ConfigError(f"roster config not found: {path}")
    try:
        payload = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    errors = schema_errors(payload, CONFIG_SCHEMA)
    if errors:
        raise ConfigError(f"{path}: config schema violations: " + "; ".join(errors))
    return _from_payload(payload, path.as_posix())


def load_roster_config(repo_root: Path, config_path: Path | None = None) -> RosterConfig:
    if config_path is not None:
        return load_config_file(config_path)
    default = repo_root / DEFAULT_CONFIG_REL
    if default.is_file():
        return load_config_file(default)
    return RosterConfig()
