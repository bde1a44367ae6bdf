from __future__ import annotations

from functools import partial

from ...config.model import RosterConfig
from ..base import CheckDef
from .validate import check_section


def section_checks(config: RosterConfig, document_name: str = "README.md") -> tuple[CheckDef, ...]:
    return tuple(
        CheckDef(
            spec.check_id,
            "roster",
            spec.budget_ms,
            partial(check_section, spec=spec, document_name=document_name),
            title=spec.name,
            tags=("emeritus",) if spec.emeritus else (),
        )
        for spec in config.sections
    )


__all__ = ["section_checks"]
