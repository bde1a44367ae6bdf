from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .model import SectionOutcome

CheckFunc = Callable[[str], SectionOutcome]


@dataclass(frozen=True)
class CheckDef:
    check_id: str
    domain: str
    budget_ms: int
    fn: CheckFunc
    title: str = ""
    tags: tuple[str, ...] = ()
