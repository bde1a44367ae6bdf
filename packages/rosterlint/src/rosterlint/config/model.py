from __future__ import annotations

import re
from dataclasses import dataclass

_SLUG_RE = re.compile(r"[^a-z0-9]+")

DEFAULT_DOCUMENT = "README.md"


@dataclass(frozen=True)
class SectionSpec:
    name: str
    emeritus: bool = False
    heading: str = ""
    budget_ms: int = 200

    def __post_init__(self) -> None:
        name = str(self.name).strip()
        if not name:
            raise ValueError("section name cannot be empty")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "heading", str(self.heading).strip() or f"### {name}")

    @property
    def slug(self) -> str:
        return _SLUG_RE.sub("-", self.name.lower()).strip("-")

    @property
    def check_id(self) -> str:
        return f"roster/{self.slug}-sorted"


DEFAULT_SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec("Maintainers"),
    SectionSpec("Approvers"),
    SectionSpec("Emeritus Maintainers", emeritus=True),
    SectionSpec("Emeritus Approvers", emeritus=True),
)


@dataclass(frozen=True)
class RosterConfig:
    document: str = DEFAULT_DOCUMENT
    sections: tuple[SectionSpec, ...] = DEFAULT_SECTIONS
    source: str = "builtin"

    def select(self, names: list[str] | tuple[str, ...]) -> "RosterConfig":
        if not names:
            return self
        wanted = {n.strip().lower() for n in names}
        picked = tuple(s for s in self.sections if s.name.lower() in wanted or s.check_id in wanted)
        return RosterConfig(document=self.document, sections=picked, source=self.source)
