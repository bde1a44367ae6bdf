from __future__ import annotations

from .loader import DEFAULT_CONFIG_REL, load_roster_config
from .model import DEFAULT_DOCUMENT, DEFAULT_SECTIONS, RosterConfig, SectionSpec

__all__ = [
    "DEFAULT_CONFIG_REL",
    "DEFAULT_DOCUMENT",
    "DEFAULT_SECTIONS",
    "RosterConfig",
    "SectionSpec",
    "load_roster_config",
]
