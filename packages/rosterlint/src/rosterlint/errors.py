from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_DOCUMENT, ERR_FAIL, ERR_INTERNAL


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(ScriptError):
    code: int = ERR_CONFIG


@dataclass
class DocumentUnreadable(ScriptError):
    """The roster document cannot be opened or decoded. Aborts the whole run."""

    code: int = ERR_DOCUMENT


@dataclass
class SectionError(ScriptError):
    """Failure scoped to one section; the runner records it and moves on."""

    code: int = ERR_FAIL
    section: str = ""


@dataclass
class SectionNotFound(SectionError):
    pass


@dataclass
class EmptySection(SectionError):
    pass


@dataclass
class MalformedEntry(ScriptError):
    code: int = ERR_FAIL
    line: str = ""
