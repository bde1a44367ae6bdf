from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from ...errors import MalformedEntry

_NAME_RE = re.compile(r"-\s*\[([^\]]+)\]")


@dataclass(frozen=True)
class Entry:
    line: str
    name: str
    sort_key: str


def normalize_name(raw: str) -> str:
    # "John L. Peterson (Jack)" -> "John L. Peterson"
    if "(" in raw:
        return raw.split("(", 1)[0].strip()
    return raw


def first_name_key(name: str) -> str:
    return normalize_name(name).split(" ", 1)[0].lower()


def parse_entry(line: str) -> Entry:
    text = line.strip()
    match = _NAME_RE.search(text)
    if match is None:
        raise MalformedEntry(f"no bracketed contributor name in line: {text}", line=text)
    name = normalize_name(match.group(1))
    return Entry(line=text, name=name, sort_key=first_name_key(name))


def parse_entries(lines: Iterable[str]) -> tuple[list[Entry], list[str]]:
    entries: list[Entry] = []
    skipped: list[str] = []
    for line in lines:
        try:
            entries.append(parse_entry(line))
        except MalformedEntry as exc:
            skipped.append(exc.line)
    return entries, skipped
