"""Repository root detection helpers.

`Path.cwd()` is only allowed in this module.
"""

from __future__ import annotations

from pathlib import Path

_ROOT_MARKERS = ("pyproject.toml", ".git")


def find_repo_root(start: Path | None = None) -> Path:
    cur = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        if any((cur / marker).exists() for marker in _ROOT_MARKERS):
            return cur
        if cur.parent == cur:
            raise RuntimeError("unable to resolve repository root")
        cur = cur.parent


def try_find_repo_root(start: Path | None = None) -> Path | None:
    try:
        return find_repo_root(start)
    except RuntimeError:
        return None


def resolve_under(root: Path, raw: str | Path) -> Path:
    path = Path(raw)
    return path.resolve() if path.is_absolute() else (root / path).resolve()


def repo_root_or_cwd(start: Path | None = None) -> Path:
    found = try_find_repo_root(start)
    return found if found is not None else Path.cwd().resolve()
