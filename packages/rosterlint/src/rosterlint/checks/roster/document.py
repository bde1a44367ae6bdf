from __future__ import annotations

from pathlib import Path

from ...errors import DocumentUnreadable


def read_document(path: Path) -> str:
    # newline="" keeps CRLF endings so a rewrite can reproduce them
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentUnreadable(f"failed to read roster document {path}: {exc}") from exc


def write_document(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def document_lines(text: str) -> list[str]:
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
