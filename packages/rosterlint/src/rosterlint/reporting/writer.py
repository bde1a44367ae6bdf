from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_json_report(target: Path, payload: dict[str, Any]) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return target


def render_text(payload: dict[str, Any]) -> str:
    lines = [
        f"roster check {payload['document']}: {payload['status']} "
        f"({payload['failed_count']}/{payload['total_count']} failed)"
    ]
    for row in payload["sections"]:
        lines.append(f"- {row['id']}: {row['status']}")
        lines.extend(f"    {err}" for err in row["errors"])
    return "\n".join(lines)
