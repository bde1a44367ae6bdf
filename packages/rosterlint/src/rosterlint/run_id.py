from __future__ import annotations

from datetime import datetime, timezone


def make_run_id(sha: str, prefix: str = "roster") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}-{sha or 'unknown'}"
