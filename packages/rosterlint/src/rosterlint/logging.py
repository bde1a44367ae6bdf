from __future__ import annotations

import json
import sys
from datetime import datetime, timezone


def log_event(level: str, component: str, action: str, run_id: str, json_output: bool = True, **fields: object) -> None:
    payload: dict[str, object] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "component": component,
        "action": action,
        "run_id": run_id,
    }
    payload.update(fields)
    if json_output:
        sys.stderr.write(json.dumps(payload, sort_keys=True) + "\n")
        return
    extras = " ".join(f"{k}={v}" for k, v in sorted(fields.items()))
    sys.stderr.write(f"[{level}] {component}:{action} run_id={run_id} {extras}".strip() + "\n")
