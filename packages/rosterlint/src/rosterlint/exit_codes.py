from __future__ import annotations

import json
from pathlib import Path

ERROR_REGISTRY = Path(__file__).with_name("error_registry.json")


def _load_registry() -> dict[str, int]:
    payload = json.loads(ERROR_REGISTRY.read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = 0
ERR_FAIL = _REG["ROSTER_ERR_FAIL"]
ERR_USAGE = _REG["ROSTER_ERR_USAGE"]
ERR_CONFIG = _REG["ROSTER_ERR_CONFIG"]
ERR_DOCUMENT = _REG["ROSTER_ERR_DOCUMENT"]
ERR_INTERNAL = _REG["ROSTER_ERR_INTERNAL"]
