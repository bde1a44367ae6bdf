from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Sequence

from ..config.model import RosterConfig
from ..errors import SectionError
from ..exit_codes import ERR_FAIL, OK
from .base import CheckDef
from .model import CheckResult, CheckStatus
from .roster import section_checks
from .roster.document import read_document

LogFn = Callable[..., None]


def _noop_log(*_args: object, **_kwargs: object) -> None:
    return None


def run_checks(text: str, checks: Sequence[CheckDef], log: LogFn = _noop_log) -> list[CheckResult]:
    results: list[CheckResult] = []
    for chk in checks:
        emeritus = "emeritus" in chk.tags
        start = time.perf_counter()
        try:
            outcome = chk.fn(text)
        except SectionError as exc:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            results.append(
                CheckResult(
                    id=chk.check_id,
                    section=chk.title,
                    emeritus=emeritus,
                    status=CheckStatus.ERROR,
                    duration_ms=elapsed_ms,
                    budget_ms=chk.budget_ms,
                    errors=(str(exc),),
                )
            )
            log("error", "roster", "section", check=chk.check_id, error=type(exc).__name__)
            continue
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        status = CheckStatus.PASS if outcome.ok else CheckStatus.FAIL
        results.append(
            CheckResult(
                id=chk.check_id,
                section=chk.title,
                emeritus=emeritus,
                status=status,
                duration_ms=elapsed_ms,
                budget_ms=chk.budget_ms,
                outcome=outcome,
            )
        )
        for line in outcome.skipped_lines:
            log("debug", "roster", "skip-line", check=chk.check_id, line=line)
        log(
            "info" if outcome.ok else "warn",
            "roster",
            "section",
            check=chk.check_id,
            status=status.value,
            violations=len(outcome.violations),
        )
    return results


def build_payload(document: Path, results: Sequence[CheckResult], run_id: str) -> dict[str, object]:
    failed = sum(1 for r in results if r.status is not CheckStatus.PASS)
    return {
        "schema_version": 1,
        "tool": "rosterlint",
        "kind": "roster-check",
        "run_id": run_id,
        "document": document.as_posix(),
        "status": "pass" if failed == 0 else "fail",
        "failed_count": failed,
        "total_count": len(results),
        "sections": [r.as_row() for r in results],
    }


def run_roster(
    document: Path,
    config: RosterConfig,
    *,
    run_id: str,
    log: LogFn = _noop_log,
) -> tuple[int, dict[str, object]]:
    text = read_document(document)
    results = run_checks(text, section_checks(config, document.name), log)
    payload = build_payload(document, results, run_id)
    return (OK if payload["status"] == "pass" else ERR_FAIL), payload
