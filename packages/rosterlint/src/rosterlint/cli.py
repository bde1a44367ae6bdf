from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from . import __version__
from .checks.roster.document import read_document, write_document
from .checks.roster.fix import render_diff, sort_sections
from .checks.runner import run_roster
from .config import RosterConfig, load_roster_config
from .core.context import RunContext
from .core.paths import resolve_under
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, ERR_USAGE, OK
from .reporting import render_text, write_json_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rosterlint", description="lint contributor roster sections of a markdown document")
    p.add_argument("--version", action="version", version=f"rosterlint {__version__}")
    p.add_argument("--run-id", help="run identifier for logs and reports")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--config", help="roster config YAML (default: configs/rosterlint/roster.yaml when present)")
    p.add_argument("--document", help="roster document path, overrides the configured document")
    p.add_argument("--log-json", action="store_true", help="emit structured log lines as JSON")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    check_p = sub.add_parser("check", help="check roster sections are sorted and emeritus entries unaffiliated")
    check_p.add_argument("--section", action="append", default=[], help="limit to a section name or check id; repeatable")
    check_p.add_argument("--out-file", help="also write the JSON report to this path")
    check_p.add_argument("--json", action="store_true", help="emit JSON output")

    sections_p = sub.add_parser("sections", help="list configured roster sections")
    sections_p.add_argument("--json", action="store_true", help="emit JSON output")

    fix_p = sub.add_parser("fix", help="rewrite the document with each section sorted by first name")
    fix_p.add_argument("--dry-run", action="store_true", help="print a unified diff instead of writing")
    fix_p.add_argument("--json", action="store_true", help="emit JSON output")
    return p


def _document_path(ctx: RunContext, config: RosterConfig) -> Path:
    if ctx.document_override is not None:
        return ctx.document_override
    return resolve_under(ctx.repo_root, config.document)


def _load_config(ctx: RunContext, names: list[str] | None = None) -> RosterConfig:
    config = load_roster_config(ctx.repo_root, ctx.config_path)
    if not names:
        return config
    selected = config.select(names)
    if not selected.sections:
        raise ScriptError(f"no configured section matches: {', '.join(names)}", ERR_USAGE)
    return selected


def _run_check(ctx: RunContext, ns: argparse.Namespace, as_json: bool) -> int:
    config = _load_config(ctx, ns.section)
    document = _document_path(ctx, config)
    ctx.log("info", "cli", "check", document=document.as_posix(), sections=len(config.sections), config=config.source)
    code, payload = run_roster(document, config, run_id=ctx.run_id, log=ctx.log)
    if ns.out_file:
        out = write_json_report(resolve_under(ctx.repo_root, ns.out_file), payload)
        ctx.log("info", "cli", "report", path=out.as_posix())
    print(json.dumps(payload, sort_keys=True) if as_json else render_text(payload))
    ctx.log("info" if code == OK else "warn", "cli", "finish", status=payload["status"])
    return code


def _run_sections(ctx: RunContext, as_json: bool) -> int:
    config = _load_config(ctx)
    payload = {
        "schema_version": 1,
        "tool": "rosterlint",
        "source": config.source,
        "document": _document_path(ctx, config).as_posix(),
        "sections": [
            {"id": s.check_id, "name": s.name, "heading": s.heading, "emeritus": s.emeritus} for s in config.sections
        ],
    }
    if as_json:
        print(json.dumps(payload, sort_keys=True))
    else:
        for row in payload["sections"]:
            suffix = " (emeritus)" if row["emeritus"] else ""
            print(f"{row['id']}: {row['heading']}{suffix}")
    return OK


def _run_fix(ctx: RunContext, ns: argparse.Namespace, as_json: bool) -> int:
    config = _load_config(ctx)
    document = _document_path(ctx, config)
    before = read_document(document)
    result = sort_sections(before, config)
    diff = render_diff(before, result.text, document.name)
    if result.changed and not ns.dry_run:
        write_document(document, result.text)
        ctx.log("info", "cli", "fix", document=document.as_posix(), reordered=",".join(result.reordered))
    if as_json:
        payload = {
            "schema_version": 1,
            "tool": "rosterlint",
            "status": "ok",
            "document": document.as_posix(),
            "dry_run": bool(ns.dry_run),
            "changed": result.changed,
            "reordered": list(result.reordered),
            "skipped": list(result.skipped),
        }
        if ns.dry_run:
            payload["diff"] = diff
        print(json.dumps(payload, sort_keys=True))
    elif ns.dry_run:
        print(diff, end="")
    else:
        print(f"reordered={','.join(result.reordered) or '-'} skipped={','.join(result.skipped) or '-'}")
    return OK


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    fmt = ns.format or ("json" if "CI" in os.environ else "text")
    ctx: RunContext | None = None
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            fmt,
            ns.config,
            ns.document,
            ns.verbose,
            ns.quiet,
            ns.log_json,
        )
        ctx.log("info", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        as_json = ctx.output_format == "json" or bool(getattr(ns, "json", False))
        if ns.cmd == "check":
            return _run_check(ctx, ns, as_json)
        if ns.cmd == "sections":
            return _run_sections(ctx, as_json)
        if ns.cmd == "fix":
            return _run_fix(ctx, ns, as_json)
        return ERR_USAGE
    except ScriptError as exc:
        if fmt == "json":
            print(
                json.dumps(
                    {
                        "schema_version": 1,
                        "tool": "rosterlint",
                        "status": "fail",
                        "error": {"message": str(exc), "code": exc.code, "kind": type(exc).__name__},
                    },
                    sort_keys=True,
                ),
                file=sys.stderr,
            )
        else:
            print(str(exc), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        if ctx is not None:
            ctx.log("error", "cli", "crash", error=type(exc).__name__)
        print(f"internal error: {exc}", file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
