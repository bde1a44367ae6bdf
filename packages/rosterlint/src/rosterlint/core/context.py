from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..logging import log_event
from ..run_id import make_run_id
from .git import read_git_sha
from .paths import repo_root_or_cwd, resolve_under

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    config_path: Path | None
    document_override: Path | None
    verbose: bool
    quiet: bool
    log_json: bool

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        output_format: OutputFormat = "text",
        config: str | None = None,
        document: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        start: Path | None = None,
    ) -> "RunContext":
        repo_root = repo_root_or_cwd(start)
        resolved_run_id = run_id or os.environ.get("RUN_ID") or make_run_id(read_git_sha(repo_root))
        return cls(
            run_id=resolved_run_id,
            repo_root=repo_root,
            output_format=output_format,
            config_path=resolve_under(repo_root, config) if config else None,
            document_override=resolve_under(repo_root, document) if document else None,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )

    def log(self, level: str, component: str, action: str, **fields: object) -> None:
        if self.quiet and level != "error":
            return
        if level == "debug" and not self.verbose:
            return
        log_event(level, component, action, self.run_id, self.log_json, **fields)
