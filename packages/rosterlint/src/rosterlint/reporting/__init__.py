from __future__ import annotations

from .writer import render_text, write_json_report

__all__ = ["render_text", "write_json_report"]
