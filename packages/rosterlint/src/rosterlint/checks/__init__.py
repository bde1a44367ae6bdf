from __future__ import annotations

from .base import CheckDef, CheckFunc
from .model import AffiliationViolation, CheckResult, CheckStatus, OrderViolation, SectionOutcome, Violation

__all__ = [
    "AffiliationViolation",
    "CheckDef",
    "CheckFunc",
    "CheckResult",
    "CheckStatus",
    "OrderViolation",
    "SectionOutcome",
    "Violation",
]
