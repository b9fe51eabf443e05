"""Environment-variable-based configuration for the periodization engine."""

from __future__ import annotations

import os

PHASE_DURATION_WEEKS: int = int(os.environ.get("PERIODIZATION_PHASE_WEEKS", "4"))
STRICT_INVARIANTS: bool = os.environ.get(
    "PERIODIZATION_STRICT_INVARIANTS", "0"
).lower() in ("1", "true", "yes", "on")
LOG_LEVEL: str = os.environ.get("PERIODIZATION_LOG_LEVEL", "INFO").upper()
