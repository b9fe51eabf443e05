"""Custom exception hierarchy for the periodization engine."""

from __future__ import annotations


class PeriodizationError(Exception):
    """Base exception for all periodization_engine errors."""


class InvalidLoadError(PeriodizationError, ValueError):
    """A load calculation received a degenerate base value (zero or negative)."""


class RegenerationError(PeriodizationError):
    """Structure generation was requested for a plan that already has phases."""

    def __init__(self, plan_name: str, phase_count: int) -> None:
        super().__init__(
            f"Plan {plan_name!r} already has {phase_count} phase(s); "
            "clear its structure before generating again"
        )
        self.plan_name = plan_name
        self.phase_count = phase_count


class StructureInvariantError(PeriodizationError):
    """A generated phase broke a structural invariant (strict mode only)."""


class RepositoryError(PeriodizationError):
    """The plan store failed to answer a query."""


class UnknownStrategyError(PeriodizationError, KeyError):
    """No generation strategy is registered for a periodization model."""
