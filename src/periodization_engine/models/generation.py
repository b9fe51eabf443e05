"""Output of a best-effort structure generation run."""

from __future__ import annotations

from dataclasses import dataclass, field

from periodization_engine.models.plan import Plan


@dataclass(frozen=True)
class SkippedUnit:
    """A phase, week or day the generator could not build.

    ``index`` is zero-based within the parent (the plan for phases, the
    phase for weeks, the week for days). ``parent_order`` is the 1-based
    order of the parent unit, or 0 for phases.
    """

    level: str  # "phase", "week" or "day"
    index: int
    reason: str
    parent_order: int = 0


@dataclass(frozen=True)
class GenerationResult:
    """The generated plan plus everything that was skipped or violated.

    Callers that need a complete structure should check ``is_complete``
    rather than counting phases or weeks.
    """

    plan: Plan
    skipped: tuple[SkippedUnit, ...] = field(default_factory=tuple)
    violations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_complete(self) -> bool:
        return not self.skipped and not self.violations

    @property
    def phase_count(self) -> int:
        return len(self.plan.phases)

    @property
    def week_count(self) -> int:
        return sum(len(p.weeks) for p in self.plan.phases)

    @property
    def day_count(self) -> int:
        return sum(len(w.days) for p in self.plan.phases for w in p.weeks)
