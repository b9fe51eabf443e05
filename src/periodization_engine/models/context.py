"""TrainingContext — the resolved "you are here" snapshot for a date."""

from __future__ import annotations

from dataclasses import dataclass

from periodization_engine.models.enums import LoadLevel, StrengthProfile
from periodization_engine.models.plan import Day, Phase, Plan, Week


@dataclass(frozen=True)
class TrainingContext:
    """Plan, phase, week and (optionally) day containing a queried date.

    Built fresh by the resolver on every call and never mutated. The focus
    profile and weekly factors are copied at resolution time so consumers
    see the values that were live when the context was built.
    """

    plan: Plan
    phase: Phase
    week: Week
    day: Day | None
    focus_profile: StrengthProfile
    load_level: LoadLevel
    intensity_factor: float
    volume_factor: float

    @property
    def is_deload_week(self) -> bool:
        return self.week.is_deload

    @property
    def description(self) -> str:
        return (
            f"Plan: {self.plan.name}\n"
            f"Phase: {self.phase.name} ({self.phase.phase_type.name.lower()})\n"
            f"Week: {self.week.week_number} - {self.load_level.name.lower()}\n"
            f"Focus: {self.focus_profile.name.lower()}\n"
            f"Intensity: {self.intensity_factor:.0%} | Volume: {self.volume_factor:.0%}"
        )
