"""Block periodization: concentrated blocks alternating strength focus.

Blocks alternate between the primary and secondary profile (the primary
again when no secondary is set). A hypertrophy block is an accumulation
block; any other focus is trained as intensification.

Reference:
    Issurin (2010). New horizons for the methodology and physiology of
        training periodization. Sports Med 40(3):189-206.
"""

from __future__ import annotations

from periodization_engine.models.enums import (
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)
from periodization_engine.models.plan import Plan
from periodization_engine.strategies.base import PhaseStrategy


class BlockStrategy(PhaseStrategy):
    strategy = PeriodizationStrategy.BLOCK
    name_prefix = "Block"

    def focus_for(self, index: int, plan: Plan) -> StrengthProfile:
        profiles = (
            plan.primary_profile,
            plan.secondary_profile or plan.primary_profile,
        )
        return profiles[index % len(profiles)]

    def phase_type_for(self, index: int, plan: Plan) -> PhaseType:
        if self.focus_for(index, plan) == StrengthProfile.HYPERTROPHY:
            return PhaseType.ACCUMULATION
        return PhaseType.INTENSIFICATION

    def phase_name(self, index: int, phase_type: PhaseType, focus: StrengthProfile) -> str:
        label = focus.name.replace("_", " ").title()
        return f"{self.name_prefix} {index + 1} - {label}"
