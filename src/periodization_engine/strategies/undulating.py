"""Undulating periodization: accumulation and intensification alternate.

Reference:
    Rhea et al. (2002). A comparison of linear and daily undulating
        periodized programs with equated volume and intensity for strength.
        J Strength Cond Res 16(2):250-255.
"""

from __future__ import annotations

from periodization_engine.models.enums import (
    UNDULATING_PHASE_SEQUENCE,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)
from periodization_engine.models.plan import Plan
from periodization_engine.strategies.base import PhaseStrategy


class UndulatingStrategy(PhaseStrategy):
    strategy = PeriodizationStrategy.UNDULATING

    def phase_type_for(self, index: int, plan: Plan) -> PhaseType:
        return UNDULATING_PHASE_SEQUENCE[index % len(UNDULATING_PHASE_SEQUENCE)]

    def focus_for(self, index: int, plan: Plan) -> StrengthProfile:
        return plan.primary_profile
