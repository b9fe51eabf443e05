"""Linear periodization: accumulation → intensification → transformation.

The three phase types repeat in order for plans longer than three phases.
Every phase trains the plan's primary strength profile.
"""

from __future__ import annotations

from periodization_engine.models.enums import (
    LINEAR_PHASE_SEQUENCE,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)
from periodization_engine.models.plan import Plan
from periodization_engine.strategies.base import PhaseStrategy


class LinearStrategy(PhaseStrategy):
    strategy = PeriodizationStrategy.LINEAR

    def phase_type_for(self, index: int, plan: Plan) -> PhaseType:
        return LINEAR_PHASE_SEQUENCE[index % len(LINEAR_PHASE_SEQUENCE)]

    def focus_for(self, index: int, plan: Plan) -> StrengthProfile:
        return plan.primary_profile
