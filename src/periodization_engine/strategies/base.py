"""Abstract base class for periodization strategies."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from periodization_engine.math.calendar import add_weeks
from periodization_engine.models.enums import (
    DELOAD_WEEKS_PER_PHASE,
    MIN_PHASE_DURATION_WEEKS,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)
from periodization_engine.models.generation import SkippedUnit
from periodization_engine.models.plan import Phase, Plan

logger = logging.getLogger(__name__)


class PhaseStrategy(ABC):
    """Splits a plan's date range into phases.

    Subclasses must define:
        strategy: the PeriodizationStrategy they implement
        name_prefix: label used in generated phase names ("Phase", "Block")
        phase_type_for(): phase type of the phase at a zero-based index
        focus_for(): focus profile of the phase at a zero-based index

    ``build_phases()`` is shared: it sizes the phases, clips the last one to
    the plan's remaining weeks and assigns the load/deload week split. Weeks
    and days are filled in by the generator.
    """

    strategy: PeriodizationStrategy
    name_prefix: str = "Phase"

    @abstractmethod
    def phase_type_for(self, index: int, plan: Plan) -> PhaseType:
        ...

    @abstractmethod
    def focus_for(self, index: int, plan: Plan) -> StrengthProfile:
        ...

    def phase_name(self, index: int, phase_type: PhaseType, focus: StrengthProfile) -> str:
        return f"{self.name_prefix} {index + 1} - {phase_type.name.title()}"

    def build_phases(
        self,
        plan: Plan,
        phase_duration_weeks: int,
        skipped: list[SkippedUnit] | None = None,
    ) -> list[Phase]:
        """Build the (still empty) phases of *plan*.

        Args:
            plan: Plan definition; only dates, profiles and strategy are read.
            phase_duration_weeks: Nominal phase length in weeks (minimum 1).
            skipped: Optional collector for phases that could not be built.

        Returns:
            Phases in chronological order, each contiguous with the next.

        Each phase gets one deload week and ``weeks - 1`` load weeks, with no
        floor of one load week: a one-week remainder becomes a pure deload
        week, so load + deload always equals the weeks in the phase.

        Raises:
            ValueError: If *phase_duration_weeks* is below the minimum.
        """
        if phase_duration_weeks < MIN_PHASE_DURATION_WEEKS:
            raise ValueError(
                f"Phase duration must be at least {MIN_PHASE_DURATION_WEEKS} "
                f"week(s), got {phase_duration_weeks}"
            )

        total_weeks = plan.duration_in_weeks
        phase_count = max(1, math.ceil(total_weeks / phase_duration_weeks))

        phases: list[Phase] = []
        current = plan.start_date

        for index in range(phase_count):
            weeks_in_phase = min(
                phase_duration_weeks, total_weeks - index * phase_duration_weeks
            )
            if weeks_in_phase <= 0:
                self._skip(skipped, index, f"no weeks remain ({weeks_in_phase})")
                continue

            try:
                end = add_weeks(current, weeks_in_phase)
            except OverflowError as exc:
                self._skip(skipped, index, f"end date out of range: {exc}")
                continue

            phase_type = self.phase_type_for(index, plan)
            focus = self.focus_for(index, plan)
            deload_weeks = DELOAD_WEEKS_PER_PHASE
            # A one-week remainder is a pure deload week
            load_weeks = weeks_in_phase - deload_weeks

            phases.append(
                Phase(
                    order=index + 1,
                    name=self.phase_name(index, phase_type, focus),
                    start_date=current,
                    end_date=end,
                    phase_type=phase_type,
                    focus_profile=focus,
                    load_weeks=load_weeks,
                    deload_weeks=deload_weeks,
                )
            )
            current = end

        return phases

    @staticmethod
    def _skip(skipped: list[SkippedUnit] | None, index: int, reason: str) -> None:
        logger.warning("Skipping phase %d: %s", index + 1, reason)
        if skipped is not None:
            skipped.append(SkippedUnit(level="phase", index=index, reason=reason))
