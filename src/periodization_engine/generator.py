"""Periodization structure generator: Plan → Phase → Week → Day.

Generation is best-effort. A unit whose dates cannot be computed is skipped
and recorded in the result instead of failing the whole plan; callers that
need completeness check ``GenerationResult.is_complete``.
"""

from __future__ import annotations

import dataclasses
import logging

from periodization_engine import config
from periodization_engine.exceptions import RegenerationError, StructureInvariantError
from periodization_engine.math.calendar import add_days, add_weeks, weekday_index
from periodization_engine.models.enums import (
    DAYS_PER_WEEK,
    DEFAULT_TRAINING_DAYS,
    FALLBACK_TRAINING_DAYS,
    LoadLevel,
    Weekday,
)
from periodization_engine.models.generation import GenerationResult, SkippedUnit
from periodization_engine.models.plan import Day, Phase, Plan, Week
from periodization_engine.registry import StrategyRegistry

logger = logging.getLogger(__name__)


def default_training_days(weekly_frequency: int) -> tuple[Weekday, ...]:
    """Default training weekdays for a weekly session count."""
    return DEFAULT_TRAINING_DAYS.get(weekly_frequency, FALLBACK_TRAINING_DAYS)


def clear_structure(plan: Plan) -> Plan:
    """Return a copy of *plan* without phases, ready to be generated again."""
    return dataclasses.replace(plan, phases=[])


def check_phase_invariants(phase: Phase, weeks_skipped: bool = False) -> list[str]:
    """Describe every structural invariant *phase* breaks (empty if none).

    When *weeks_skipped* is set, fewer weeks than the load/deload split are
    expected; the shortfall is already reported as skipped units.
    """
    problems: list[str] = []
    if phase.deload_weeks < 1:
        problems.append(f"{phase.name}: no deload week")
    expected = phase.load_weeks + phase.deload_weeks
    if len(phase.weeks) > expected or (
        not weeks_skipped and len(phase.weeks) != expected
    ):
        problems.append(
            f"{phase.name}: {phase.load_weeks} load + {phase.deload_weeks} deload "
            f"weeks but {len(phase.weeks)} generated"
        )
    for week in phase.weeks:
        if week.order > phase.load_weeks and week.load_level != LoadLevel.LOW:
            problems.append(
                f"{phase.name}: deload week {week.order} has load level "
                f"{week.load_level.name}"
            )
    return problems


class PeriodizationGenerator:
    """Builds the full Phase/Week/Day tree for a plan definition.

    Usage:
        generator = PeriodizationGenerator()
        result = generator.generate(plan)
        store.save(result.plan)

    Args:
        registry: Strategy registry. Defaults to one populated by discovery.
        strict: Raise StructureInvariantError on an invariant violation
            instead of logging it. Defaults to the configured value.
    """

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        strict: bool | None = None,
    ) -> None:
        self.registry = registry or StrategyRegistry()
        self.strict = config.STRICT_INVARIANTS if strict is None else strict

        if registry is None:
            self.registry.discover_strategies()

    def generate(
        self, plan: Plan, phase_duration_weeks: int | None = None
    ) -> GenerationResult:
        """Generate phases, weeks and days for *plan*.

        The input plan is not modified; the result carries a copy with the
        built tree attached, so nothing partial is ever visible.

        Args:
            plan: Plan definition without existing structure.
            phase_duration_weeks: Nominal phase length (minimum 1). Defaults
                to the configured PERIODIZATION_PHASE_WEEKS.

        Returns:
            GenerationResult with the plan and any skipped units/violations.

        Raises:
            RegenerationError: If *plan* already has phases.
            StructureInvariantError: In strict mode, if a phase breaks an
                invariant.
        """
        if plan.has_structure:
            raise RegenerationError(plan.name, len(plan.phases))

        if phase_duration_weeks is None:
            phase_duration_weeks = config.PHASE_DURATION_WEEKS

        skipped: list[SkippedUnit] = []
        violations: list[str] = []

        strategy = self.registry.get(plan.strategy)
        phases = strategy.build_phases(plan, phase_duration_weeks, skipped)

        selected_days = (
            plan.training_days
            if plan.has_training_days_configured
            else default_training_days(plan.weekly_frequency)
        )

        week_number = 1
        for phase in phases:
            skipped_before = len(skipped)
            phase.weeks = self.generate_weeks(phase, week_number, skipped)
            week_number += len(phase.weeks)
            weeks_skipped = len(skipped) > skipped_before

            for week in phase.weeks:
                week.days = self.generate_days(week, selected_days, skipped)

            problems = check_phase_invariants(phase, weeks_skipped)
            if problems:
                if self.strict:
                    raise StructureInvariantError("; ".join(problems))
                for problem in problems:
                    logger.error("Structure invariant violated: %s", problem)
                violations.extend(problems)

        built = dataclasses.replace(plan, phases=phases)
        result = GenerationResult(
            plan=built,
            skipped=tuple(skipped),
            violations=tuple(violations),
        )
        logger.info(
            "Generated %s plan %r: %d phases, %d weeks, %d days (%d skipped)",
            plan.strategy.name.lower(),
            plan.name,
            result.phase_count,
            result.week_count,
            result.day_count,
            len(skipped),
        )
        return result

    def generate_weeks(
        self,
        phase: Phase,
        start_week_number: int = 1,
        skipped: list[SkippedUnit] | None = None,
    ) -> list[Week]:
        """Generate the weeks of a phase.

        The last ``deload_weeks`` weeks are deload weeks (load level LOW);
        load weeks alternate HIGH, MEDIUM, HIGH, … Absolute week numbers
        continue from *start_week_number*.
        """
        weeks: list[Week] = []
        current = phase.start_date
        week_number = start_week_number

        for index in range(phase.duration_in_weeks):
            is_deload = index >= phase.load_weeks
            if is_deload:
                load_level = LoadLevel.LOW
            else:
                load_level = LoadLevel.HIGH if index % 2 == 0 else LoadLevel.MEDIUM

            try:
                end = add_weeks(current, 1)
            except OverflowError as exc:
                reason = f"end date out of range: {exc}"
                logger.warning("Skipping week %d of %s: %s", index + 1, phase.name, reason)
                if skipped is not None:
                    skipped.append(
                        SkippedUnit("week", index, reason, parent_order=phase.order)
                    )
                continue

            weeks.append(
                Week(
                    order=index + 1,
                    week_number=week_number,
                    start_date=current,
                    end_date=end,
                    load_level=load_level,
                )
            )
            current = end
            week_number += 1

        return weeks

    def generate_days(
        self,
        week: Week,
        training_days: tuple[Weekday, ...],
        skipped: list[SkippedUnit] | None = None,
    ) -> list[Day]:
        """Generate the seven days of a week.

        A day is a training day when its calendar weekday is in
        *training_days*, otherwise a rest day.
        """
        days: list[Day] = []
        for offset in range(DAYS_PER_WEEK):
            try:
                on = add_days(week.start_date, offset)
            except OverflowError as exc:
                reason = f"date out of range: {exc}"
                logger.warning(
                    "Skipping day %d of week %d: %s", offset + 1, week.week_number, reason
                )
                if skipped is not None:
                    skipped.append(
                        SkippedUnit("day", offset, reason, parent_order=week.week_number)
                    )
                continue

            weekday = weekday_index(on)
            days.append(
                Day(date=on, weekday=weekday, is_rest_day=weekday not in training_days)
            )
        return days
