"""Training context resolver — "where am I in my program today?"

Given a date and an optional owner, finds the active plan and the phase,
week and day containing that date. Every miss is a normal outcome (the
program has not started, is over, or the plan is malformed) and returns
None; nothing here raises for a lookup miss.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from uuid import UUID

from periodization_engine.exceptions import RepositoryError
from periodization_engine.math.calendar import as_date
from periodization_engine.math.load_progression import progressive_load_percentage
from periodization_engine.models.context import TrainingContext
from periodization_engine.models.plan import Day, Phase, Plan, Week
from periodization_engine.models.progression import LoadPrescription
from periodization_engine.repository import PlanRepository

logger = logging.getLogger(__name__)


def find_phase(plan: Plan, on: date) -> Phase | None:
    """Phase of *plan* whose date range contains *on*.

    Ranges are inclusive at both ends and the first phase in order that
    contains *on* wins, so a date shared by two adjacent phases (one's end,
    the next one's start) belongs to the earlier phase.
    """
    return _containing(plan.sorted_phases, on)


def find_week(phase: Phase, on: date) -> Week | None:
    """Week of *phase* whose date range contains *on* (first match wins)."""
    return _containing(phase.sorted_weeks, on)


def find_day(week: Week, on: date) -> Day | None:
    """Day of *week* falling on the same calendar day as *on*."""
    for day in week.days:
        if day.date == on:
            return day
    return None


def _containing(units, on: date):
    for unit in units:
        if unit.start_date <= on <= unit.end_date:
            return unit
    return None


class TrainingContextResolver:
    """Resolves the current TrainingContext from a plan repository.

    Usage:
        resolver = TrainingContextResolver(repository)
        context = resolver.current_context(date.today(), user_id=user.id)
        if context is not None:
            load = resolver.modulated_load(75.0, context, one_rep_max=140.0)
    """

    def __init__(self, repository: PlanRepository) -> None:
        self.repository = repository

    def current_context(
        self,
        on: date | datetime,
        user_id: UUID | None = None,
        client_id: UUID | None = None,
    ) -> TrainingContext | None:
        """Resolve the training context for a moment in time.

        Args:
            on: Date (or datetime, compared by calendar day) to resolve.
            user_id: Only consider plans owned by this user.
            client_id: Only consider plans owned by this client. Ignored when
                *user_id* is given.

        Returns:
            The TrainingContext, or None when no active plan, phase or week
            contains *on*. A context without a matching day is still valid.
        """
        on = as_date(on)

        plan = self.find_active_plan(on, user_id=user_id, client_id=client_id)
        if plan is None:
            logger.debug("No active plan on %s", on)
            return None

        phase = find_phase(plan, on)
        if phase is None:
            logger.debug("Plan %r has no phase containing %s", plan.name, on)
            return None

        week = find_week(phase, on)
        if week is None:
            logger.debug("%s has no week containing %s", phase.name, on)
            return None

        day = find_day(week, on)

        return TrainingContext(
            plan=plan,
            phase=phase,
            week=week,
            day=day,
            focus_profile=phase.focus_profile,
            load_level=week.load_level,
            intensity_factor=week.intensity_factor,
            volume_factor=week.volume_factor,
        )

    def find_active_plan(
        self,
        on: date,
        user_id: UUID | None = None,
        client_id: UUID | None = None,
    ) -> Plan | None:
        """First active plan containing *on* that matches the owner filter.

        Plans are considered most recently started first. A store failure is
        logged and treated as "no plan".
        """
        try:
            plans = self.repository.find_active_plans(on)
        except RepositoryError as exc:
            logger.warning("Plan lookup for %s failed: %s", on, exc)
            return None

        for plan in plans:
            if user_id is not None:
                if plan.user_id == user_id:
                    return plan
            elif client_id is not None:
                if plan.client_id == client_id:
                    return plan
            else:
                return plan
        return None

    def modulated_load(
        self,
        base_percentage: float,
        context: TrainingContext,
        one_rep_max: float | None = None,
    ) -> LoadPrescription:
        """Progress a %1RM prescription for the context's week and phase."""
        return progressive_load_percentage(
            base_percentage, context.week, context.phase, one_rep_max
        )
