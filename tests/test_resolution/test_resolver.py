"""Tests for training context resolution."""

from __future__ import annotations

import logging
from datetime import date, datetime
from uuid import uuid4

import pytest

from periodization_engine.exceptions import RepositoryError
from periodization_engine.models.enums import LoadLevel, PhaseType, Weekday
from periodization_engine.repository import InMemoryPlanRepository, PlanRepository
from periodization_engine.resolver import (
    TrainingContextResolver,
    find_day,
    find_phase,
    find_week,
)
from periodization_engine.strategies.linear import LinearStrategy


@pytest.fixture
def resolver(linear_plan_12w) -> TrainingContextResolver:
    return TrainingContextResolver(InMemoryPlanRepository([linear_plan_12w]))


class _BrokenRepository(PlanRepository):
    def find_active_plans(self, on):
        raise RepositoryError("connection refused")


class TestCurrentContext:
    def test_midweek_training_day(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 7))
        assert context is not None
        assert context.phase.order == 1
        assert context.week.week_number == 1
        assert context.day is not None
        assert context.day.weekday == Weekday.WEDNESDAY
        assert not context.day.is_rest_day

    def test_rest_day_still_resolves(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 8))
        assert context.day.is_rest_day

    def test_context_copies_week_values(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 7))
        assert context.focus_profile == context.phase.focus_profile
        assert context.load_level == LoadLevel.HIGH
        assert context.intensity_factor == pytest.approx(1.15)
        assert context.volume_factor == pytest.approx(1.2)
        assert not context.is_deload_week

    def test_deload_week(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 28))
        assert context.week.week_number == 4
        assert context.is_deload_week
        assert context.load_level == LoadLevel.LOW

    def test_boundary_date_belongs_to_earlier_phase(self, resolver) -> None:
        context = resolver.current_context(date(2026, 2, 2))
        assert context.phase.order == 1
        assert context.phase.phase_type == PhaseType.ACCUMULATION
        assert context.week.week_number == 4
        assert context.load_level == LoadLevel.LOW
        assert context.intensity_factor == pytest.approx(0.7)
        assert context.day is None

    def test_week_start_resolves_to_previous_week(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 12))
        assert context.week.week_number == 1
        assert context.load_level == LoadLevel.HIGH
        assert context.day is None

    def test_day_after_boundary_resolves_to_next_week(self, resolver) -> None:
        context = resolver.current_context(date(2026, 2, 3))
        assert context.phase.order == 2
        assert context.week.week_number == 5
        assert context.day.date == date(2026, 2, 3)

    def test_plan_end_date_resolves_without_day(self, resolver) -> None:
        context = resolver.current_context(date(2026, 3, 30))
        assert context is not None
        assert context.phase.order == 3
        assert context.week.week_number == 12
        assert context.day is None

    @pytest.mark.parametrize("on", [date(2026, 1, 4), date(2026, 3, 31), date(2027, 1, 1)])
    def test_outside_plan_is_none(self, resolver, on) -> None:
        assert resolver.current_context(on) is None

    def test_datetime_compared_by_calendar_day(self, resolver) -> None:
        context = resolver.current_context(datetime(2026, 1, 7, 18, 30))
        assert context.day.date == date(2026, 1, 7)

    def test_inactive_plan_is_ignored(self, linear_plan_12w) -> None:
        linear_plan_12w.is_active = False
        resolver = TrainingContextResolver(InMemoryPlanRepository([linear_plan_12w]))
        assert resolver.current_context(date(2026, 1, 7)) is None

    def test_plan_without_phases_is_none(self, plan_factory) -> None:
        resolver = TrainingContextResolver(InMemoryPlanRepository([plan_factory()]))
        assert resolver.current_context(date(2026, 1, 7)) is None

    def test_phase_without_weeks_is_none(self, plan_factory) -> None:
        plan = plan_factory()
        plan.phases = LinearStrategy().build_phases(plan, 4)
        resolver = TrainingContextResolver(InMemoryPlanRepository([plan]))
        assert resolver.current_context(date(2026, 1, 7)) is None

    def test_repository_failure_is_none(self, caplog) -> None:
        resolver = TrainingContextResolver(_BrokenRepository())
        with caplog.at_level(logging.WARNING):
            assert resolver.current_context(date(2026, 1, 7)) is None
        assert "connection refused" in caplog.text

    def test_every_day_resolves_to_a_containing_week(self, resolver, linear_plan_12w) -> None:
        for day in linear_plan_12w.iter_days():
            context = resolver.current_context(day.date)
            if context.week.end_date == day.date:
                assert context.day is None
            else:
                assert context.day is day
            assert context.week.contains(day.date)
            assert context.phase.contains(day.date)

    def test_description(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 7))
        assert context.description.splitlines() == [
            "Plan: 12-week linear",
            "Phase: Phase 1 - Accumulation (accumulation)",
            "Week: 1 - high",
            "Focus: max_strength",
            "Intensity: 115% | Volume: 120%",
        ]


class TestOwnerFilter:
    @pytest.fixture
    def resolver(self, owned_plans) -> TrainingContextResolver:
        return TrainingContextResolver(
            InMemoryPlanRepository([owned_plans["user_plan"], owned_plans["client_plan"]])
        )

    def test_no_filter_picks_most_recently_started(self, resolver, owned_plans) -> None:
        context = resolver.current_context(date(2026, 2, 10))
        assert context.plan is owned_plans["client_plan"]

    def test_user_filter(self, resolver, owned_plans) -> None:
        context = resolver.current_context(date(2026, 2, 10), user_id=owned_plans["user_id"])
        assert context.plan is owned_plans["user_plan"]
        assert context.week.week_number == 6

    def test_client_filter(self, resolver, owned_plans) -> None:
        context = resolver.current_context(
            date(2026, 2, 10), client_id=owned_plans["client_id"]
        )
        assert context.plan is owned_plans["client_plan"]
        assert context.week.week_number == 5

    def test_user_filter_takes_precedence(self, resolver, owned_plans) -> None:
        context = resolver.current_context(
            date(2026, 2, 10),
            user_id=owned_plans["user_id"],
            client_id=owned_plans["client_id"],
        )
        assert context.plan is owned_plans["user_plan"]

    def test_unknown_owner_is_none(self, resolver) -> None:
        assert resolver.current_context(date(2026, 2, 10), user_id=uuid4()) is None

    def test_owner_plan_not_started_yet(self, resolver, owned_plans) -> None:
        context = resolver.current_context(date(2026, 1, 7), client_id=owned_plans["client_id"])
        assert context is None


class TestModulatedLoad:
    def test_first_week_applies_intensity(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 7))
        load = resolver.modulated_load(75.0, context)
        assert load.percentage == pytest.approx(86.25)
        assert load.kg is None

    def test_third_week_adds_progression(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 21))
        load = resolver.modulated_load(75.0, context)
        assert load.percentage == pytest.approx(75.0 * 1.05 * 1.15)

    def test_deload_week(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 28))
        assert resolver.modulated_load(75.0, context).percentage == pytest.approx(52.5)

    def test_with_one_rep_max(self, resolver) -> None:
        context = resolver.current_context(date(2026, 1, 7))
        load = resolver.modulated_load(75.0, context, one_rep_max=140.0)
        assert load.kg == pytest.approx(120.75)


class TestContainmentHelpers:
    def test_find_phase_last_phase_keeps_end_date(self, linear_plan_12w) -> None:
        phase = find_phase(linear_plan_12w, linear_plan_12w.end_date)
        assert phase.order == 3

    def test_find_phase_before_start(self, linear_plan_12w) -> None:
        assert find_phase(linear_plan_12w, date(2025, 12, 31)) is None

    def test_find_week_boundary_is_first_match(self, linear_plan_12w) -> None:
        phase = linear_plan_12w.sorted_phases[0]
        assert find_week(phase, date(2026, 1, 12)).order == 1
        assert find_week(phase, date(2026, 1, 13)).order == 2

    def test_find_day_misses_outside_week(self, linear_plan_12w) -> None:
        week = linear_plan_12w.sorted_phases[0].sorted_weeks[0]
        assert find_day(week, date(2026, 1, 12)) is None
        assert find_day(week, date(2026, 1, 11)).weekday == Weekday.SUNDAY
