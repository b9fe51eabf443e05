"""Shared test fixtures: plan definitions, generated plans, weeks, repositories."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable
from uuid import uuid4

import pytest

from periodization_engine.generator import PeriodizationGenerator
from periodization_engine.models.enums import (
    LoadLevel,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)
from periodization_engine.models.plan import Phase, Plan, Week

# Monday
PLAN_START = date(2026, 1, 5)


@pytest.fixture
def plan_start() -> date:
    """A Monday."""
    return PLAN_START


@pytest.fixture
def plan_factory() -> Callable[..., Plan]:
    """Factory fixture for unstructured plan definitions.

    Usage:
        plan = plan_factory(weeks=16, strategy=PeriodizationStrategy.BLOCK)
    """

    def factory(
        weeks: int = 12,
        start: date = PLAN_START,
        strategy: PeriodizationStrategy = PeriodizationStrategy.LINEAR,
        primary: StrengthProfile = StrengthProfile.MAX_STRENGTH,
        secondary: StrengthProfile | None = None,
        frequency: int = 3,
        **overrides,
    ) -> Plan:
        name = overrides.pop("name", f"{weeks}-week {strategy.name.lower()}")
        end_date = overrides.pop("end_date", start + timedelta(weeks=weeks))
        return Plan(
            name=name,
            start_date=start,
            end_date=end_date,
            strategy=strategy,
            primary_profile=primary,
            secondary_profile=secondary,
            weekly_frequency=frequency,
            **overrides,
        )

    return factory


@pytest.fixture
def generator() -> PeriodizationGenerator:
    """Strict generator: any invariant violation fails the test loudly."""
    return PeriodizationGenerator(strict=True)


@pytest.fixture
def linear_plan_12w(plan_factory, generator) -> Plan:
    """12-week linear plan starting on a Monday, generated with 4-week phases."""
    return generator.generate(plan_factory(weeks=12), phase_duration_weeks=4).plan


@pytest.fixture
def owned_plans(plan_factory, generator) -> dict:
    """Two overlapping generated plans owned by different people.

    The client's plan starts a week later, so it is the most recently
    started one on any date both cover.
    """
    user_id = uuid4()
    client_id = uuid4()
    user_plan = generator.generate(
        plan_factory(weeks=12, name="User plan", user_id=user_id)
    ).plan
    client_plan = generator.generate(
        plan_factory(
            weeks=12,
            start=PLAN_START + timedelta(weeks=1),
            name="Client plan",
            client_id=client_id,
        )
    ).plan
    return {
        "user_id": user_id,
        "client_id": client_id,
        "user_plan": user_plan,
        "client_plan": client_plan,
    }


@pytest.fixture
def week_factory() -> Callable[..., Week]:
    """Factory fixture for standalone weeks used by calculator tests."""

    def factory(
        order: int = 1,
        load_level: LoadLevel = LoadLevel.MEDIUM,
        intensity_factor: float | None = 1.0,
        volume_factor: float | None = 1.0,
        load_progression_pct: float = 0.025,
    ) -> Week:
        start = PLAN_START + timedelta(weeks=order - 1)
        return Week(
            order=order,
            week_number=order,
            start_date=start,
            end_date=start + timedelta(weeks=1),
            load_level=load_level,
            intensity_factor=intensity_factor,
            volume_factor=volume_factor,
            load_progression_pct=load_progression_pct,
        )

    return factory


@pytest.fixture
def accumulation_phase() -> Phase:
    """Four-week accumulation phase without weeks attached."""
    return Phase(
        order=1,
        name="Phase 1 - Accumulation",
        start_date=PLAN_START,
        end_date=PLAN_START + timedelta(weeks=4),
        phase_type=PhaseType.ACCUMULATION,
        focus_profile=StrengthProfile.HYPERTROPHY,
        load_weeks=3,
        deload_weeks=1,
    )
