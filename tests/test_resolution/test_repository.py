"""Tests for the in-memory plan repository."""

from datetime import date, timedelta

from periodization_engine.repository import InMemoryPlanRepository


class TestInMemoryPlanRepository:
    def test_add_and_get(self, plan_factory) -> None:
        plan = plan_factory()
        repository = InMemoryPlanRepository()
        repository.add(plan)
        assert repository.get(plan.id) is plan
        assert len(repository) == 1

    def test_add_replaces_same_id(self, plan_factory, generator) -> None:
        plan = plan_factory()
        repository = InMemoryPlanRepository([plan])
        generated = generator.generate(plan).plan
        repository.add(generated)
        assert len(repository) == 1
        assert repository.get(plan.id) is generated

    def test_remove(self, plan_factory) -> None:
        plan = plan_factory()
        repository = InMemoryPlanRepository([plan])
        repository.remove(plan.id)
        assert repository.get(plan.id) is None
        assert repository.all() == []

    def test_active_plans_most_recent_first(self, plan_factory, plan_start) -> None:
        older = plan_factory(name="older")
        newer = plan_factory(name="newer", start=plan_start + timedelta(weeks=2))
        repository = InMemoryPlanRepository([older, newer])
        assert repository.find_active_plans(date(2026, 2, 1)) == [newer, older]

    def test_active_plans_exclude_inactive_and_out_of_range(self, plan_factory) -> None:
        inactive = plan_factory(name="paused", is_active=False)
        repository = InMemoryPlanRepository([inactive, plan_factory()])
        assert [p.name for p in repository.find_active_plans(date(2026, 1, 7))] == [
            "12-week linear"
        ]
        assert repository.find_active_plans(date(2026, 6, 1)) == []

    def test_plan_end_date_is_inclusive(self, plan_factory) -> None:
        plan = plan_factory(weeks=1)
        repository = InMemoryPlanRepository([plan])
        assert repository.find_active_plans(plan.end_date) == [plan]
