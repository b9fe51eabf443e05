"""Plan repository interface and an in-memory implementation.

The resolver only reads through ``PlanRepository``. Applications backed by
a datastore implement ``find_active_plans`` with a range query; the
in-memory store serves hosts without one and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from periodization_engine.models.plan import Plan


class PlanRepository(ABC):
    """Read access to stored plans."""

    @abstractmethod
    def find_active_plans(self, on: date) -> list[Plan]:
        """Return active plans whose ``[start_date, end_date]`` contains *on*.

        Plans are ordered by ``start_date`` descending (most recently started
        first).

        Raises:
            RepositoryError: If the underlying store cannot be queried.
        """
        ...


class InMemoryPlanRepository(PlanRepository):
    """PlanRepository over a plain list of plans."""

    def __init__(self, plans: list[Plan] | None = None) -> None:
        self._plans: list[Plan] = list(plans or [])

    def add(self, plan: Plan) -> None:
        """Store *plan*, replacing any stored plan with the same id."""
        self.remove(plan.id)
        self._plans.append(plan)

    def remove(self, plan_id: UUID) -> None:
        self._plans = [p for p in self._plans if p.id != plan_id]

    def get(self, plan_id: UUID) -> Plan | None:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def all(self) -> list[Plan]:
        return list(self._plans)

    def find_active_plans(self, on: date) -> list[Plan]:
        active = [p for p in self._plans if p.is_currently_active(on)]
        return sorted(active, key=lambda p: p.start_date, reverse=True)

    def __len__(self) -> int:
        return len(self._plans)
