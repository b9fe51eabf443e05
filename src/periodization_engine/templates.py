"""Plan templates: create plans from saved configurations and save new ones."""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from periodization_engine.math.calendar import add_weeks
from periodization_engine.models.plan import Plan
from periodization_engine.models.template import PhasePatternItem, PlanTemplate

logger = logging.getLogger(__name__)


def create_plan_from_template(
    template: PlanTemplate,
    start_date: date,
    user_id: UUID | None = None,
    client_id: UUID | None = None,
) -> Plan:
    """Create an unstructured plan from a template.

    The plan runs for the template's recommended duration; pass it to the
    generator to build phases. The template's usage counter is incremented.

    Raises:
        OverflowError: If the end date falls outside the supported range.
    """
    plan = Plan(
        name=template.name,
        start_date=start_date,
        end_date=add_weeks(start_date, template.recommended_duration_weeks),
        strategy=template.strategy,
        primary_profile=template.primary_profile,
        secondary_profile=template.secondary_profile,
        weekly_frequency=template.weekly_frequency,
        notes=template.description,
        template_id=template.id,
        user_id=user_id,
        client_id=client_id,
    )
    template.increment_usage()
    logger.info(
        "Created plan %r from template (used %d times)", plan.name, template.usage_count
    )
    return plan


def save_plan_as_template(
    plan: Plan, name: str, description: str | None = None
) -> PlanTemplate:
    """Capture a plan's configuration, and its phase layout if built, as a template."""
    pattern = tuple(
        PhasePatternItem(
            order=phase.order,
            phase_type=phase.phase_type,
            focus_profile=phase.focus_profile,
            load_weeks=phase.load_weeks,
            deload_weeks=phase.deload_weeks,
        )
        for phase in plan.sorted_phases
    )
    return PlanTemplate(
        name=name,
        description=description,
        strategy=plan.strategy,
        primary_profile=plan.primary_profile,
        secondary_profile=plan.secondary_profile,
        weekly_frequency=plan.weekly_frequency,
        recommended_duration_weeks=max(1, plan.duration_in_weeks),
        phase_pattern=pattern,
        created_by_user_id=plan.user_id,
        created_by_client_id=plan.client_id,
    )
