"""JSON serialization for plan trees and template phase patterns.

Plans are exported as plain dicts for the external store to persist and
read back. Enums are written by name, dates as ISO strings. All functions
are pure (no I/O).
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from uuid import UUID

from periodization_engine.models.enums import (
    LoadLevel,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
    Weekday,
)
from periodization_engine.models.plan import Day, Phase, Plan, Week
from periodization_engine.models.template import PhasePatternItem

logger = logging.getLogger(__name__)


def plan_to_dict(plan: Plan) -> dict:
    """Convert a Plan and its whole tree to a JSON-compatible dict."""
    return {
        "id": str(plan.id),
        "name": plan.name,
        "startDate": plan.start_date.isoformat(),
        "endDate": plan.end_date.isoformat(),
        "strategy": plan.strategy.name,
        "primaryProfile": plan.primary_profile.name,
        "secondaryProfile": _name_or_none(plan.secondary_profile),
        "weeklyFrequency": plan.weekly_frequency,
        "trainingDays": [int(d) for d in plan.training_days],
        "isActive": plan.is_active,
        "userId": _str_or_none(plan.user_id),
        "clientId": _str_or_none(plan.client_id),
        "templateId": _str_or_none(plan.template_id),
        "notes": plan.notes,
        "phases": [_phase_to_dict(p) for p in plan.sorted_phases],
    }


def plan_to_json_string(plan: Plan, indent: int = 2) -> str:
    """Convert a Plan to a JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent)


def plan_from_dict(data: dict) -> Plan:
    """Rebuild a Plan tree from ``plan_to_dict()`` output.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If a date or enum name is invalid.
    """
    plan = Plan(
        id=UUID(data["id"]),
        name=data["name"],
        start_date=date.fromisoformat(data["startDate"]),
        end_date=date.fromisoformat(data["endDate"]),
        strategy=_enum(PeriodizationStrategy, data["strategy"]),
        primary_profile=_enum(StrengthProfile, data["primaryProfile"]),
        secondary_profile=(
            _enum(StrengthProfile, data["secondaryProfile"])
            if data.get("secondaryProfile")
            else None
        ),
        weekly_frequency=data["weeklyFrequency"],
        training_days=tuple(Weekday(d) for d in data.get("trainingDays", ())),
        is_active=data.get("isActive", True),
        user_id=_uuid_or_none(data.get("userId")),
        client_id=_uuid_or_none(data.get("clientId")),
        template_id=_uuid_or_none(data.get("templateId")),
        notes=data.get("notes"),
    )
    plan.phases = [_phase_from_dict(p) for p in data.get("phases", ())]
    return plan


# ---------------------------------------------------------------------------
# Template phase patterns
# ---------------------------------------------------------------------------


def encode_phase_pattern(pattern: tuple[PhasePatternItem, ...] | list[PhasePatternItem]) -> str:
    """Encode a template's phase pattern as a JSON string."""
    return json.dumps(
        [
            {
                "order": item.order,
                "phaseType": item.phase_type.name,
                "focusProfile": item.focus_profile.name,
                "loadWeeks": item.load_weeks,
                "deloadWeeks": item.deload_weeks,
            }
            for item in pattern
        ],
        indent=2,
    )


def decode_phase_pattern(encoded: str | None) -> tuple[PhasePatternItem, ...] | None:
    """Decode a phase pattern string; None if absent or malformed."""
    if not encoded:
        return None
    try:
        raw = json.loads(encoded)
        return tuple(
            PhasePatternItem(
                order=item["order"],
                phase_type=_enum(PhaseType, item["phaseType"]),
                focus_profile=_enum(StrengthProfile, item["focusProfile"]),
                load_weeks=item["loadWeeks"],
                deload_weeks=item["deloadWeeks"],
            )
            for item in raw
        )
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("Discarding malformed phase pattern: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _phase_to_dict(phase: Phase) -> dict:
    return {
        "order": phase.order,
        "name": phase.name,
        "startDate": phase.start_date.isoformat(),
        "endDate": phase.end_date.isoformat(),
        "phaseType": phase.phase_type.name,
        "focusProfile": phase.focus_profile.name,
        "loadWeeks": phase.load_weeks,
        "deloadWeeks": phase.deload_weeks,
        "notes": phase.notes,
        "weeks": [_week_to_dict(w) for w in phase.sorted_weeks],
    }


def _week_to_dict(week: Week) -> dict:
    return {
        "order": week.order,
        "weekNumber": week.week_number,
        "startDate": week.start_date.isoformat(),
        "endDate": week.end_date.isoformat(),
        "loadLevel": week.load_level.name,
        "intensityFactor": week.intensity_factor,
        "volumeFactor": week.volume_factor,
        "loadProgressionPct": week.load_progression_pct,
        "isDeload": week.is_deload,
        "notes": week.notes,
        "days": [_day_to_dict(d) for d in week.sorted_days],
    }


def _day_to_dict(day: Day) -> dict:
    return {
        "date": day.date.isoformat(),
        "weekday": int(day.weekday),
        "isRestDay": day.is_rest_day,
        "workoutId": _str_or_none(day.workout_id),
        "completed": day.completed,
        "completedAt": day.completed_at.isoformat() if day.completed_at else None,
        "notes": day.notes,
    }


def _phase_from_dict(data: dict) -> Phase:
    return Phase(
        order=data["order"],
        name=data["name"],
        start_date=date.fromisoformat(data["startDate"]),
        end_date=date.fromisoformat(data["endDate"]),
        phase_type=_enum(PhaseType, data["phaseType"]),
        focus_profile=_enum(StrengthProfile, data["focusProfile"]),
        load_weeks=data["loadWeeks"],
        deload_weeks=data["deloadWeeks"],
        notes=data.get("notes"),
        weeks=[_week_from_dict(w) for w in data.get("weeks", ())],
    )


def _week_from_dict(data: dict) -> Week:
    return Week(
        order=data["order"],
        week_number=data["weekNumber"],
        start_date=date.fromisoformat(data["startDate"]),
        end_date=date.fromisoformat(data["endDate"]),
        load_level=_enum(LoadLevel, data["loadLevel"]),
        intensity_factor=data.get("intensityFactor"),
        volume_factor=data.get("volumeFactor"),
        load_progression_pct=data["loadProgressionPct"],
        notes=data.get("notes"),
        days=[_day_from_dict(d) for d in data.get("days", ())],
    )


def _day_from_dict(data: dict) -> Day:
    completed_at = data.get("completedAt")
    return Day(
        date=date.fromisoformat(data["date"]),
        weekday=Weekday(data["weekday"]),
        is_rest_day=data.get("isRestDay", False),
        workout_id=_uuid_or_none(data.get("workoutId")),
        completed=data.get("completed", False),
        completed_at=datetime.fromisoformat(completed_at) if completed_at else None,
        notes=data.get("notes"),
    )


def _enum(enum_cls, name: str):
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__} {name!r}") from None


def _name_or_none(member) -> str | None:
    return member.name if member is not None else None


def _str_or_none(value: UUID | None) -> str | None:
    return str(value) if value is not None else None


def _uuid_or_none(value: str | None) -> UUID | None:
    return UUID(value) if value else None
