"""Data models for the periodization engine."""

from periodization_engine.models.enums import (
    LoadLevel,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
    Weekday,
)
from periodization_engine.models.plan import Day, Phase, Plan, Week
from periodization_engine.models.context import TrainingContext
from periodization_engine.models.progression import LoadPrescription, ProgressionWeek
from periodization_engine.models.template import PhasePatternItem, PlanTemplate

__all__ = [
    "Day",
    "LoadLevel",
    "LoadPrescription",
    "PeriodizationStrategy",
    "Phase",
    "PhasePatternItem",
    "PhaseType",
    "Plan",
    "PlanTemplate",
    "ProgressionWeek",
    "StrengthProfile",
    "TrainingContext",
    "Week",
    "Weekday",
]
