"""Periodization engine: plan structure generation, load progression and
training-context resolution for multi-week strength programs."""

from periodization_engine.models import (
    Day,
    LoadLevel,
    LoadPrescription,
    PeriodizationStrategy,
    Phase,
    PhaseType,
    Plan,
    ProgressionWeek,
    StrengthProfile,
    TrainingContext,
    Week,
    Weekday,
)
from periodization_engine.exceptions import (
    InvalidLoadError,
    PeriodizationError,
    RegenerationError,
    RepositoryError,
    StructureInvariantError,
    UnknownStrategyError,
)
from periodization_engine.generator import PeriodizationGenerator, clear_structure
from periodization_engine.repository import InMemoryPlanRepository, PlanRepository
from periodization_engine.resolver import TrainingContextResolver

__all__ = [
    "Day",
    "InMemoryPlanRepository",
    "InvalidLoadError",
    "LoadLevel",
    "LoadPrescription",
    "PeriodizationError",
    "PeriodizationGenerator",
    "PeriodizationStrategy",
    "Phase",
    "PhaseType",
    "Plan",
    "PlanRepository",
    "ProgressionWeek",
    "RegenerationError",
    "RepositoryError",
    "StrengthProfile",
    "StructureInvariantError",
    "TrainingContext",
    "TrainingContextResolver",
    "UnknownStrategyError",
    "Week",
    "Weekday",
    "clear_structure",
]
