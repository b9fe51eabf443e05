"""Reusable plan templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from periodization_engine.models.enums import (
    DEFAULT_LOAD_PROGRESSION_PCT,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
)


@dataclass(frozen=True)
class PhasePatternItem:
    """Shape of one phase captured in a template."""

    order: int
    phase_type: PhaseType
    focus_profile: StrengthProfile
    load_weeks: int
    deload_weeks: int


@dataclass
class PlanTemplate:
    """Saved plan configuration that new plans can be created from.

    ``usage_count`` is bumped each time a plan is created from the template.
    """

    name: str
    strategy: PeriodizationStrategy
    primary_profile: StrengthProfile
    weekly_frequency: int
    recommended_duration_weeks: int
    secondary_profile: StrengthProfile | None = None
    description: str | None = None
    phase_pattern: tuple[PhasePatternItem, ...] = field(default_factory=tuple)
    auto_progression_enabled: bool = True
    base_progression_pct: float = DEFAULT_LOAD_PROGRESSION_PCT
    is_public: bool = False
    created_by_user_id: UUID | None = None
    created_by_client_id: UUID | None = None
    usage_count: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def __post_init__(self) -> None:
        if self.recommended_duration_weeks < 1:
            raise ValueError(
                f"Template duration must be at least 1 week, "
                f"got {self.recommended_duration_weeks}"
            )

    def increment_usage(self) -> None:
        self.usage_count += 1
