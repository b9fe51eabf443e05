"""Plan → Phase → Week → Day records.

These are the persisted entities. The generator builds them, an external
store saves them, and an editing UI may adjust factors and names in place.
The engine itself never edits an existing tree. Children are owned by their
parent and hold no back-references; a TrainingContext carries the chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from periodization_engine.math.calendar import (
    days_between,
    progress_between,
    weeks_spanned,
)
from periodization_engine.models.enums import (
    DEFAULT_INTENSITY_FACTOR,
    DEFAULT_LOAD_PROGRESSION_PCT,
    DEFAULT_VOLUME_FACTOR,
    LoadLevel,
    PeriodizationStrategy,
    PhaseType,
    StrengthProfile,
    Weekday,
)


@dataclass
class Day:
    """One calendar date inside a week: a rest day or a workout slot."""

    date: date
    weekday: Weekday
    is_rest_day: bool = False
    workout_id: UUID | None = None  # external workout definition, opaque here
    completed: bool = False
    completed_at: datetime | None = None
    notes: str | None = None

    def mark_completed(self, at: datetime | None = None) -> None:
        self.completed = True
        self.completed_at = at or datetime.now()

    def mark_incomplete(self) -> None:
        self.completed = False
        self.completed_at = None

    def is_past(self, today: date | None = None) -> bool:
        return self.date < (today or date.today())

    def is_today(self, today: date | None = None) -> bool:
        return self.date == (today or date.today())

    def is_future(self, today: date | None = None) -> bool:
        return self.date > (today or date.today())


@dataclass
class Week:
    """A micro-cycle: one calendar week carrying load/volume modulation.

    Intensity and volume factors default to the load level's values when
    not supplied. Factors are not range-checked (typically 0.5-1.2).
    """

    order: int  # 1-indexed within the phase
    week_number: int  # 1-indexed within the whole plan
    start_date: date
    end_date: date
    load_level: LoadLevel
    intensity_factor: float | None = None
    volume_factor: float | None = None
    load_progression_pct: float = DEFAULT_LOAD_PROGRESSION_PCT
    notes: str | None = None
    days: list[Day] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.intensity_factor is None:
            self.intensity_factor = DEFAULT_INTENSITY_FACTOR[self.load_level]
        if self.volume_factor is None:
            self.volume_factor = DEFAULT_VOLUME_FACTOR[self.load_level]

    @property
    def is_deload(self) -> bool:
        return self.load_level == LoadLevel.LOW

    @property
    def sorted_days(self) -> list[Day]:
        return sorted(self.days, key=lambda d: d.date)

    def contains(self, on: date) -> bool:
        return self.start_date <= on <= self.end_date

    @property
    def completed_days(self) -> int:
        """Completed training days (rest days excluded)."""
        return sum(1 for d in self.days if not d.is_rest_day and d.completed)

    @property
    def total_planned_days(self) -> int:
        return sum(1 for d in self.days if not d.is_rest_day)

    @property
    def completion_percentage(self) -> float:
        if self.total_planned_days == 0:
            return 0.0
        return self.completed_days / self.total_planned_days * 100.0

    @property
    def assigned_workout_count(self) -> int:
        """Training days with a workout assigned."""
        return sum(
            1 for d in self.days if not d.is_rest_day and d.workout_id is not None
        )

    @property
    def has_all_workouts_assigned(self) -> bool:
        return self.assigned_workout_count == self.total_planned_days

    @property
    def has_any_workout_assigned(self) -> bool:
        return self.assigned_workout_count > 0


@dataclass
class Phase:
    """A mesocycle: several weeks sharing one phase type and focus profile."""

    order: int  # 1-indexed within the plan
    name: str
    start_date: date
    end_date: date
    phase_type: PhaseType
    focus_profile: StrengthProfile
    load_weeks: int = 3
    deload_weeks: int = 1
    notes: str | None = None
    weeks: list[Week] = field(default_factory=list, repr=False)

    @property
    def duration_in_weeks(self) -> int:
        return self.load_weeks + self.deload_weeks

    @property
    def duration_in_days(self) -> int:
        return days_between(self.start_date, self.end_date)

    @property
    def has_deload_week(self) -> bool:
        return self.deload_weeks >= 1

    @property
    def sorted_weeks(self) -> list[Week]:
        return sorted(self.weeks, key=lambda w: w.order)

    def contains(self, on: date) -> bool:
        return self.start_date <= on <= self.end_date

    def is_currently_active(self, on: date) -> bool:
        return self.contains(on)

    def progress_percentage(self, on: date) -> float:
        return progress_between(self.start_date, self.end_date, on)


@dataclass
class Plan:
    """A full periodized training program over a fixed date range.

    ``training_days`` holds the weekdays the trainee actually trains on;
    when empty, generation falls back to a default pattern for
    ``weekly_frequency``. ``user_id`` and ``client_id`` identify the owner.
    """

    name: str
    start_date: date
    end_date: date
    strategy: PeriodizationStrategy
    primary_profile: StrengthProfile
    weekly_frequency: int
    secondary_profile: StrengthProfile | None = None
    training_days: tuple[Weekday, ...] = field(default_factory=tuple)
    is_active: bool = True
    user_id: UUID | None = None
    client_id: UUID | None = None
    notes: str | None = None
    template_id: UUID | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now, compare=False)
    phases: list[Phase] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError(
                f"Plan end date {self.end_date} is before start date {self.start_date}"
            )
        self.training_days = tuple(sorted(Weekday(d) for d in self.training_days))

    @property
    def duration_in_days(self) -> int:
        return days_between(self.start_date, self.end_date)

    @property
    def duration_in_weeks(self) -> int:
        return weeks_spanned(self.start_date, self.end_date)

    @property
    def has_training_days_configured(self) -> bool:
        return len(self.training_days) > 0

    @property
    def has_structure(self) -> bool:
        return len(self.phases) > 0

    @property
    def sorted_phases(self) -> list[Phase]:
        return sorted(self.phases, key=lambda p: p.order)

    def is_currently_active(self, on: date) -> bool:
        return self.is_active and self.start_date <= on <= self.end_date

    def progress_percentage(self, on: date) -> float:
        return progress_between(self.start_date, self.end_date, on)

    def iter_weeks(self):
        """Yield every week of the plan in phase then week order."""
        for phase in self.sorted_phases:
            yield from phase.sorted_weeks

    def iter_days(self):
        """Yield every day of the plan in calendar order."""
        for week in self.iter_weeks():
            yield from week.sorted_days
