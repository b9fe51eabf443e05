"""Enumerations and tuning constants for the periodization engine.

Phase sequencing follows the classic accumulation / intensification /
transformation cycle. Constants that come from the literature cite it;
the rest are coaching heuristics and are marked as such.
"""

from enum import IntEnum, auto


class PeriodizationStrategy(IntEnum):
    """How a plan is split into phases.

    LINEAR cycles accumulation → intensification → transformation.
    BLOCK alternates concentrated blocks on the primary and secondary
    strength profile (Issurin 2010).
    UNDULATING alternates accumulation and intensification (Rhea et al. 2002).
    """

    LINEAR = auto()
    BLOCK = auto()
    UNDULATING = auto()


class PhaseType(IntEnum):
    """Mesocycle phase types."""

    ACCUMULATION = auto()  # High volume, moderate intensity
    INTENSIFICATION = auto()  # Moderate volume, high intensity
    TRANSFORMATION = auto()  # Goal-specific volume, peaking
    DELOAD = auto()  # Active recovery


class LoadLevel(IntEnum):
    """Qualitative weekly load tier. LOW is reserved for deload weeks."""

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class StrengthProfile(IntEnum):
    """Strength expressions a phase can focus on."""

    MAX_STRENGTH = auto()
    MAX_DYNAMIC_STRENGTH = auto()
    SPEED_STRENGTH = auto()
    RESISTANT_STRENGTH = auto()
    HYPERTROPHY = auto()


class Weekday(IntEnum):
    """Calendar weekday numbering used everywhere in the engine.

    1 = Sunday … 7 = Saturday. Stored training-day selections, Day.weekday
    and the default patterns below all use this numbering.
    """

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


# ---------------------------------------------------------------------------
# Structure generation
# ---------------------------------------------------------------------------

DEFAULT_PHASE_DURATION_WEEKS = 4
MIN_PHASE_DURATION_WEEKS = 1

# Every phase ends with at least one recovery week
DELOAD_WEEKS_PER_PHASE = 1

DAYS_PER_WEEK = 7

LINEAR_PHASE_SEQUENCE = (
    PhaseType.ACCUMULATION,
    PhaseType.INTENSIFICATION,
    PhaseType.TRANSFORMATION,
)

UNDULATING_PHASE_SEQUENCE = (
    PhaseType.ACCUMULATION,
    PhaseType.INTENSIFICATION,
)

# Training days per weekly frequency when a plan has none configured.
DEFAULT_TRAINING_DAYS: dict[int, tuple[Weekday, ...]] = {
    1: (Weekday.MONDAY,),
    2: (Weekday.MONDAY, Weekday.THURSDAY),
    3: (Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY),
    4: (Weekday.MONDAY, Weekday.TUESDAY, Weekday.THURSDAY, Weekday.FRIDAY),
    5: (
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    ),
    6: (
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
        Weekday.SATURDAY,
    ),
    7: tuple(Weekday),
}
FALLBACK_TRAINING_DAYS = DEFAULT_TRAINING_DAYS[3]

# ---------------------------------------------------------------------------
# Weekly modulation factors (coaching heuristics, editable per week)
# ---------------------------------------------------------------------------

DEFAULT_INTENSITY_FACTOR = {
    LoadLevel.HIGH: 1.15,
    LoadLevel.MEDIUM: 1.0,
    LoadLevel.LOW: 0.7,
}

DEFAULT_VOLUME_FACTOR = {
    LoadLevel.HIGH: 1.2,
    LoadLevel.MEDIUM: 1.0,
    LoadLevel.LOW: 0.6,
}

# Additive load increment per week within a phase (2.5% = 0.025)
DEFAULT_LOAD_PROGRESSION_PCT = 0.025

# ---------------------------------------------------------------------------
# Load progression
# ---------------------------------------------------------------------------

# A prescription can never exceed the trainee's 1RM
MAX_PERCENTAGE_OF_1RM = 100.0

# Largest single-step load increase considered safe (10%)
MAX_SAFE_INCREMENT_PCT = 0.10

# Estimated 1RM gain at the end of a phase, by phase type.
# Heuristic estimate, not measured data.
ESTIMATED_1RM_INCREASE = {
    PhaseType.ACCUMULATION: 0.02,
    PhaseType.INTENSIFICATION: 0.05,
    PhaseType.TRANSFORMATION: 0.03,
    PhaseType.DELOAD: 0.0,
}
