"""Load progression: weekly load, volume and 1RM modulation.

All functions are pure. A week's modulation comes from three values set on
the Week: ``intensity_factor`` scales load, ``volume_factor`` scales sets
and reps, and ``load_progression_pct`` adds a linear increment per week of
the phase. Deload weeks ignore the increment and apply only the intensity
factor.

Reference:
    Issurin (2010). New horizons for the methodology and physiology of
        training periodization. Sports Med 40(3):189-206.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from periodization_engine.exceptions import InvalidLoadError
from periodization_engine.models.enums import (
    ESTIMATED_1RM_INCREASE,
    MAX_PERCENTAGE_OF_1RM,
    MAX_SAFE_INCREMENT_PCT,
)
from periodization_engine.models.plan import Phase, Plan, Week
from periodization_engine.models.progression import LoadPrescription, ProgressionWeek

_PATTERN_COLUMNS = [
    "week_number",
    "load_level",
    "intensity_factor",
    "volume_factor",
    "load_progression_pct",
    "is_deload",
]


def progressive_load(base_load: float, week: Week, phase: Phase) -> float:
    """Progress *base_load* for a given week of a phase.

    Non-deload weeks add ``load_progression_pct`` for every week after the
    first (``order`` is 1-indexed), then apply the intensity factor:

        load = base × (1 + pct × (order − 1)) × intensity_factor

    Deload weeks return ``base × intensity_factor``.

    Args:
        base_load: Base load, either kg or a percentage of 1RM.
        week: The week being prescribed.
        phase: The phase containing *week*.

    Returns:
        The modulated load, in the same unit as *base_load*.
    """
    if week.is_deload:
        return base_load * week.intensity_factor

    increment = week.load_progression_pct * (week.order - 1)
    progressed = base_load * (1.0 + increment)
    return progressed * week.intensity_factor


def progressive_load_percentage(
    base_percentage: float,
    week: Week,
    phase: Phase,
    one_rep_max: float | None = None,
) -> LoadPrescription:
    """Progress a %1RM prescription, capped at 100%.

    Args:
        base_percentage: Base intensity as a percentage of 1RM (e.g. 75.0).
        week: The week being prescribed.
        phase: The phase containing *week*.
        one_rep_max: The exercise 1RM in kg. When given, the absolute load
            is returned as well.

    Returns:
        LoadPrescription with the capped percentage and kg (or None).

    Raises:
        InvalidLoadError: If *one_rep_max* is negative.
    """
    if one_rep_max is not None and one_rep_max < 0:
        raise InvalidLoadError(f"1RM must be non-negative, got {one_rep_max}")

    percentage = min(
        progressive_load(base_percentage, week, phase), MAX_PERCENTAGE_OF_1RM
    )
    kg = percentage / 100.0 * one_rep_max if one_rep_max is not None else None
    return LoadPrescription(percentage=percentage, kg=kg)


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; prescriptions round .5 up
    return int(math.floor(value + 0.5))


def modulated_sets(base_sets: int, week: Week) -> int:
    """Scale a set count by the week's volume factor (minimum 1)."""
    return max(1, _round_half_up(base_sets * week.volume_factor))


def modulated_reps(base_reps: int, week: Week) -> int:
    """Scale a rep count by the week's volume factor (minimum 1)."""
    return max(1, _round_half_up(base_reps * week.volume_factor))


def progression_pattern(phase: Phase) -> tuple[ProgressionWeek, ...]:
    """Report the modulation factors of every week in a phase, in order."""
    return tuple(
        ProgressionWeek(
            week_number=index,
            load_level=week.load_level,
            intensity_factor=week.intensity_factor,
            volume_factor=week.volume_factor,
            load_progression_pct=week.load_progression_pct,
            is_deload=week.is_deload,
        )
        for index, week in enumerate(phase.sorted_weeks, start=1)
    )


def predict_new_1rm(current_1rm: float, phase: Phase) -> float:
    """Estimate the 1RM at the end of a phase.

    Applies a fixed gain by phase type (accumulation +2%, intensification
    +5%, transformation +3%, deload 0%). This is a heuristic estimate for
    planning displays, not a measured or individualized prediction.
    """
    return current_1rm * (1.0 + ESTIMATED_1RM_INCREASE[phase.phase_type])


def is_progression_safe(
    base_load: float,
    progressed_load: float,
    max_increment_pct: float = MAX_SAFE_INCREMENT_PCT,
) -> bool:
    """Check that a progressed load stays within a relative increase limit.

    Args:
        base_load: Load before progression; must be positive.
        progressed_load: Load after progression.
        max_increment_pct: Largest allowed relative increase (0.10 = 10%).

    Returns:
        True if ``(progressed − base) / base <= max_increment_pct``.

    Raises:
        InvalidLoadError: If *base_load* is zero or negative.
    """
    if base_load <= 0:
        raise InvalidLoadError(f"Base load must be positive, got {base_load}")
    increment = (progressed_load - base_load) / base_load
    return increment <= max_increment_pct


# ---------------------------------------------------------------------------
# Reporting frames
# ---------------------------------------------------------------------------


def progression_frame(phase: Phase) -> pd.DataFrame:
    """Progression pattern of a phase as a DataFrame, one row per week."""
    rows = [
        {
            "week_number": pw.week_number,
            "load_level": pw.load_level.name.lower(),
            "intensity_factor": pw.intensity_factor,
            "volume_factor": pw.volume_factor,
            "load_progression_pct": pw.load_progression_pct,
            "is_deload": pw.is_deload,
        }
        for pw in progression_pattern(phase)
    ]
    return pd.DataFrame(rows, columns=_PATTERN_COLUMNS)


def plan_progression_frame(plan: Plan, base_load: float) -> pd.DataFrame:
    """Progressed load for every week of a plan, indexed by absolute week.

    Columns: phase order, phase type, load level, intensity and volume
    factors, the progressed load for *base_load*, and the load relative to
    the plan's first week.
    """
    records = []
    for phase in plan.sorted_phases:
        for week in phase.sorted_weeks:
            records.append({
                "week_number": week.week_number,
                "phase": phase.order,
                "phase_type": phase.phase_type.name.lower(),
                "load_level": week.load_level.name.lower(),
                "intensity_factor": week.intensity_factor,
                "volume_factor": week.volume_factor,
                "load": progressive_load(base_load, week, phase),
            })

    frame = pd.DataFrame(
        records,
        columns=[
            "week_number",
            "phase",
            "phase_type",
            "load_level",
            "intensity_factor",
            "volume_factor",
            "load",
        ],
    )
    loads = frame["load"].to_numpy(dtype=np.float64)
    if loads.size and loads[0] > 0:
        frame["relative_load"] = loads / loads[0]
    else:
        frame["relative_load"] = np.nan
    return frame.set_index("week_number")
