"""Value types returned by the load progression calculator."""

from __future__ import annotations

from dataclasses import dataclass

from periodization_engine.models.enums import LoadLevel


@dataclass(frozen=True)
class LoadPrescription:
    """A load as a percentage of 1RM, plus kilograms when the 1RM is known."""

    percentage: float
    kg: float | None = None


@dataclass(frozen=True)
class ProgressionWeek:
    """One row of a phase's progression pattern."""

    week_number: int  # 1-indexed position within the phase
    load_level: LoadLevel
    intensity_factor: float
    volume_factor: float
    load_progression_pct: float
    is_deload: bool

    @property
    def description(self) -> str:
        if self.is_deload:
            return (
                f"Week {self.week_number}: DELOAD "
                f"(intensity {self.intensity_factor:.0%}, volume {self.volume_factor:.0%})"
            )
        return (
            f"Week {self.week_number}: {self.load_level.name.lower()} "
            f"(intensity {self.intensity_factor:.0%}, volume {self.volume_factor:.0%}, "
            f"+{self.load_progression_pct:.1%})"
        )
