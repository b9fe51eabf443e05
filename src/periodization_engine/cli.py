"""Preview command — generate a plan and print its structure.

Usage:
    python -m periodization_engine --weeks 12 --strategy linear
    python -m periodization_engine --start 2026-01-05 --format table --base-load 75
    python -m periodization_engine --weeks 12 --on 2026-02-10
"""

from __future__ import annotations

import argparse
import logging
from datetime import date, timedelta

from periodization_engine import config
from periodization_engine.generator import PeriodizationGenerator
from periodization_engine.math.calendar import add_weeks
from periodization_engine.math.load_progression import plan_progression_frame
from periodization_engine.models.enums import PeriodizationStrategy, StrengthProfile, Weekday
from periodization_engine.models.plan import Plan
from periodization_engine.repository import InMemoryPlanRepository
from periodization_engine.resolver import TrainingContextResolver
from periodization_engine.serialization import plan_to_json_string

logger = logging.getLogger(__name__)


def _next_monday(from_date: date) -> date:
    """Return the date of the next Monday on or after *from_date*."""
    return from_date + timedelta(days=(7 - from_date.weekday()) % 7)


def _enum_arg(enum_cls):
    def parse(value: str):
        try:
            return enum_cls[value.upper().replace("-", "_")]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in enum_cls)
            raise argparse.ArgumentTypeError(
                f"invalid choice {value!r} (choose from {choices})"
            ) from None

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="periodization_engine",
        description="Generate a periodized strength plan and print it.",
    )
    parser.add_argument("--name", default="Preview plan")
    parser.add_argument(
        "--start", type=date.fromisoformat, default=None,
        help="First day (ISO date). Defaults to the next Monday.",
    )
    parser.add_argument("--weeks", type=int, default=12, help="Plan length in weeks")
    parser.add_argument(
        "--strategy", type=_enum_arg(PeriodizationStrategy),
        default=PeriodizationStrategy.LINEAR,
    )
    parser.add_argument(
        "--primary", type=_enum_arg(StrengthProfile),
        default=StrengthProfile.MAX_STRENGTH,
    )
    parser.add_argument("--secondary", type=_enum_arg(StrengthProfile), default=None)
    parser.add_argument("--frequency", type=int, default=3, help="Sessions per week")
    parser.add_argument(
        "--days", type=_enum_arg(Weekday), nargs="*", default=(),
        help="Training weekdays (e.g. monday thursday)",
    )
    parser.add_argument(
        "--phase-weeks", type=int, default=config.PHASE_DURATION_WEEKS,
        help="Nominal phase length in weeks",
    )
    parser.add_argument("--format", choices=("json", "table"), default="json")
    parser.add_argument(
        "--base-load", type=float, default=75.0,
        help="Base load for the progression table",
    )
    parser.add_argument(
        "--on", type=date.fromisoformat, default=None,
        help="Also print the training context for this date",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on invariant violations")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.weeks < 1:
        logger.error("Plan must be at least 1 week, got %d", args.weeks)
        return 2

    start = args.start or _next_monday(date.today())
    try:
        end = add_weeks(start, args.weeks)
    except OverflowError:
        logger.error("Plan of %d weeks from %s ends out of range", args.weeks, start)
        return 2

    plan = Plan(
        name=args.name,
        start_date=start,
        end_date=end,
        strategy=args.strategy,
        primary_profile=args.primary,
        secondary_profile=args.secondary,
        weekly_frequency=args.frequency,
        training_days=tuple(args.days),
    )

    generator = PeriodizationGenerator(strict=args.strict or None)
    result = generator.generate(plan, phase_duration_weeks=args.phase_weeks)
    for unit in result.skipped:
        logger.warning("Skipped %s %d: %s", unit.level, unit.index + 1, unit.reason)

    if args.format == "table":
        print(plan_progression_frame(result.plan, args.base_load).to_string())
    else:
        print(plan_to_json_string(result.plan))

    if args.on is not None:
        resolver = TrainingContextResolver(InMemoryPlanRepository([result.plan]))
        context = resolver.current_context(args.on)
        if context is None:
            print(f"No training context on {args.on.isoformat()}")
        else:
            print(context.description)

    return 0 if result.is_complete else 1
