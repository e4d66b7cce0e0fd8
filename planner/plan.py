"""Planner: prints goal, rest and send-off times for a list of sets.

Usage:
    python -m planner.plan --swimmer swimmer.json --sets sets.json
    python -m planner.plan --swimmer swimmer.json --sets sets.json --course LCM --rest-model fixed
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from swim_pacing.exceptions import MissingBaselineError, SwimPacingError
from swim_pacing.models.enums import EFFORT_LABELS, Course, LengthUnit
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.models.swimmer import Swimmer
from swim_pacing.models.time_span import TimeSpan
from swim_pacing.pacing import DefaultPacePolicy, PacingEngine, rest_model_by_name
from swim_pacing.serialization import swim_set_from_dict, swimmer_from_dict

from planner.config import DEFAULT_COURSE, LOG_LEVEL, REST_MODEL, SEND_OFF_STEP

logger = logging.getLogger(__name__)

_UNIT_SUFFIX = {LengthUnit.METERS: "m", LengthUnit.YARDS: "y"}


def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def _clock(seconds: int) -> str:
    """Whole seconds as ``m:ss``."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def _distance_label(swim_set: SwimSet) -> str:
    distance = swim_set.distance
    amount = distance.to(distance.display)
    return f"{amount:g}{_UNIT_SUFFIX[distance.display]}"


def format_set_line(engine: PacingEngine, course: Course, swim_set: SwimSet, swimmer: Swimmer) -> str:
    """One printable line of timing for a set."""
    pacing = engine.pace_set(course, swim_set, swimmer.baselines)
    first = pacing.reps[0]
    label, _ = EFFORT_LABELS[swim_set.effort]
    return (
        f"{swim_set.reps} x {_distance_label(swim_set)} {swim_set.stroke.name.lower()}"
        f" @ {label}: goal {TimeSpan.of_seconds(first.goal_seconds)}"
        f", {pacing.timing_label}"
        f", on {_clock(first.interval_seconds)}"
        f", total {_clock(pacing.total_seconds)}"
    )


def build_engine(rest_model: str, send_off_step: int) -> PacingEngine:
    policy = DefaultPacePolicy(
        rest_model=rest_model_by_name(rest_model),
        send_off_step=send_off_step,
    )
    return PacingEngine(policy)


def run(swimmer_path: Path, sets_path: Path, course: Course, engine: PacingEngine) -> list[str]:
    """Load inputs and return the printable lines; sets without a baseline are skipped."""
    swimmer = swimmer_from_dict(_load_json(swimmer_path))
    raw_sets = _load_json(sets_path)
    logger.info(
        "Planning %d sets for %s in %s with %s rest",
        len(raw_sets), swimmer.display_name, course.name, engine.policy.rest_model.name,
    )

    lines: list[str] = []
    for raw in raw_sets:
        swim_set = swim_set_from_dict(raw, course=course)
        try:
            lines.append(format_set_line(engine, course, swim_set, swimmer))
        except MissingBaselineError as exc:
            logger.warning("Skipping %s: %s", swim_set, exc)
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Swim set pacing planner")
    parser.add_argument("--swimmer", type=Path, required=True, help="Swimmer JSON with baselines")
    parser.add_argument("--sets", type=Path, required=True, help="JSON list of sets")
    parser.add_argument(
        "--course",
        choices=[c.name for c in Course],
        default=DEFAULT_COURSE.upper(),
        help="Pool configuration",
    )
    parser.add_argument(
        "--rest-model",
        choices=["percent", "fixed"],
        default=REST_MODEL.lower(),
        help="Rest model",
    )
    parser.add_argument("--send-off-step", type=int, default=SEND_OFF_STEP, help="Send-off rounding (s)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        engine = build_engine(args.rest_model, args.send_off_step)
        lines = run(args.swimmer, args.sets, Course[args.course], engine)
    except FileNotFoundError as exc:
        logger.error("Input not found: %s", exc.filename)
        return 1
    except (SwimPacingError, json.JSONDecodeError) as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
