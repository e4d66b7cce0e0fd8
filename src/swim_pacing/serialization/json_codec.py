"""Plain-dict / JSON codec for the pacing value types.

Lengths and times are written as their canonical integers so a round trip
through JSON is exact. Enum members are written by name.

All functions are pure (no file or network I/O).
"""

from __future__ import annotations

import json
from typing import Any, Iterable
from uuid import UUID

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import Course, Effort, Equipment, LengthUnit, StrokeType
from swim_pacing.models.length import Length
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.models.swimmer import Swimmer
from swim_pacing.models.time_span import TimeSpan


def length_to_dict(length: Length) -> dict:
    return {"canonical": length.canonical, "unit": length.display.name}


def time_to_dict(time: TimeSpan) -> dict:
    return {"millis": time.millis}


def baseline_to_dict(pace: BaselinePace) -> dict:
    return {"distance": length_to_dict(pace.distance), "time": time_to_dict(pace.time)}


def swim_set_to_dict(swim_set: SwimSet) -> dict:
    return {
        "stroke": swim_set.stroke.name,
        "reps": swim_set.reps,
        "distance": length_to_dict(swim_set.distance),
        "effort": swim_set.effort.name,
        "course": swim_set.course.name,
        "equipment": sorted(item.name for item in swim_set.equipment),
        "notes": swim_set.notes,
    }


def swimmer_to_dict(swimmer: Swimmer) -> dict:
    return {
        "id": str(swimmer.id),
        "first_name": swimmer.first_name,
        "last_name": swimmer.last_name,
        "preferred_name": swimmer.preferred_name,
        "team_name": swimmer.team_name,
        "baselines": {
            stroke.name: baseline_to_dict(pace)
            for stroke, pace in sorted(swimmer.baselines.items())
        },
    }


def to_dict(value: Length | TimeSpan | BaselinePace | SwimSet | Swimmer) -> dict:
    """Dispatch to the matching ``*_to_dict`` function."""
    for kind, encoder in _ENCODERS:
        if isinstance(value, kind):
            return encoder(value)
    raise InvalidArgumentError(f"Cannot serialize {type(value).__name__}")


def to_json_string(value: Any, indent: int = 2) -> str:
    """Serialize a value type (or a list of them) to a JSON string."""
    if isinstance(value, (list, tuple)):
        return json.dumps([to_dict(item) for item in value], indent=indent)
    return json.dumps(to_dict(value), indent=indent)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def length_from_dict(data: dict) -> Length:
    """Decode ``{"canonical", "unit"}`` or, for hand-written input, ``{"amount", "unit"}``."""
    if isinstance(data, dict) and "canonical" not in data and "amount" in data:
        return Length.of(data["amount"], _enum(LengthUnit, data.get("unit", "METERS")))
    canonical = _require(data, "canonical")
    if isinstance(canonical, bool) or not isinstance(canonical, int):
        raise InvalidArgumentError(f"canonical must be an int, got {canonical!r}")
    return Length.of_canonical(canonical, _enum(LengthUnit, data.get("unit", "METERS")))


def time_from_dict(data: dict) -> TimeSpan:
    millis = _require(data, "millis")
    if isinstance(millis, bool) or not isinstance(millis, int):
        raise InvalidArgumentError(f"millis must be an int, got {millis!r}")
    return TimeSpan.of_millis(millis)


def baseline_from_dict(data: dict) -> BaselinePace:
    return BaselinePace(
        length_from_dict(_require(data, "distance")),
        time_from_dict(_require(data, "time")),
    )


def swim_set_from_dict(data: dict, course: Course | None = None) -> SwimSet:
    """Decode a set. *course* overrides the stored course when given."""
    set_course = course if course is not None else _enum(Course, _require(data, "course"))
    return SwimSet(
        stroke=_enum(StrokeType, _require(data, "stroke")),
        reps=_require(data, "reps"),
        distance=length_from_dict(_require(data, "distance")),
        effort=_enum(Effort, _require(data, "effort")),
        course=set_course,
        notes=data.get("notes", ""),
        equipment=_enums(Equipment, data.get("equipment", ())),
    )


def swimmer_from_dict(data: dict) -> Swimmer:
    kwargs = {
        "first_name": _require(data, "first_name"),
        "last_name": _require(data, "last_name"),
        "preferred_name": data.get("preferred_name"),
        "team_name": data.get("team_name"),
    }
    if data.get("id"):
        try:
            kwargs["id"] = UUID(data["id"])
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid swimmer id {data['id']!r}") from exc
    swimmer = Swimmer(**kwargs)
    for stroke_name, pace in data.get("baselines", {}).items():
        swimmer.update_baseline(_enum(StrokeType, stroke_name), baseline_from_dict(pace))
    return swimmer


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_ENCODERS = (
    (Length, length_to_dict),
    (TimeSpan, time_to_dict),
    (BaselinePace, baseline_to_dict),
    (SwimSet, swim_set_to_dict),
    (Swimmer, swimmer_to_dict),
)


def _require(data: dict, key: str) -> Any:
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Expected an object, got {type(data).__name__}")
    if key not in data:
        raise InvalidArgumentError(f"Missing field {key!r}")
    return data[key]


def _enum(enum_cls: type, name: str):
    try:
        return enum_cls[str(name).strip().upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown {enum_cls.__name__} {name!r}") from None


def _enums(enum_cls: type, names: Iterable[str]) -> set:
    return {_enum(enum_cls, name) for name in names}
