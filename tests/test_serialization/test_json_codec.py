"""Tests for the dict / JSON codec."""

from __future__ import annotations

import json
from uuid import UUID

import pytest

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import Course, Effort, Equipment, LengthUnit, StrokeType
from swim_pacing.models.length import Length
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.models.time_span import TimeSpan
from swim_pacing.serialization import (
    baseline_from_dict,
    length_from_dict,
    swim_set_from_dict,
    swimmer_from_dict,
    time_from_dict,
    to_dict,
    to_json_string,
)


class TestEncoding:
    def test_length_written_as_canonical(self) -> None:
        assert to_dict(Length.of_yards(25)) == {"canonical": 228600, "unit": "YARDS"}

    def test_time_written_as_millis(self) -> None:
        assert to_dict(TimeSpan.of_millis(78000)) == {"millis": 78000}

    def test_swim_set_fields(self, set_factory) -> None:
        swim_set = set_factory(
            reps=8,
            distance=Length.of_yards(50),
            effort=Effort.ENDURANCE,
            equipment={Equipment.PULL_BUOY, Equipment.PADDLES},
            notes="breathe every 3",
        )
        data = to_dict(swim_set)
        assert data["stroke"] == "FREESTYLE"
        assert data["reps"] == 8
        assert data["distance"] == {"canonical": 457200, "unit": "YARDS"}
        assert data["effort"] == "ENDURANCE"
        assert data["course"] == "SCY"
        assert data["equipment"] == ["PADDLES", "PULL_BUOY"]
        assert data["notes"] == "breathe every 3"

    def test_swimmer_baselines_by_stroke_name(self, meter_swimmer) -> None:
        data = to_dict(meter_swimmer)
        assert data["first_name"] == "Alex"
        assert set(data["baselines"]) == {"FREESTYLE", "BACKSTROKE"}
        assert data["baselines"]["FREESTYLE"]["time"] == {"millis": 90000}
        UUID(data["id"])

    def test_json_string_for_list(self, set_factory) -> None:
        text = to_json_string([set_factory(), set_factory(reps=2)])
        parsed = json.loads(text)
        assert [item["reps"] for item in parsed] == [1, 2]

    def test_unsupported_type(self) -> None:
        with pytest.raises(InvalidArgumentError):
            to_dict(42)  # type: ignore[arg-type]


class TestDecoding:
    def test_swimmer_round_trip_keeps_baselines_exact(self, yard_swimmer) -> None:
        restored = swimmer_from_dict(json.loads(to_json_string(yard_swimmer)))
        assert restored.id == yard_swimmer.id
        assert restored.display_name == "Katie Lane"
        assert restored.team_name == "Dolphins"
        assert restored.baselines == dict(yard_swimmer.baselines)

    def test_swim_set_round_trip(self, set_factory) -> None:
        original = set_factory(equipment={Equipment.FINS}, notes="fast")
        restored = swim_set_from_dict(to_dict(original))
        assert restored.distance == original.distance
        assert restored.equipment == original.equipment
        assert restored.notes == "fast"

    def test_hand_written_amount(self) -> None:
        assert length_from_dict({"amount": 50, "unit": "yards"}) == Length.of_yards(50)

    def test_unit_defaults_to_meters(self) -> None:
        length = length_from_dict({"canonical": 250000})
        assert length.display == LengthUnit.METERS

    def test_course_override_resnaps(self) -> None:
        data = {
            "stroke": "breaststroke",
            "reps": 2,
            "distance": {"amount": 75, "unit": "METERS"},
            "effort": "threshold",
            "course": "SCM",
        }
        swim_set = swim_set_from_dict(data, course=Course.LCM)
        assert isinstance(swim_set, SwimSet)
        assert swim_set.stroke == StrokeType.BREASTSTROKE
        assert swim_set.course == Course.LCM
        assert swim_set.distance == Length.of_meters(100)

    def test_baseline(self) -> None:
        pace = baseline_from_dict(
            {"distance": {"amount": 100, "unit": "YARDS"}, "time": {"millis": 78000}}
        )
        assert pace == BaselinePace.per_100(78.0, LengthUnit.YARDS)

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"canonical": 1.5},
            {"canonical": True},
            {"canonical": 10, "unit": "FURLONGS"},
            [],
        ],
    )
    def test_bad_length(self, data) -> None:
        with pytest.raises(InvalidArgumentError):
            length_from_dict(data)

    @pytest.mark.parametrize("data", [{}, {"millis": "100"}, {"millis": -1}])
    def test_bad_time(self, data) -> None:
        with pytest.raises(InvalidArgumentError):
            time_from_dict(data)

    def test_bad_swimmer_id(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid swimmer id"):
            swimmer_from_dict({"first_name": "A", "last_name": "B", "id": "nope"})

    def test_unknown_effort(self) -> None:
        data = {
            "stroke": "FREESTYLE",
            "reps": 1,
            "distance": {"amount": 50, "unit": "YARDS"},
            "effort": "MODERATE",
            "course": "SCY",
        }
        with pytest.raises(InvalidArgumentError, match="Unknown Effort"):
            swim_set_from_dict(data)
