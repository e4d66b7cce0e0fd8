"""Serialization module: canonical-preserving dict / JSON codec."""

from swim_pacing.serialization.json_codec import (
    baseline_from_dict,
    length_from_dict,
    swim_set_from_dict,
    swimmer_from_dict,
    time_from_dict,
    to_dict,
    to_json_string,
)

__all__ = [
    "baseline_from_dict",
    "length_from_dict",
    "swim_set_from_dict",
    "swimmer_from_dict",
    "time_from_dict",
    "to_dict",
    "to_json_string",
]
