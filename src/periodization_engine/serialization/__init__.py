"""Serialization module — export plan trees and template patterns as JSON."""

from periodization_engine.serialization.plan_json import (
    decode_phase_pattern,
    encode_phase_pattern,
    plan_from_dict,
    plan_to_dict,
    plan_to_json_string,
)

__all__ = [
    "decode_phase_pattern",
    "encode_phase_pattern",
    "plan_from_dict",
    "plan_to_dict",
    "plan_to_json_string",
]
