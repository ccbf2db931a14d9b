# hookrunner/timings.py
"""
@file timings.py
@brief Timing defaults and presets for the harness.
"""

from __future__ import annotations
from copy import deepcopy
from typing import Any, Dict


TIMING_FIELDS: Dict[str, float] = {
    "poll_interval": 0.1,
    "default_timeout": 2.0,
    "start_delay": 0.0,
}

PRESET_OVERRIDES: Dict[str, Dict[str, float]] = {
    "fast": {
        "poll_interval": 0.05,
        "default_timeout": 1.0,
    },
    "slow": {
        "poll_interval": 0.2,
        "default_timeout": 5.0,
        "start_delay": 1.0,
    },
    "ci": {
        "poll_interval": 0.2,
        "default_timeout": 8.0,
        "start_delay": 2.0,
    },
}


def list_presets() -> Dict[str, Dict[str, Any]]:
    return {"default": {}, **PRESET_OVERRIDES}


def build_preset_values(preset: str) -> Dict[str, float]:
    preset_key = (preset or "default").lower()
    values = deepcopy(TIMING_FIELDS)

    if preset_key == "default":
        return values

    overrides = PRESET_OVERRIDES.get(preset_key)
    if overrides is None:
        raise ValueError(f"Unknown timing preset: {preset}")

    values.update(overrides)
    return values
