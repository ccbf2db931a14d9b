# hookrunner/config.py
"""
@file config.py
@brief Suite configuration: timing, app reset and output settings.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

import yaml
from jsonschema import Draft202012Validator

from .exceptions import ConfigError
from .timings import build_preset_values

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schemas", "config.schema.json")

_DURATION_FIELDS = ("poll_interval", "default_timeout", "start_delay")

ENV_OVERRIDES = {
    "HOOKRUNNER_TIMEOUT": "default_timeout",
    "HOOKRUNNER_POLL_INTERVAL": "poll_interval",
    "HOOKRUNNER_START_DELAY": "start_delay",
}


@dataclass(frozen=True)
class HarnessConfig:
    """
    Settings for one suite run.

    Durations are seconds. `default_timeout` is the locator wait window,
    `poll_interval` the registry polling period.
    """
    poll_interval: float = 0.1
    default_timeout: float = 2.0
    start_delay: float = 0.0
    clear_state: bool = False
    log_dir: Optional[str] = None
    report_path: Optional[str] = None

    def __post_init__(self) -> None:
        for name in _DURATION_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigError(f"{name} must be a number, got: {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must not be negative, got: {value}")
        if self.poll_interval <= 0:
            raise ConfigError(f"poll_interval must be positive, got: {self.poll_interval}")

    @classmethod
    def from_preset(cls, preset: str = "default") -> HarnessConfig:
        try:
            values = build_preset_values(preset)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        return cls(**values)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], preset: Optional[str] = None) -> HarnessConfig:
        """
        Build a config from a validated mapping: preset first, then explicit fields.

        `preset`, when given, replaces the mapping's own `preset` key.
        """
        validate_config(data)
        data = dict(data)
        file_preset = data.pop("preset", "default")
        base = cls.from_preset(str(preset or file_preset))
        return base.with_overrides(**data)

    @classmethod
    def from_yaml(cls, path: str, preset: Optional[str] = None) -> HarnessConfig:
        return cls.from_mapping(_load_yaml(path), preset=preset)

    def with_overrides(self, **overrides: Any) -> HarnessConfig:
        """Return a new config with overrides applied. None values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown HarnessConfig field(s): {sorted(unknown)}")
        values = {k: v for k, v in overrides.items() if v is not None}
        for name in _DURATION_FIELDS:
            if name in values:
                values[name] = _to_float(name, values[name])
        return replace(self, **values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got: {value!r}") from e


def _load_yaml(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise ConfigError(f"Config YAML not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config YAML must be a mapping at root.")
    return data


def _load_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(data: Mapping[str, Any]) -> None:
    """Validate a config mapping against the bundled JSON schema."""
    validator = Draft202012Validator(_load_schema())
    errors = sorted(validator.iter_errors(dict(data)), key=lambda e: list(e.path))
    if errors:
        lines = ["Config schema validation failed:"]
        for e in errors:
            lines.append(f"- {list(e.path)}: {e.message}")
        raise ConfigError("\n".join(lines))


def apply_env(config: HarnessConfig, environ: Optional[Mapping[str, str]] = None) -> HarnessConfig:
    """Apply HOOKRUNNER_* environment overrides."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for var, name in ENV_OVERRIDES.items():
        raw = environ.get(var)
        if raw is not None and raw.strip():
            overrides[name] = _to_float(var, raw)
    if not overrides:
        return config
    return config.with_overrides(**overrides)
