# tests/test_config.py
"""
Tests for suite configuration.
"""

import pytest

from hookrunner.config import HarnessConfig, apply_env
from hookrunner.exceptions import ConfigError


class TestHarnessConfig:
    """Tests for defaults, presets and overrides."""

    def test_defaults(self):
        config = HarnessConfig()
        assert config.poll_interval == 0.1
        assert config.default_timeout == 2.0
        assert config.start_delay == 0.0
        assert config.clear_state is False

    def test_presets(self):
        assert HarnessConfig.from_preset("default") == HarnessConfig()
        fast = HarnessConfig.from_preset("fast")
        assert fast.default_timeout < HarnessConfig().default_timeout
        assert HarnessConfig.from_preset("ci").default_timeout == 8.0

    def test_unknown_preset(self):
        with pytest.raises(ConfigError):
            HarnessConfig.from_preset("warp")

    def test_with_overrides(self):
        config = HarnessConfig().with_overrides(default_timeout="3", report_path=None)
        assert config.default_timeout == 3.0
        assert config.report_path is None

    def test_unknown_override(self):
        with pytest.raises(ConfigError):
            HarnessConfig().with_overrides(wait=1)

    def test_negative_duration(self):
        with pytest.raises(ConfigError):
            HarnessConfig(default_timeout=-1)

    def test_zero_poll_interval(self):
        with pytest.raises(ConfigError):
            HarnessConfig(poll_interval=0)


class TestYamlConfig:
    """Tests for YAML loading and schema validation."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text(
            "preset: slow\n"
            "default_timeout: 3.5\n"
            "clear_state: true\n"
            "log_dir: logs\n",
            encoding="utf-8",
        )
        config = HarnessConfig.from_yaml(str(path))
        assert config.default_timeout == 3.5
        assert config.poll_interval == 0.2
        assert config.start_delay == 1.0
        assert config.clear_state is True
        assert config.log_dir == "logs"

    def test_preset_argument_replaces_file_preset_only(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("preset: slow\ndefault_timeout: 3.5\n", encoding="utf-8")
        config = HarnessConfig.from_yaml(str(path), preset="fast")
        assert config.default_timeout == 3.5
        assert config.poll_interval == 0.05
        assert config.start_delay == 0.0

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("", encoding="utf-8")
        assert HarnessConfig.from_yaml(str(path)) == HarnessConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            HarnessConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("default_timeout: [1,\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            HarnessConfig.from_yaml(str(path))

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("default_timeout: soon\nextra: 1\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            HarnessConfig.from_yaml(str(path))
        assert "schema validation failed" in str(exc_info.value)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            HarnessConfig.from_yaml(str(path))


class TestEnvOverrides:
    """Tests for HOOKRUNNER_* environment overrides."""

    def test_apply_env(self):
        config = apply_env(HarnessConfig(), {"HOOKRUNNER_TIMEOUT": "4", "HOOKRUNNER_POLL_INTERVAL": "0.25"})
        assert config.default_timeout == 4.0
        assert config.poll_interval == 0.25

    def test_no_env(self):
        config = HarnessConfig()
        assert apply_env(config, {}) is config

    def test_bad_env_value(self):
        with pytest.raises(ConfigError):
            apply_env(HarnessConfig(), {"HOOKRUNNER_START_DELAY": "later"})
