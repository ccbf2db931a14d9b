# hookrunner/cli.py
"""
@file cli.py
@brief Command-line interface for hookrunner.
"""

from __future__ import annotations

import argparse
import asyncio
import importlib
import os
import sys
from typing import Any, Dict, List, Optional

from .config import HarnessConfig, apply_env
from .exceptions import ConfigError
from .tester import Tester
from .timinglogger import TIMING_LOGGER


def _resolve_preset(args: argparse.Namespace) -> Optional[str]:
    if getattr(args, "ci", False):
        return "ci"
    if getattr(args, "fast", False):
        return "fast"
    if getattr(args, "slow", False):
        return "slow"
    return None


def _build_config(args: argparse.Namespace) -> HarnessConfig:
    """
    Precedence: defaults -> preset -> config file fields -> env -> CLI flags.

    A preset flag replaces the file's `preset` key; timing fields written
    explicitly in the file still win over it.
    """
    preset = _resolve_preset(args)
    if args.config:
        config = HarnessConfig.from_yaml(args.config, preset=preset)
    else:
        config = HarnessConfig.from_preset(preset or "default")

    config = apply_env(config)

    overrides: Dict[str, Any] = {
        "default_timeout": args.timeout,
        "report_path": args.report,
        "log_dir": args.log_dir,
    }
    return config.with_overrides(**overrides)


def load_target(target: str) -> Any:
    """Import `module:attribute`."""
    if ":" not in target:
        raise ValueError(f"Target must be 'module:attribute', got: {target}")
    module_name, attr = target.split(":", 1)
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())
    module = importlib.import_module(module_name)
    obj: Any = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def _build_tester(target: str, config: HarnessConfig) -> Tester:
    obj = load_target(target)
    if isinstance(obj, Tester):
        tester = obj
    elif callable(obj):
        tester = obj()
    else:
        raise ValueError(f"{target} is neither a Tester nor a factory returning one")
    if not isinstance(tester, Tester):
        raise ValueError(f"{target} did not produce a Tester (got {type(tester).__name__})")
    tester.apply_config(config)
    return tester


def _configure_timing_logger_from_env() -> None:
    """Configure timing logging from environment variables."""
    enabled = os.getenv("HOOKRUNNER_TIMING_LOGGING", "").lower() in {"1", "true", "yes", "on"}
    if not enabled:
        TIMING_LOGGER.disable()
        return

    TIMING_LOGGER.configure(console=True, file_path=os.getenv("HOOKRUNNER_TIMING_LOG_FILE"))
    TIMING_LOGGER.enable()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    _configure_timing_logger_from_env()

    p = argparse.ArgumentParser(
        prog="hookrunner",
        description="hookrunner - in-process UI integration test harness",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # -------------------------
    # run
    # -------------------------
    runp = sub.add_parser("run", help="Run the suite of a Tester")
    runp.add_argument("target", help="module:attribute naming a Tester or a factory returning one")
    runp.add_argument("--config", "-c", default=None, help="Path to suite config YAML")
    runp.add_argument("--timeout", "-t", type=float, default=None, help="Override the component wait window in seconds")
    runp.add_argument("--report", "-r", default=None, help="Report output path (JSON)")
    runp.add_argument("--log-dir", default=None, help="Directory for timestamped suite log files")
    presets = runp.add_mutually_exclusive_group()
    presets.add_argument("--ci", action="store_true", help="Use CI timing settings")
    presets.add_argument("--fast", action="store_true", help="Use fast timing settings for local development")
    presets.add_argument("--slow", action="store_true", help="Use slow timing settings for unstable environments")

    # -------------------------
    # validate-config
    # -------------------------
    valp = sub.add_parser("validate-config", help="Validate a suite config YAML")
    valp.add_argument("path", help="Path to suite config YAML")

    args = p.parse_args(argv)

    if args.cmd == "validate-config":
        try:
            config = HarnessConfig.from_yaml(args.path)
        except ConfigError as e:
            print(f"Invalid config: {e}", file=sys.stderr)
            return 1
        print(f"Config OK: {args.path}")
        for key, value in config.to_dict().items():
            print(f"  {key}: {value}")
        return 0

    if args.cmd == "run":
        try:
            config = _build_config(args)
        except ConfigError as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

        try:
            tester = _build_tester(args.target, config)
        except (ImportError, AttributeError, ValueError) as e:
            print(f"Error loading target {args.target}: {e}", file=sys.stderr)
            return 1

        report = asyncio.run(tester.run_tests())

        print("\n" + "=" * 60)
        print(f"Status:   {report.status.upper()}")
        print(f"Cases:    {len(report.outcomes)}  Passed: {report.passed}  "
              f"Failed: {report.failed}  Skipped: {report.skipped}")
        print(f"Duration: {report.duration_sec:.2f}s")
        if config.report_path:
            print(f"Report:   {config.report_path}")
        return 0 if report.status == "passed" else 2

    return 1


if __name__ == "__main__":
    sys.exit(main())
