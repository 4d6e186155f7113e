"""Command-line interface for the audit sample date generator.

Usage:
    audit-sampling generate --control-id AC-01 --frequency daily --risk high \
        --start 2024-01-01 --end 2024-12-31 --seed fy24
    audit-sampling generate --config control.json --format json --output out.json
    audit-sampling validate --config control.json

Environment Variables:
    AUDIT_SAMPLING_LOG_LEVEL: Log level (default: WARNING)
    AUDIT_SAMPLING_JSON_LOGS: Emit JSON logs when true
    AUDIT_SAMPLING_LOG_FILE: Also write logs to this file
    AUDIT_SAMPLING_OUTPUT_FORMAT: csv or json (default: csv)
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import pydantic

from audit_sampling.config import EngineSettings
from audit_sampling.core.errors import ConfigurationError, SamplingValidationError
from audit_sampling.core.logging import configure_logging
from audit_sampling.engine import (
    export_to_csv,
    export_to_json,
    generate_samples,
    require_valid_config,
    validate_config,
)
from audit_sampling.models.sampling import AuditPeriod, SamplingConfig

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {field} '{value}', expected YYYY-MM-DD",
            source="arguments",
            field=field,
        )


def load_config_file(path: str) -> SamplingConfig:
    """Read a JSON sampling config.

    Raises:
        ConfigurationError: If the file is unreadable or not a valid config
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file: {e}", source=path)

    try:
        return SamplingConfig.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            f"Invalid sampling config: {e.error_count()} error(s)",
            source=path,
            details={"errors": [err["msg"] for err in e.errors()]},
        )


def config_from_args(args: argparse.Namespace) -> SamplingConfig:
    """Build a sampling config from a config file or individual options."""
    if args.config:
        config = load_config_file(args.config)
        if args.seed:
            config = config.model_copy(update={"seed": args.seed})
        return config

    required = {
        "control_id": args.control_id,
        "frequency": args.frequency,
        "risk": args.risk,
        "start": args.start,
        "end": args.end,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigurationError(
            "Missing options: " + ", ".join(f"--{name.replace('_', '-')}" for name in missing),
            source="arguments",
        )

    return SamplingConfig(
        control_id=args.control_id,
        control_frequency=args.frequency,
        risk_level=args.risk,
        audit_period=AuditPeriod(
            start_date=_parse_date(args.start, "start date"),
            end_date=_parse_date(args.end, "end date"),
        ),
        samples_per_quarter=args.samples_per_quarter,
        minimum_interval=args.minimum_interval,
        seed=args.seed,
    )


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="JSON file holding a sampling config")
    parser.add_argument("--control-id", help="Control identifier")
    parser.add_argument("--frequency", help="Control frequency: daily, weekly or monthly")
    parser.add_argument("--risk", help="Risk level: low, moderate or high")
    parser.add_argument("--start", help="Audit period start (YYYY-MM-DD)")
    parser.add_argument("--end", help="Audit period end (YYYY-MM-DD)")
    parser.add_argument("--samples-per-quarter", type=int, help="Override default sample count")
    parser.add_argument("--minimum-interval", type=int, help="Override minimum days between samples")
    parser.add_argument("--seed", help="Seed for reproducible results")


def build_parser(settings: EngineSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audit-sampling",
        description="Generate reproducible audit sample dates per quarter",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Log level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.json_logs,
        help="Emit structured JSON logs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate sample dates")
    _add_config_arguments(generate)
    generate.add_argument(
        "--format",
        choices=["csv", "json"],
        default=settings.output_format,
        help=f"Output format (default: {settings.output_format})",
    )
    generate.add_argument("--output", help="Write to this file instead of stdout")

    validate = subparsers.add_parser("validate", help="Validate a sampling config")
    _add_config_arguments(validate)

    return parser


def _run_generate(args: argparse.Namespace, config: SamplingConfig) -> int:
    try:
        require_valid_config(config)
    except SamplingValidationError as e:
        for message in e.failed_checks:
            print(message, file=sys.stderr)
        return EXIT_USAGE

    result = generate_samples(config)
    output = export_to_json(result) if args.format == "json" else export_to_csv(result)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return EXIT_OK


def _run_validate(config: SamplingConfig) -> int:
    errors = validate_config(config)
    for message in errors:
        print(message)
    return EXIT_INVALID if errors else EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    settings = EngineSettings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {settings.log_level!r}")

    configure_logging(
        level=args.log_level,
        json_format=args.json_logs,
        log_file=settings.log_file,
    )

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    if args.command == "validate":
        return _run_validate(config)
    return _run_generate(args, config)


if __name__ == "__main__":
    sys.exit(main())
