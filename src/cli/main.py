"""LambdaPulse CLI entry points.
This module exposes local commands for the transform and query paths.
It maps argparse commands onto SDK calls against the configured AWS stores.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import PulseConfig
from core.errors import PulseDecodeError, PulseError
from ingest.firehose_event import build_transformation_response, records_from_event
from store.pulse_sdk import PulseClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="lambdapulse", description="LambdaPulse CLI")
    parser.add_argument("--region", help="Override PULSE_AWS_REGION for this command")
    parser.add_argument("--profile", help="Override PULSE_AWS_PROFILE for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_transform_command(subparsers)
    _add_latest_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None, client: PulseClient | None = None) -> int:
    """Run the LambdaPulse CLI.

    Args:
        argv: Optional argument vector.
        client: Optional pre-built SDK client.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = client or _build_client(args.region, args.profile)
        if args.command == "transform":
            return _run_transform_command(client, args)
        if args.command == "latest":
            return _run_latest_command(client)
    except PulseError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(region: str | None, profile: str | None) -> PulseClient:
    """Build SDK client with optional AWS session overrides.

    Args:
        region: Optional region override.
        profile: Optional profile override.

    Returns:
        Configured SDK client.
    """
    config = PulseConfig.from_env()
    if region:
        config = replace(config, aws_region=region)
    if profile:
        config = replace(config, aws_profile=profile)
    return PulseClient(config)


def _run_transform_command(client: PulseClient, args: argparse.Namespace) -> int:
    """Handle transform command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    event = _read_event_file(Path(args.event_file).expanduser())
    report = client.transform(records_from_event(event))
    print(json.dumps(build_transformation_response(report), indent=2))
    if report.rejected_record_ids:
        print(
            f"rejected={len(report.rejected_record_ids)}: "
            + ",".join(report.rejected_record_ids),
            file=sys.stderr,
        )
    return 0


def _run_latest_command(client: PulseClient) -> int:
    """Handle latest command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    rows = client.latest_points()
    print(json.dumps(rows, indent=2))
    return 0


def _read_event_file(event_path: Path) -> dict[str, Any]:
    """Load a saved Firehose transformation event.

    Raises:
        PulseDecodeError: If the file is missing or not a JSON object.
    """
    try:
        payload = json.loads(event_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise PulseDecodeError(f"Failed to read event file {event_path}: {error}.") from error
    except json.JSONDecodeError as error:
        raise PulseDecodeError(
            f"Failed to parse event file {event_path}: {error.msg}. Fix the JSON and retry."
        ) from error
    if not isinstance(payload, dict):
        raise PulseDecodeError(f"Invalid event file {event_path}: expected JSON object.")
    return payload


def _add_transform_command(subparsers: Any) -> None:
    """Register transform subcommand."""
    parser = subparsers.add_parser(
        "transform",
        help="Run the transform stage over a saved Firehose event",
    )
    parser.add_argument("event_file", help="Path to a Firehose transformation event JSON file")


def _add_latest_command(subparsers: Any) -> None:
    """Register latest subcommand."""
    subparsers.add_parser("latest", help="Print the most recent price points")
