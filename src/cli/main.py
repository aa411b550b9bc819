"""hexconv CLI entry points.
This module exposes batch conversion commands for local and sheets export.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

from cli.interactive_command import add_interactive_command, run_interactive_command
from cli.report_output import print_created_spreadsheet, run_reported_batch
from convert.converter_client import HexConvClient
from core.config import HexConvConfig
from core.errors import HexConvError
from sinks.sheets_client import SheetsCredentials


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="hexconv", description="Batch hex to ASCII converter")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_local_command(subparsers)
    _add_sheets_command(subparsers)
    add_interactive_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the hexconv CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = HexConvClient(HexConvConfig.from_env())
    except HexConvError as error:
        print(f"error={error}")
        return 1
    if args.command == "local":
        return _run_local_command(client, args)
    if args.command == "sheets":
        return _run_sheets_command(client, args)
    if args.command == "interactive":
        return run_interactive_command(client)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_local_command(client: HexConvClient, args: argparse.Namespace) -> int:
    """Handle local command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    return run_reported_batch(
        args.source,
        lambda token: client.local_converter(args.output_dir, token),
    )


def _run_sheets_command(client: HexConvClient, args: argparse.Namespace) -> int:
    """Handle sheets command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        credentials = SheetsCredentials(
            api_key=args.api_key,
            service_account_file=Path(args.credentials) if args.credentials else None,
        )
    except HexConvError as error:
        print(f"error={error}")
        return 1
    return run_reported_batch(
        args.source,
        lambda token: client.sheets_converter(
            credentials,
            spreadsheet_id=args.spreadsheet_id,
            cancellation=token,
            on_spreadsheet_created=print_created_spreadsheet,
        ),
    )


def _add_local_command(subparsers: Any) -> None:
    """Register local subcommand."""
    parser = subparsers.add_parser("local", help="Convert hex files into a local folder")
    parser.add_argument("source", help="Source folder containing hex files")
    parser.add_argument("output_dir", help="Destination folder for ASCII files")


def _add_sheets_command(subparsers: Any) -> None:
    """Register sheets subcommand."""
    parser = subparsers.add_parser("sheets", help="Append decoded hex files to Google Sheets")
    parser.add_argument("source", help="Source folder containing hex files")
    auth_group = parser.add_mutually_exclusive_group(required=True)
    auth_group.add_argument("--api-key", help="Google Sheets API key (existing spreadsheets only)")
    auth_group.add_argument("--credentials", help="Path to service account credentials JSON")
    parser.add_argument(
        "--spreadsheet-id",
        help="Existing spreadsheet id; a new spreadsheet is created when omitted",
    )
