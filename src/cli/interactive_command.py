"""Interactive prompt workflow for hexconv CLI.

This module asks for source, destination, and credentials on stdin,
then runs the same batch commands as the non-interactive CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from cli.report_output import print_created_spreadsheet, run_reported_batch
from convert.converter_client import HexConvClient
from core.constants import CANCELLED_EXIT_CODE
from core.errors import HexConvError
from sinks.sheets_client import SheetsCredentials

Prompt = Callable[[str], str]


def add_interactive_command(subparsers: Any) -> None:
    """Register interactive subcommand."""
    subparsers.add_parser(
        "interactive",
        help="Prompt for source, export option, and credentials",
    )


def run_interactive_command(client: HexConvClient, prompt: Prompt = input) -> int:
    """Prompt for options and run the chosen export.

    Args:
        client: SDK client.
        prompt: Line reader, ``input`` by default.

    Returns:
        Exit code; 1 when input ends early, 130 when interrupted at a prompt.
    """
    try:
        return _run_prompted_export(client, prompt)
    except EOFError:
        print("\nInput closed before all answers were given.")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return CANCELLED_EXIT_CODE


def _run_prompted_export(client: HexConvClient, prompt: Prompt) -> int:
    source = _ask(prompt, "Enter source folder path containing hex files: ")
    print("\nChoose export option:")
    print("1. Export to local folder")
    print("2. Export to Google Sheets")
    choice = _ask(prompt, "Enter your choice (1 or 2): ")
    if choice == "1":
        output_dir = _ask(prompt, "Enter destination folder path for ASCII files: ")
        return run_reported_batch(
            source,
            lambda token: client.local_converter(output_dir, token),
        )
    if choice == "2":
        return _run_interactive_sheets(client, source, prompt)
    print("Invalid choice")
    return 1


def _run_interactive_sheets(client: HexConvClient, source: str, prompt: Prompt) -> int:
    print("\nChoose authentication method:")
    print("1. API Key")
    print("2. Service Account Credentials")
    auth_choice = _ask(prompt, "Enter your choice (1 or 2): ")
    try:
        if auth_choice == "1":
            credentials = SheetsCredentials(api_key=_ask(prompt, "Enter Google Sheets API Key: "))
        elif auth_choice == "2":
            credentials_path = _ask(prompt, "Enter path to Google credentials JSON file: ")
            credentials = SheetsCredentials(service_account_file=Path(credentials_path))
        else:
            print("Invalid authentication choice")
            return 1
    except HexConvError as error:
        print(f"error={error}")
        return 1
    spreadsheet_id = _ask(prompt, "Enter spreadsheet ID (or leave empty to create new): ")
    return run_reported_batch(
        source,
        lambda token: client.sheets_converter(
            credentials,
            spreadsheet_id=spreadsheet_id or None,
            cancellation=token,
            on_spreadsheet_created=print_created_spreadsheet,
        ),
    )


def _ask(prompt: Prompt, message: str) -> str:
    return prompt(message).strip()
