"""Google Sheets API adapter.

This module encapsulates credential loading, service construction, and
the two spreadsheet calls used by the sheets sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from core.config import HexConvConfig
from core.constants import (
    SHEETS_API_NAME,
    SHEETS_API_VERSION,
    SHEETS_SCOPE,
    SHEETS_VALUE_INPUT_OPTION,
)
from core.errors import CredentialSetupError, HexConvDependencyError, RemoteSinkError


@dataclass(frozen=True)
class SheetsCredentials:
    """Spreadsheet credential choice.

    Attributes:
        api_key: Read-only API key.
        service_account_file: Service account JSON key path.
    """

    api_key: str | None = None
    service_account_file: Path | None = None

    def __post_init__(self) -> None:
        if bool(self.api_key) == bool(self.service_account_file):
            raise CredentialSetupError(
                "Exactly one of an API key or a service account credentials file is required. "
                "Pass --api-key or --credentials."
            )

    @property
    def can_create(self) -> bool:
        """Return whether these credentials may create spreadsheets."""
        return self.service_account_file is not None


class GoogleSheetsGateway:
    """Thin wrapper over a Sheets v4 service resource."""

    def __init__(self, service: Any) -> None:
        self._service = service

    def create_spreadsheet(self, title: str) -> str:
        """Create a spreadsheet and return its id.

        Raises:
            RemoteSinkError: If the API call fails.
        """
        body = {"properties": {"title": title}}
        try:
            response = (
                self._service.spreadsheets().create(body=body, fields="spreadsheetId").execute()
            )
            return str(response["spreadsheetId"])
        except Exception as error:
            raise RemoteSinkError(
                f"Unable to create spreadsheet '{title}': {error!r}. "
                "Check credentials and network access."
            ) from error

    def append_row(self, spreadsheet_id: str, sheet_range: str, values: Sequence[str]) -> None:
        """Append one row of raw values after the table in ``sheet_range``.

        Raises:
            RemoteSinkError: If the API call fails.
        """
        request = self._service.spreadsheets().values().append(
            spreadsheetId=spreadsheet_id,
            range=sheet_range,
            valueInputOption=SHEETS_VALUE_INPUT_OPTION,
            body={"values": [list(values)]},
        )
        try:
            request.execute()
        except Exception as error:
            raise RemoteSinkError(
                f"Unable to append data to spreadsheet {spreadsheet_id}: {error}."
            ) from error


def create_sheets_gateway(credentials: SheetsCredentials, config: HexConvConfig) -> GoogleSheetsGateway:
    """Build an authorized Sheets gateway.

    Args:
        credentials: API key or service account choice.
        config: Runtime config carrying the request timeout.

    Returns:
        Gateway bound to a Sheets v4 service.

    Raises:
        HexConvDependencyError: If Google client libraries are missing.
        CredentialSetupError: If the credentials file cannot be loaded.
    """
    try:
        import httplib2
        from googleapiclient.discovery import build
    except ImportError as error:
        raise HexConvDependencyError(
            "Google Sheets export requires google-api-python-client, but it is not installed. "
            "Install google-api-python-client to export to spreadsheets."
        ) from error
    http = httplib2.Http(timeout=config.request_timeout_seconds)
    if credentials.api_key:
        service = build(
            SHEETS_API_NAME,
            SHEETS_API_VERSION,
            developerKey=credentials.api_key,
            http=http,
            cache_discovery=False,
        )
        return GoogleSheetsGateway(service)
    authorized_http = _authorize_service_account(credentials.service_account_file, http)
    service = build(
        SHEETS_API_NAME,
        SHEETS_API_VERSION,
        http=authorized_http,
        cache_discovery=False,
    )
    return GoogleSheetsGateway(service)


def _authorize_service_account(credentials_file: Path | None, http: Any) -> Any:
    """Load service account credentials and wrap the transport.

    Args:
        credentials_file: Service account JSON key path.
        http: Base httplib2 transport.

    Returns:
        Authorized httplib2 transport.

    Raises:
        HexConvDependencyError: If google-auth libraries are missing.
        CredentialSetupError: If the file is unreadable or invalid.
    """
    try:
        from google.oauth2 import service_account
        from google_auth_httplib2 import AuthorizedHttp
    except ImportError as error:
        raise HexConvDependencyError(
            "Service account authentication requires google-auth and google-auth-httplib2. "
            "Install both packages to use --credentials."
        ) from error
    try:
        google_credentials = service_account.Credentials.from_service_account_file(
            str(credentials_file),
            scopes=[SHEETS_SCOPE],
        )
    except OSError as error:
        raise CredentialSetupError(
            f"Unable to read credentials file {credentials_file}: {error.strerror or error}."
        ) from error
    except ValueError as error:
        raise CredentialSetupError(
            f"Unable to parse credentials in {credentials_file}: {error}. "
            "Provide a service account JSON key file."
        ) from error
    return AuthorizedHttp(google_credentials, http=http)
