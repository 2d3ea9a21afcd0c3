"""
Row sources for the survey spreadsheet.

The aggregation layer only sees the RowSource protocol, so it can be fed
synthetic rows in tests. GoogleSheetsRowSource is the production source.
"""
import asyncio
from typing import List, Optional, Protocol

from google.oauth2 import service_account
from googleapiclient.discovery import build

from core.config import get_settings
from core.logfire_config import log_error, log_info, log_span
from models.rows import Row


class FetchError(Exception):
    """A range could not be read from the source (auth, network, bad range, config)."""

    def __init__(self, range_name: str, reason: str):
        self.range_name = range_name
        self.reason = reason
        super().__init__(f"Could not fetch range {range_name!r}: {reason}")


class RowSource(Protocol):
    async def fetch(self, range_name: str) -> List[Row]:
        ...


class GoogleSheetsRowSource:
    """Read-only Google Sheets client using a service-account key file."""

    def __init__(self, spreadsheet_id: Optional[str] = None, credentials_file: Optional[str] = None):
        self.settings = get_settings()
        self._spreadsheet_id = spreadsheet_id
        self._credentials_file = credentials_file or self.settings.google_sheets.credentials_file
        self._credentials = None

    @property
    def spreadsheet_id(self) -> str:
        if self._spreadsheet_id:
            return self._spreadsheet_id
        return self.settings.google_sheets.require_spreadsheet_id()

    @property
    def credentials(self):
        if not self._credentials:
            self._credentials = service_account.Credentials.from_service_account_file(
                self._credentials_file,
                scopes=self.settings.google_sheets.scopes,
            )
            log_info("Google Sheets credentials loaded", credentials_file=self._credentials_file)
        return self._credentials

    def _get_values(self, range_name: str) -> dict:
        # A resource per call: the underlying HTTP transport is not thread-safe
        service = build("sheets", "v4", credentials=self.credentials, cache_discovery=False)
        try:
            return service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
            ).execute()
        finally:
            service.close()

    async def fetch(self, range_name: str) -> List[Row]:
        """Fetch the rows of `range_name`; an empty range gives []."""
        try:
            with log_span("Fetching sheet range", range=range_name):
                response = await asyncio.to_thread(self._get_values, range_name)
        except Exception as e:
            log_error("Failed to fetch sheet range", error=e, range=range_name)
            raise FetchError(range_name, str(e)) from e

        rows = response.get("values", [])
        log_info("Sheet range fetched", range=range_name, rows=len(rows))
        return rows
