"""Google Sheets values API client (API-key access to a shared sheet)."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from results_bot.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_SHEET_RANGE
from results_bot.models import ValueRange

logger = logging.getLogger(__name__)

_SHEETS_API_BASE = "https://sheets.googleapis.com/v4/spreadsheets"


class SheetsError(Exception):
    """Raised when the values API answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(f"Sheets API error {status_code}: {message}")


class SheetsClient:
    """Fetches the raw cell grid of one range of one spreadsheet."""

    def __init__(
        self,
        sheet_id: str,
        api_key: str,
        sheet_range: str = DEFAULT_SHEET_RANGE,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self._sheet_id = sheet_id
        self._api_key = api_key
        self._sheet_range = sheet_range
        self._timeout = timeout

    @property
    def values_url(self) -> str:
        return (
            f"{_SHEETS_API_BASE}/{quote(self._sheet_id, safe='')}"
            f"/values/{quote(self._sheet_range, safe='!:')}"
        )

    async def fetch_values(self) -> list[list[object]]:
        """Return every row of the configured range, header first.

        Raises httpx.HTTPError on transport failure, SheetsError on an error
        status and ValueError when the body is not a values payload.
        """
        async with httpx.AsyncClient(verify=True) as client:
            resp = await client.get(
                self.values_url,
                params={"key": self._api_key},
                timeout=self._timeout,
            )

        if resp.status_code >= 400:
            raise SheetsError(resp.status_code, _error_message(resp))

        value_range = ValueRange.model_validate(resp.json())
        logger.debug(
            "Fetched %d rows from %s", len(value_range.values), self._sheet_range,
        )
        return value_range.values


def _error_message(resp: httpx.Response) -> str:
    try:
        return str(resp.json()["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return resp.reason_phrase or "unknown error"
