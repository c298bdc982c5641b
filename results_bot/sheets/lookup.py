"""Record lookup: find one student's row by admission number."""

from __future__ import annotations

import logging

import httpx

from results_bot.models import RecordTable, StudentRecord
from results_bot.sheets.client import SheetsClient, SheetsError

logger = logging.getLogger(__name__)

# Header substrings that mark the identifier column, checked in order per header
IDENTIFIER_HINTS = ("admission", "adm", "roll")


def find_identifier_column(headers: list[str]) -> int:
    """Index of the first header naming an admission/roll number, else 0."""
    for index, header in enumerate(headers):
        name = header.lower()
        if any(hint in name for hint in IDENTIFIER_HINTS):
            return index
    return 0


def find_record(table: RecordTable, key: str) -> StudentRecord | None:
    """First data row whose identifier cell equals ``key`` exactly."""
    column = find_identifier_column(table.headers)
    for row in table.rows:
        if column < len(row) and row[column] == key:
            return table.record_for(row)
    return None


class RecordLookup:
    """Fetches the sheet fresh on every call and searches it."""

    def __init__(self, sheets: SheetsClient) -> None:
        self._sheets = sheets

    async def find(self, key: str) -> StudentRecord | None:
        """Return the matching record, or None when absent or the sheet is unreadable."""
        try:
            values = await self._sheets.fetch_values()
            table = RecordTable.from_values(values)
        except (httpx.HTTPError, httpx.InvalidURL, SheetsError, ValueError) as exc:
            logger.error("Sheets lookup failed: %s", exc, exc_info=True)
            return None

        if table is None:
            logger.warning("Sheet has no data rows; nothing to search")
            return None

        record = find_record(table, key)
        if record is None:
            logger.info("No row matches admission number %r", key)
        return record
