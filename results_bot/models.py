"""Shared Pydantic data models for the student results bot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Telegram Update Models ---


class Chat(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    chat: Chat
    text: str | None = None


class ChatUpdate(BaseModel):
    """One inbound Telegram update. Only the fields the bot reads are modelled."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    update_id: int | None = None
    message: Message | None = None


# --- Sheets Models ---


class ValueRange(BaseModel):
    """Body of a Sheets ``values.get`` response. ``values`` is omitted for empty ranges."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    range: str | None = None
    values: list[list[object]] = Field(default_factory=list)


# --- Record Models ---

StudentRecord = dict[str, str]


def _cell_to_str(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class RecordTable(BaseModel):
    """A decoded sheet: the header row plus at least one data row."""

    model_config = ConfigDict(frozen=True)

    headers: list[str]
    rows: list[list[str]] = Field(min_length=1)

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        return [_cell_to_str(cell) for cell in value]

    @field_validator("rows", mode="before")
    @classmethod
    def _coerce_rows(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        return [
            [_cell_to_str(cell) for cell in row] if isinstance(row, list) else row
            for row in value
        ]

    @classmethod
    def from_values(cls, values: list[list[object]] | None) -> RecordTable | None:
        """Decode a raw values grid. Returns None without a header and a data row."""
        if not values or len(values) < 2:
            return None
        return cls(headers=values[0], rows=values[1:])

    def record_for(self, row: list[str]) -> StudentRecord:
        """Zip the header onto a row; absent or empty cells become ''."""
        record: StudentRecord = {}
        for index, header in enumerate(self.headers):
            record[header] = row[index] if index < len(row) else ""
        return record
