"""Data models for outbound messaging calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ApiResult:
    """Outcome of a single Telegram Bot API call.

    ``status_code`` is None when the request never completed (connect error,
    timeout). ``payload`` is the decoded JSON body when there was one.
    """

    ok: bool
    status_code: int | None = None
    payload: dict[str, Any] | None = None
    error: str | None = None

    @property
    def description(self) -> str:
        if self.error:
            return self.error
        if self.payload and "description" in self.payload:
            return str(self.payload["description"])
        return f"HTTP {self.status_code}"
