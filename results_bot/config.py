"""Immutable runtime settings, built once from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SHEET_RANGE = "Sheet1!A:Z"
DEFAULT_HTTP_TIMEOUT = 30.0
WEBHOOK_HOST_PLACEHOLDER = "your-worker"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    telegram_token: str = Field(min_length=1, repr=False)
    sheet_id: str = Field(min_length=1)
    google_api_key: str = Field(min_length=1, repr=False)
    worker_url: str | None = None
    sheet_range: str = DEFAULT_SHEET_RANGE
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from environment variables. Missing secrets raise KeyError."""
        return cls(
            telegram_token=os.environ["TELEGRAM_TOKEN"],
            sheet_id=os.environ["SHEET_ID"],
            google_api_key=os.environ["GOOGLE_API_KEY"],
            worker_url=os.environ.get("WORKER_URL") or None,
            sheet_range=os.environ.get("SHEET_RANGE", DEFAULT_SHEET_RANGE),
            http_timeout=float(os.environ.get("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )

    @property
    def webhook_url(self) -> str:
        """Public endpoint Telegram should deliver updates to."""
        return f"https://{self.worker_url or WEBHOOK_HOST_PLACEHOLDER}/"
