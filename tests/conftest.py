"""Shared test fixtures for the student results bot."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from results_bot.config import Settings
from results_bot.models import ChatUpdate
from results_bot.webhook.models import ApiResult


@pytest.fixture
def settings() -> Settings:
    return make_settings()


# --- Factory functions for test data ---

SAMPLE_GRID: list[list[object]] = [
    ["Roll", "Name", "Math"],
    ["1", "Alice", "90"],
]


def make_settings(**kwargs: Any) -> Settings:
    """Factory for Settings with sensible defaults."""
    defaults: dict[str, Any] = {
        "telegram_token": "123:ABC",
        "sheet_id": "sheet-123",
        "google_api_key": "google-key",
        "worker_url": "bot.example.com",
    }
    defaults.update(kwargs)
    return Settings(**defaults)


def make_update_payload(
    text: str | None = "hello",
    chat_id: int | str = 12345,
    update_id: int = 1,
) -> dict[str, Any]:
    """Raw Telegram update body as the platform posts it."""
    message: dict[str, Any] = {"message_id": 1, "chat": {"id": chat_id}}
    if text is not None:
        message["text"] = text
    return {"update_id": update_id, "message": message}


def make_update(**kwargs: Any) -> ChatUpdate:
    return ChatUpdate.model_validate(make_update_payload(**kwargs))


def make_http_response(
    status_code: int = 200,
    json_body: object = None,
    json_error: Exception | None = None,
) -> MagicMock:
    """Stand-in for an httpx.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason_phrase = "Error" if status_code >= 400 else "OK"
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_body
    return resp


def mock_async_client(mock_client_cls: MagicMock) -> AsyncMock:
    """Wire a patched ``httpx.AsyncClient`` class to return one async-context client."""
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


def make_telegram_mock() -> MagicMock:
    """TelegramClient double whose calls all succeed."""
    from results_bot.webhook.telegram import TelegramClient

    telegram = MagicMock()
    telegram.extract_message.side_effect = TelegramClient.extract_message
    ok = ApiResult(ok=True, status_code=200, payload={"ok": True})
    telegram.send_message = AsyncMock(return_value=ok)
    telegram.send_chat_action = AsyncMock(return_value=ok)
    telegram.set_webhook = AsyncMock(return_value=ok)
    return telegram
