"""Telegram Bot API client.

Sends replies and chat actions, and registers the bot's webhook. Every call
is a single request with no retry; the outcome is returned as an ApiResult
and transport errors never propagate.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from results_bot.config import DEFAULT_HTTP_TIMEOUT
from results_bot.models import ChatUpdate
from results_bot.webhook.models import ApiResult

logger = logging.getLogger(__name__)

_TELEGRAM_API_BASE = "https://api.telegram.org"

ChatId = int | str


class TelegramClient:
    """Outbound side of the Telegram Bot API."""

    def __init__(
        self,
        bot_token: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self._bot_token = bot_token
        self._timeout = timeout

    @staticmethod
    def extract_message(update: ChatUpdate) -> tuple[ChatId, str] | None:
        """Return (chat_id, text) for a message update, None for anything else."""
        if update.message is None:
            return None
        return update.message.chat.id, update.message.text or ""

    async def send_message(
        self, chat_id: ChatId, text: str, parse_mode: str | None = "Markdown",
    ) -> ApiResult:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode
        return await self._call("sendMessage", json_body=payload)

    async def send_chat_action(
        self, chat_id: ChatId, action: str = "typing",
    ) -> ApiResult:
        return await self._call(
            "sendChatAction", json_body={"chat_id": chat_id, "action": action},
        )

    async def set_webhook(self, url: str) -> ApiResult:
        """Point Telegram at ``url``. The platform's reply is kept whole in the result."""
        logger.info("Registering Telegram webhook at %s", url)
        return await self._call("setWebhook", params={"url": url})

    async def _call(
        self,
        method: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> ApiResult:
        url = f"{_TELEGRAM_API_BASE}/bot{self._bot_token}/{method}"

        try:
            async with httpx.AsyncClient(verify=True) as client:
                if json_body is not None:
                    resp = await client.post(url, json=json_body, timeout=self._timeout)
                else:
                    resp = await client.get(url, params=params, timeout=self._timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # The exception text can embed the request URL, which holds the token
            reason = exc.__class__.__name__
            logger.warning("Telegram %s failed: %s", method, reason)
            return ApiResult(ok=False, error=reason)

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            logger.warning(
                "Telegram %s returned a non-JSON body (HTTP %s)", method, resp.status_code,
            )
            return ApiResult(
                ok=False,
                status_code=resp.status_code,
                error=f"Unexpected response from Telegram (HTTP {resp.status_code})",
            )

        ok = resp.status_code < 400 and body.get("ok", True) is not False
        if not ok:
            logger.warning(
                "Telegram %s rejected (HTTP %s): %s",
                method, resp.status_code, body.get("description"),
            )
        return ApiResult(ok=ok, status_code=resp.status_code, payload=body)
