"""Update handling: routes a chat message to the welcome reply or a result lookup."""

from __future__ import annotations

import logging

from results_bot.formatter import ERROR_TEXT, WELCOME_TEXT, format_result, not_found_text
from results_bot.models import ChatUpdate
from results_bot.sheets.lookup import RecordLookup
from results_bot.webhook.telegram import ChatId, TelegramClient

logger = logging.getLogger(__name__)

START_COMMAND = "/start"


class UpdateHandler:
    """Handles one inbound update end to end."""

    def __init__(self, telegram: TelegramClient, lookup: RecordLookup) -> None:
        self._telegram = telegram
        self._lookup = lookup

    async def handle_update(self, update: ChatUpdate) -> None:
        extracted = self._telegram.extract_message(update)
        if extracted is None:
            return
        chat_id, text = extracted

        if text == START_COMMAND:
            await self._telegram.send_message(chat_id, WELCOME_TEXT)
            return

        if not text.startswith("/"):
            await self.handle_admission(chat_id, text.strip())
        # Other commands get no reply

    async def handle_admission(self, chat_id: ChatId, admission_no: str) -> None:
        """Look up ``admission_no`` and reply with the result card or a not-found notice."""
        try:
            typing = await self._telegram.send_chat_action(chat_id, "typing")
            if not typing.ok:
                logger.info("Typing indicator not delivered: %s", typing.description)

            record = await self._lookup.find(admission_no)
            if record is None:
                reply = not_found_text(admission_no)
            else:
                reply = format_result(record)

            sent = await self._telegram.send_message(chat_id, reply)
            if not sent.ok:
                logger.error("Reply to chat %s not delivered: %s", chat_id, sent.description)
        except Exception:
            logger.exception("Failed to process admission lookup for chat %s", chat_id)
            await self._telegram.send_message(chat_id, ERROR_TEXT)
