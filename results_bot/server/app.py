"""FastAPI webhook application."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from results_bot.config import Settings
from results_bot.logging_config import setup_logging
from results_bot.models import ChatUpdate
from results_bot.sheets.client import SheetsClient
from results_bot.sheets.lookup import RecordLookup
from results_bot.webhook.handler import UpdateHandler
from results_bot.webhook.telegram import TelegramClient

logger = logging.getLogger(__name__)

SETUP_PATH = "/setup"
INFO_TEXT = "Student Results Bot is running! Open /setup to register the webhook."


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    return create_app(settings)


def create_app(
    settings: Settings,
    telegram: TelegramClient | None = None,
    lookup: RecordLookup | None = None,
) -> FastAPI:
    """Create the webhook app. Collaborators default to ones built from ``settings``."""
    if telegram is None:
        telegram = TelegramClient(settings.telegram_token, timeout=settings.http_timeout)
    if lookup is None:
        sheets = SheetsClient(
            settings.sheet_id,
            settings.google_api_key,
            sheet_range=settings.sheet_range,
            timeout=settings.http_timeout,
        )
        lookup = RecordLookup(sheets)
    handler = UpdateHandler(telegram, lookup)

    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    async def dispatch(request: Request) -> Response:
        if request.method == "POST":
            return await _receive_update(request, handler)
        if request.method == "GET" and request.url.path == SETUP_PATH:
            return await _register_webhook(telegram, settings.webhook_url)
        return PlainTextResponse(INFO_TEXT)

    # methods=None: the route answers every HTTP method, not only the common ones
    app.add_route("/{path:path}", dispatch, methods=None, include_in_schema=False)

    return app


async def _receive_update(request: Request, handler: UpdateHandler) -> Response:
    body = await request.body()
    try:
        update = ChatUpdate.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Rejected malformed update: %d error(s)", exc.error_count())
        return PlainTextResponse("Error", status_code=500)

    try:
        await handler.handle_update(update)
    except Exception:
        # The update was accepted; Telegram must not redeliver it
        logger.exception("Unhandled error while processing update %s", update.update_id)
    return PlainTextResponse("OK")


async def _register_webhook(telegram: TelegramClient, webhook_url: str) -> Response:
    result = await telegram.set_webhook(webhook_url)
    if result.payload is None:
        return PlainTextResponse(f"Error: {result.description}", status_code=500)
    return Response(
        content=json.dumps(result.payload, indent=2),
        status_code=200,
        media_type="application/json",
    )
