"""Report unhandled handler errors to the log and, optionally, an admin chat."""

from __future__ import annotations

import traceback

from aiogram import Bot
from aiogram.dispatcher.event.bases import UNHANDLED
from aiogram.types import ErrorEvent, Message, Update

from moviebot.bot.utils.telegram import bot_send_with_retry
from moviebot.config import BotSettings
from moviebot.logging import logger

# Telegram messages are limited to 4096 characters.
TELEGRAM_MESSAGE_LIMIT = 3900
TRACEBACK_CHAR_LIMIT = 1800
QUERY_CHAR_LIMIT = 300


class ErrorMonitor:
    """Async handler plugged into the aiogram errors observer."""

    def __init__(self, settings: BotSettings) -> None:
        self._settings = settings

    async def handle_error(self, event: ErrorEvent, bot: Bot):
        update_id = getattr(event.update, "update_id", None)
        logger.error(
            "bot_error_captured",
            exception_type=event.exception.__class__.__name__,
            exception=str(event.exception),
            update_id=update_id,
        )

        admin_id = self._settings.admin_telegram_id
        if admin_id is None:
            return UNHANDLED

        try:
            await bot_send_with_retry(
                bot,
                chat_id=admin_id,
                text=self._build_message(event),
                parse_mode=None,
            )
        except Exception:
            logger.exception("error_monitor_notification_failed", update_id=update_id)
        return UNHANDLED

    def _build_message(self, event: ErrorEvent) -> str:
        exception = event.exception
        message = _message_of(event.update)
        lines = [
            "BOT ERROR DETECTED",
            f"Environment: {self._settings.environment}",
            f"Exception: {exception.__class__.__name__}: {exception}",
            f"Update ID: {getattr(event.update, 'update_id', 'unknown')}",
        ]
        if message is not None:
            chat_id = message.chat.id if message.chat else "unknown"
            user_id = message.from_user.id if message.from_user else "unknown"
            lines.append(f"Chat: {chat_id} | User: {user_id}")
            if message.text:
                lines.append(f"Text: {_truncate(message.text, QUERY_CHAR_LIMIT)}")

        trace = "".join(
            traceback.format_exception(exception.__class__, exception, exception.__traceback__)
        ).strip()
        if trace:
            lines.extend(["", "Traceback:", _truncate(trace, TRACEBACK_CHAR_LIMIT)])

        return _truncate("\n".join(lines), TELEGRAM_MESSAGE_LIMIT)


def _message_of(update: Update | None) -> Message | None:
    if update is None:
        return None
    return update.message or update.edited_message


def _truncate(value: str, limit: int) -> str:
    value = value.strip()
    if len(value) <= limit:
        return value
    return f"{value[: limit - 15].rstrip()}\n...[truncated]"


__all__ = ["ErrorMonitor"]
