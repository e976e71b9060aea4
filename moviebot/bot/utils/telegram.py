"""Telegram sending helpers; a failed send is retried, a search never is."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from aiogram import Bot
from aiogram.exceptions import TelegramNetworkError, TelegramRetryAfter
from aiogram.types import Message

from moviebot.logging import logger
from moviebot.utils.retry import retry_async

SEND_MAX_ATTEMPTS = 3
SEND_BASE_DELAY = 0.3
# Rejections such as TelegramBadRequest or TelegramForbiddenError are final.
RETRYABLE_SEND_ERRORS = (TelegramNetworkError, TelegramRetryAfter)


def _flood_wait(exc: BaseException) -> float | None:
    if isinstance(exc, TelegramRetryAfter):
        return float(exc.retry_after)
    return None


async def _send_with_retry(operation_name: str, send: Callable[[], Awaitable[Any]]) -> Any:
    return await retry_async(
        send,
        retry_on=RETRYABLE_SEND_ERRORS,
        max_attempts=SEND_MAX_ATTEMPTS,
        base_delay=SEND_BASE_DELAY,
        delay_hint=_flood_wait,
        logger=logger,
        operation_name=operation_name,
    )


async def answer_with_retry(message: Message, text: str, **kwargs: Any) -> Any:
    """Reply in the chat the message came from."""

    return await _send_with_retry("telegram_answer", lambda: message.answer(text, **kwargs))


async def bot_send_with_retry(bot: Bot, *, chat_id: int, text: str, **kwargs: Any) -> Any:
    return await _send_with_retry(
        "telegram_send_message",
        lambda: bot.send_message(chat_id=chat_id, text=text, **kwargs),
    )


__all__ = ["RETRYABLE_SEND_ERRORS", "answer_with_retry", "bot_send_with_retry"]
