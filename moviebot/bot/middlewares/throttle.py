"""Per-user sliding-window throttle so searches cannot be fired in bursts."""

from __future__ import annotations

import time
from collections import defaultdict, deque
from typing import Any, Awaitable, Callable, Deque, Dict

from aiogram import BaseMiddleware
from aiogram.types import Message, TelegramObject

from moviebot.config import BotSettings, get_settings
from moviebot.i18n import I18nService
from moviebot.logging import logger


class ThrottleMiddleware(BaseMiddleware):
    def __init__(self, settings: BotSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self.window_seconds = self.settings.throttle.interval_seconds
        self.max_requests = self.settings.throttle.max_requests
        self._i18n = I18nService(default_locale=self.settings.default_language)
        self._events: Dict[int, Deque[float]] = defaultdict(deque)

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        if not isinstance(event, Message) or event.from_user is None:
            return await handler(event, data)

        if self.max_requests <= 0:
            return await handler(event, data)

        user_id = event.from_user.id
        now = time.monotonic()
        bucket = self._events[user_id]

        while bucket and now - bucket[0] > self.window_seconds:
            bucket.popleft()

        if len(bucket) >= self.max_requests:
            logger.info("throttle_limited", user_id=user_id, window_seconds=self.window_seconds)
            text = self._i18n.gettext(
                "throttle.limited",
                locale=getattr(event.from_user, "language_code", None),
            )
            await event.answer(text, parse_mode=None)
            return None

        bucket.append(now)
        return await handler(event, data)


__all__ = ["ThrottleMiddleware"]
