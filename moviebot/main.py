"""Application entrypoint."""

from __future__ import annotations

import asyncio

import httpx
from aiogram import Bot, Dispatcher
from aiogram.client.session.aiohttp import AiohttpSession

from moviebot.bot.middlewares import ThrottleMiddleware
from moviebot.bot.routers import setup_routers
from moviebot.config import get_settings
from moviebot.logging import configure_logging, logger
from moviebot.services.error_monitor import ErrorMonitor
from moviebot.services.recommender import RecommendationClient
from moviebot.services.sessions import SearchSessionRegistry


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    session = (
        AiohttpSession(proxy=settings.telegram_proxy) if settings.telegram_proxy else None
    )
    bot = Bot(token=settings.telegram_token.get_secret_value(), session=session)
    dp = Dispatcher()
    dp.include_router(setup_routers())
    error_monitor = ErrorMonitor(settings=settings)
    dp.errors.register(error_monitor.handle_error)
    dp.message.middleware(ThrottleMiddleware(settings))

    async with httpx.AsyncClient(timeout=None) as http_client:
        client = RecommendationClient(http_client, settings=settings.recommender)
        search_sessions = SearchSessionRegistry(
            client, max_sessions=settings.recommender.max_sessions
        )
        logger.info(
            "bot_starting",
            environment=settings.environment,
            recommender_url=client.endpoint_url,
        )
        await dp.start_polling(bot, search_sessions=search_sessions)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
