"""Telegram handlers that drive the per-chat search view model."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from moviebot.bot.utils.rendering import render_view_state
from moviebot.bot.utils.telegram import answer_with_retry
from moviebot.config import get_settings
from moviebot.i18n import I18nService
from moviebot.logging import logger
from moviebot.services.sessions import SearchSessionRegistry

router = Router()


def _i18n() -> I18nService:
    return I18nService(default_locale=get_settings().default_language)


def _locale(message: Message) -> str | None:
    user = message.from_user
    return getattr(user, "language_code", None) if user is not None else None


@router.message(CommandStart())
async def handle_start(message: Message) -> None:
    name = message.from_user.full_name if message.from_user else ""
    greeting = _i18n().gettext("start.greeting", locale=_locale(message), name=name)
    await answer_with_retry(message, greeting, parse_mode=None)


@router.message(Command("help"))
async def handle_help(message: Message) -> None:
    await answer_with_retry(
        message,
        _i18n().gettext("help.text", locale=_locale(message)),
        parse_mode=None,
    )


@router.message(Command("reset"))
async def handle_reset(message: Message, search_sessions: SearchSessionRegistry) -> None:
    had_session = search_sessions.discard(message.chat.id)
    logger.info("search_session_reset", chat_id=message.chat.id, had_session=had_session)
    await answer_with_retry(
        message,
        _i18n().gettext("search.reset", locale=_locale(message)),
        parse_mode=None,
    )


@router.message(Command("recommend"))
async def handle_recommend(message: Message, search_sessions: SearchSessionRegistry) -> None:
    parts = message.text.split(maxsplit=1) if message.text else []
    query = parts[1] if len(parts) > 1 else ""
    await _run_search(message, query, search_sessions)


@router.message(F.text & ~F.text.startswith("/"))
async def handle_text(message: Message, search_sessions: SearchSessionRegistry) -> None:
    await _run_search(message, message.text or "", search_sessions)


async def _run_search(message: Message, query: str, search_sessions: SearchSessionRegistry) -> None:
    i18n = _i18n()
    locale = _locale(message)
    controller = search_sessions.get(message.chat.id)
    controller.update_query(query)

    if controller.query.strip():
        await answer_with_retry(message, i18n.gettext("search.loading", locale=locale), parse_mode=None)

    state = await controller.submit()
    if state is None:
        logger.info("search_reply_skipped", chat_id=message.chat.id, reason="superseded")
        return

    await answer_with_retry(message, render_view_state(state, i18n, locale), parse_mode=None)


__all__ = [
    "router",
    "handle_start",
    "handle_help",
    "handle_reset",
    "handle_recommend",
    "handle_text",
]
