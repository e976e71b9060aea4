"""Render a search view state as a plain-text chat reply."""

from __future__ import annotations

from moviebot.domain.models import (
    EmptyState,
    ErrorState,
    LoadingState,
    SuccessState,
    ViewState,
)
from moviebot.i18n import I18nService


def render_view_state(state: ViewState, i18n: I18nService, locale: str | None = None) -> str:
    if isinstance(state, SuccessState):
        return _render_results(state, i18n, locale)
    if isinstance(state, EmptyState):
        return i18n.gettext("results.empty", locale=locale)
    if isinstance(state, ErrorState):
        return i18n.gettext("search.error", locale=locale, message=state.error_message)
    if isinstance(state, LoadingState):
        return i18n.gettext("search.loading", locale=locale)
    return i18n.gettext("search.prompt", locale=locale)


def _render_results(state: SuccessState, i18n: I18nService, locale: str | None) -> str:
    lines = [i18n.gettext("results.header", locale=locale)]
    if state.caption:
        lines.append(state.caption)
    lines.append("")
    for position, movie in enumerate(state.recommendations, start=1):
        lines.append(f"{position}. {movie.title}")
        if movie.genres:
            lines.append(f"   {movie.genres}")
    return "\n".join(lines)


__all__ = ["render_view_state"]
