"""Search view model: owns the query and the view state it produces."""

from __future__ import annotations

from typing import Callable

from moviebot.domain.models import (
    EmptyState,
    ErrorState,
    IdleState,
    LoadingState,
    SuccessState,
    ViewState,
)
from moviebot.logging import logger
from moviebot.services.exceptions import EmptyResultError, SearchError, ValidationError
from moviebot.services.recommender import RecommendationClient

StateListener = Callable[[ViewState], None]


class SearchController:
    """Drive one search box.

    ``state`` only changes through ``submit`` and ``update_query``. Every
    submission, blank ones included, gets a request id; a response that
    arrives after a newer submission has started is dropped instead of
    overwriting the newer state.
    """

    def __init__(self, client: RecommendationClient) -> None:
        self._client = client
        self._query = ""
        self._state: ViewState = IdleState()
        self._latest_request_id = 0
        self._listeners: list[StateListener] = []

    @property
    def query(self) -> str:
        return self._query

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update_query(self, text: str) -> None:
        self._query = text
        if isinstance(self._state, ErrorState) and text.strip():
            self._set_state(IdleState(has_searched=self._state.has_searched))

    async def submit(self, query: str | None = None) -> ViewState | None:
        """Run a search for ``query`` (or the stored query).

        Returns the terminal state reached, or ``None`` when a newer
        submission superseded this one before its response arrived.
        """

        if query is not None:
            self._query = query
        trimmed = self._query.strip()
        self._latest_request_id += 1
        request_id = self._latest_request_id
        if not trimmed:
            logger.info("search_rejected", request_id=request_id, reason="empty_query")
            state = ErrorState(error_message=ValidationError().user_message)
            self._set_state(state)
            return state

        self._set_state(LoadingState(request_id=request_id))
        logger.info("search_submitted", request_id=request_id, query=trimmed)

        try:
            result = await self._client.recommend(trimmed)
        except EmptyResultError:
            next_state: ViewState = EmptyState()
        except SearchError as exc:
            logger.info(
                "search_failed",
                request_id=request_id,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            next_state = ErrorState(error_message=exc.user_message)
        except Exception as exc:
            logger.error(
                "search_unexpected_error",
                request_id=request_id,
                error=str(exc),
                exc_info=True,
            )
            next_state = ErrorState(error_message=str(exc) or SearchError.default_message)
        else:
            next_state = SuccessState(
                recommendations=result.recommendations,
                source_type=result.source_type,
                source_input=result.source_input,
            )

        if request_id != self._latest_request_id:
            logger.info(
                "stale_search_response_discarded",
                request_id=request_id,
                latest_request_id=self._latest_request_id,
            )
            return None

        logger.info("search_completed", request_id=request_id, status=next_state.status.value)
        self._set_state(next_state)
        return next_state

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


__all__ = ["SearchController", "StateListener"]
