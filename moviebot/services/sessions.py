"""Per-chat registry of search controllers."""

from __future__ import annotations

from collections import OrderedDict

from moviebot.logging import logger
from moviebot.services.recommender import RecommendationClient
from moviebot.services.search import SearchController


class SearchSessionRegistry:
    """Keep one ``SearchController`` per chat, evicting the least recently used."""

    def __init__(self, client: RecommendationClient, *, max_sessions: int = 1000) -> None:
        self._client = client
        self._max_sessions = max(1, max_sessions)
        self._sessions: OrderedDict[int, SearchController] = OrderedDict()

    def get(self, chat_id: int) -> SearchController:
        controller = self._sessions.get(chat_id)
        if controller is not None:
            self._sessions.move_to_end(chat_id)
            return controller

        controller = SearchController(self._client)
        self._sessions[chat_id] = controller
        while len(self._sessions) > self._max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.debug("search_session_evicted", chat_id=evicted_id)
        return controller

    def discard(self, chat_id: int) -> bool:
        """Forget the chat's controller; report whether one existed."""

        return self._sessions.pop(chat_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SearchSessionRegistry"]
