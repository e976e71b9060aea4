"""Tests for the per-chat controller registry."""

from __future__ import annotations

from moviebot.services.search import SearchController
from moviebot.services.sessions import SearchSessionRegistry


def test_registry_reuses_controller_per_chat():
    registry = SearchSessionRegistry(client=object(), max_sessions=10)  # type: ignore[arg-type]

    first = registry.get(1)

    assert isinstance(first, SearchController)
    assert registry.get(1) is first
    assert registry.get(2) is not first
    assert len(registry) == 2


def test_registry_evicts_least_recently_used():
    registry = SearchSessionRegistry(client=object(), max_sessions=2)  # type: ignore[arg-type]
    first = registry.get(1)
    second = registry.get(2)
    registry.get(1)

    third = registry.get(3)

    assert len(registry) == 2
    assert registry.get(1) is first
    assert registry.get(3) is third
    assert registry.get(2) is not second


def test_registry_discard_reports_whether_chat_existed():
    registry = SearchSessionRegistry(client=object())  # type: ignore[arg-type]
    registry.get(5)

    assert registry.discard(5) is True
    assert registry.discard(6) is False
    assert len(registry) == 0
