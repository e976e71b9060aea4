"""Shared pytest fixtures for the recommendation client and search tests."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("MOVIEBOT_TELEGRAM_TOKEN", "123456:test-token")

from moviebot.config import RecommenderSettings  # noqa: E402

SERVICE_BASE = "http://recommender.test"


@pytest.fixture
def recommender_settings() -> RecommenderSettings:
    return RecommenderSettings(base_url=SERVICE_BASE)


@pytest.fixture
def inception_payload() -> dict:
    return {
        "recommendations": [
            {"title": "Interstellar", "genres": "Adventure|Drama|Sci-Fi"},
            {"title": "The Prestige", "genres": "Drama|Mystery|Thriller"},
        ],
        "type": "title",
        "input": "Inception",
    }

