"""HTTP client for the remote recommendation service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError as PayloadValidationError

from moviebot.config import RecommenderSettings
from moviebot.domain.models import Recommendation
from moviebot.logging import logger
from moviebot.services.exceptions import (
    EmptyResultError,
    HttpStatusError,
    MalformedResponseError,
    NotFoundError,
    ServerError,
    TransportError,
    UnknownHttpError,
    ValidationError,
)

QUERY_PARAM = "title"


@dataclass(slots=True)
class RecommendationResult:
    recommendations: tuple[Recommendation, ...]
    source_type: str | None
    source_input: str | None


class RecommendationClient:
    """Issue one GET per search and map the outcome to a result or a typed error.

    Requests are never retried; the caller decides whether to search again.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: RecommenderSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or RecommenderSettings()

    @property
    def endpoint_url(self) -> str:
        base = str(self._settings.base_url).rstrip("/")
        return f"{base}{self._settings.endpoint_path}"

    async def recommend(self, query: str) -> RecommendationResult:
        query = (query or "").strip()
        if not query:
            raise ValidationError()

        url = self.endpoint_url
        request_kwargs: dict[str, Any] = {"params": {QUERY_PARAM: query}}
        if self._settings.request_timeout_seconds is not None:
            request_kwargs["timeout"] = self._settings.request_timeout_seconds

        try:
            response = await self._client.get(url, **request_kwargs)
        except httpx.RequestError as exc:
            logger.warning(
                "recommendation_request_failed",
                url=url,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            raise TransportError() from exc

        if not response.is_success:
            logger.info(
                "recommendation_request_rejected",
                url=url,
                status_code=response.status_code,
            )
            raise _status_error(response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(str(exc)) from exc
        return self._parse_payload(data)

    def _parse_payload(self, data: Any) -> RecommendationResult:
        raw_items = data.get("recommendations") if isinstance(data, dict) else None
        if not isinstance(raw_items, list) or not raw_items:
            raise EmptyResultError()

        try:
            items = tuple(
                Recommendation.model_validate(item)
                for item in raw_items[: self._settings.max_results]
            )
        except PayloadValidationError as exc:
            raise MalformedResponseError(str(exc)) from exc

        return RecommendationResult(
            recommendations=items,
            source_type=_optional_text(data.get("type")),
            source_input=_optional_text(data.get("input")),
        )


def _status_error(status_code: int) -> HttpStatusError:
    if status_code == 404:
        return NotFoundError(status_code)
    if status_code >= 500:
        return ServerError(status_code)
    return UnknownHttpError(status_code)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


__all__ = ["QUERY_PARAM", "RecommendationClient", "RecommendationResult"]
