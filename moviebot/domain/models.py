"""Pydantic models shared across the service and presentation layers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class Recommendation(BaseModel):
    """One suggested movie as returned by the recommendation service."""

    model_config = ConfigDict(frozen=True)

    title: str
    genres: str


class _ViewStateBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def snapshot(self) -> dict[str, Any]:
        """Flatten the state into the six fields the rendering layer reads."""

        return {
            "status": self.status.value,  # type: ignore[attr-defined]
            "recommendations": tuple(getattr(self, "recommendations", ())),
            "source_type": getattr(self, "source_type", None),
            "source_input": getattr(self, "source_input", None),
            "error_message": getattr(self, "error_message", ""),
            "has_searched": self.has_searched,  # type: ignore[attr-defined]
        }


class IdleState(_ViewStateBase):
    status: Literal[SearchStatus.IDLE] = SearchStatus.IDLE
    has_searched: bool = False


class LoadingState(_ViewStateBase):
    status: Literal[SearchStatus.LOADING] = SearchStatus.LOADING
    has_searched: Literal[True] = True
    request_id: int = Field(ge=1)


class SuccessState(_ViewStateBase):
    status: Literal[SearchStatus.SUCCESS] = SearchStatus.SUCCESS
    has_searched: Literal[True] = True
    recommendations: tuple[Recommendation, ...] = Field(min_length=1)
    source_type: str | None = None
    source_input: str | None = None

    @property
    def caption(self) -> str | None:
        if not (self.source_type and self.source_input):
            return None
        kind = "movie" if self.source_type == "title" else "genre"
        return f"Based on {kind}: {self.source_input}"


class EmptyState(_ViewStateBase):
    status: Literal[SearchStatus.EMPTY] = SearchStatus.EMPTY
    has_searched: Literal[True] = True


class ErrorState(_ViewStateBase):
    status: Literal[SearchStatus.ERROR] = SearchStatus.ERROR
    has_searched: Literal[True] = True
    error_message: str = Field(min_length=1)


ViewState = Union[IdleState, LoadingState, SuccessState, EmptyState, ErrorState]


__all__ = [
    "EmptyState",
    "ErrorState",
    "IdleState",
    "LoadingState",
    "Recommendation",
    "SearchStatus",
    "SuccessState",
    "ViewState",
]
