"""Errors raised while running a recommendation search."""

from __future__ import annotations


class SearchError(Exception):
    """Base class; ``str(exc)`` is the message shown to the user."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class ValidationError(SearchError):
    default_message = "Please enter a movie title or genre"


class TransportError(SearchError):
    default_message = "Unable to connect to the server. Please make sure the API is running."


class HttpStatusError(SearchError):
    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(HttpStatusError):
    default_message = "Movie or genre not found"


class ServerError(HttpStatusError):
    default_message = "Server error. Please try again later."


class UnknownHttpError(HttpStatusError):
    pass


class MalformedResponseError(SearchError):
    pass


class EmptyResultError(SearchError):
    """The service answered but had nothing to recommend; not a failure."""

    default_message = "No recommendations found for this input"


__all__ = [
    "EmptyResultError",
    "HttpStatusError",
    "MalformedResponseError",
    "NotFoundError",
    "SearchError",
    "ServerError",
    "TransportError",
    "UnknownHttpError",
    "ValidationError",
]
