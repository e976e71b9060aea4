"""Async retry helper for outbound Telegram replies."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")
AsyncFactory = Callable[[], Awaitable[T]]
DelayHint = Callable[[BaseException], float | None]


async def retry_async(
    operation: AsyncFactory[T],
    *,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    max_attempts: int = 3,
    base_delay: float = 0.5,
    delay_hint: DelayHint | None = None,
    logger=None,
    operation_name: str = "operation",
) -> T:
    """Run ``operation`` until it succeeds or fails with a non-retryable error.

    Only exceptions in ``retry_on`` are retried; anything else propagates on
    the first attempt. The wait before the next attempt is ``delay_hint(exc)``
    when that returns a value (e.g. a server-provided ``retry_after``),
    otherwise ``base_delay * attempt``.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 1
    while True:
        try:
            return await operation()
        except retry_on as exc:
            if attempt >= max_attempts:
                raise
            hinted = delay_hint(exc) if delay_hint is not None else None
            delay = hinted if hinted is not None else base_delay * attempt
            if logger is not None:
                logger.warning(
                    "retrying_operation",
                    operation=operation_name,
                    attempt=attempt,
                    max_attempts=max_attempts,
                    delay=delay,
                    error_type=exc.__class__.__name__,
                    error=str(exc),
                )
            await asyncio.sleep(delay)
            attempt += 1


__all__ = ["retry_async"]
