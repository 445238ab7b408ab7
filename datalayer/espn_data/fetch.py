"""Timeout guard for blocking upstream calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, TypeVar

from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_with_timeout(
    source: str,
    endpoint: str,
    func: Callable[..., T],
    *args: Any,
    timeout: float,
    **kwargs: Any,
) -> T:
    """Run ``func`` off the event loop and fail it after ``timeout`` seconds.

    ``asyncio.wait_for`` cancels its timer on either outcome. Timeouts surface
    as :class:`UpstreamUnavailableError`; client errors are already of that
    type and pass through after being logged.
    """

    try:
        return await asyncio.wait_for(
            asyncio.to_thread(func, *args, **kwargs), timeout=timeout
        )
    except asyncio.TimeoutError as exc:
        logger.warning("%s %s timed out after %.1fs", source, endpoint, timeout)
        raise UpstreamUnavailableError(
            f"{source} {endpoint} request timed out",
            source=source,
            endpoint=endpoint,
            timed_out=True,
        ) from exc
    except UpstreamUnavailableError as exc:
        logger.warning("%s %s failed: %s", source, endpoint, exc)
        raise
