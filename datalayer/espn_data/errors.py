"""Exceptions raised by the ESPN data layer."""

from __future__ import annotations

from typing import Optional


class UpstreamUnavailableError(RuntimeError):
    """An upstream data source timed out or answered with a failure."""

    def __init__(
        self,
        message: str,
        *,
        source: str,
        endpoint: str,
        status_code: Optional[int] = None,
        timed_out: bool = False,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code
        self.timed_out = timed_out


class EspnApiError(UpstreamUnavailableError):
    """Raised for ESPN fantasy API request failures."""

    def __init__(
        self, message: str, *, endpoint: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(
            message, source="espn", endpoint=endpoint, status_code=status_code
        )


class SleeperApiError(UpstreamUnavailableError):
    """Raised for Sleeper API request failures."""

    def __init__(
        self, message: str, *, endpoint: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(
            message, source="sleeper", endpoint=endpoint, status_code=status_code
        )


class LeagueLinkError(ValueError):
    """A league could not be linked; the message is safe to show to a user."""
