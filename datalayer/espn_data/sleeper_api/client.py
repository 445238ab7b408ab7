"""Sleeper API client with minimal GET support."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from ..errors import SleeperApiError


@dataclass(frozen=True)
class SleeperClient:
    base_url: str = "https://api.sleeper.app/v1/"
    stats_base_url: str = "https://api.sleeper.com/"
    timeout_seconds: float = 10

    def get_json(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        base_url: Optional[str] = None,
        endpoint: str = "",
    ) -> Any:
        root = base_url or self.base_url
        label = endpoint or path
        url = f"{root.rstrip('/')}/{path.lstrip('/')}"
        try:
            response = requests.get(
                url,
                params=params,
                headers={"User-Agent": "espn-data-layer"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            error_body = exc.response.text if exc.response is not None else ""
            raise SleeperApiError(
                f"HTTP {status} for {url}: {error_body or exc}",
                endpoint=label,
                status_code=status,
            ) from exc
        except requests.RequestException as exc:
            raise SleeperApiError(f"Request failed for {root}: {exc}", endpoint=label) from exc

        if not response.text:
            raise SleeperApiError(f"Empty response for {response.url}", endpoint=label)

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise SleeperApiError(f"Invalid JSON from {response.url}", endpoint=label) from exc
