"""ESPN fantasy football API client with minimal GET support."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import requests

from ..errors import EspnApiError

Params = Sequence[tuple[str, Any]]


@dataclass(frozen=True)
class EspnClient:
    base_url: str = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl/"
    timeout_seconds: float = 15
    espn_s2: str = ""
    swid: str = ""

    def _cookies(self) -> dict[str, str]:
        cookies: dict[str, str] = {}
        if self.espn_s2:
            cookies["espn_s2"] = self.espn_s2
        if self.swid:
            cookies["SWID"] = self.swid
        return cookies

    def league_path(self, league_id: str, season: int) -> str:
        return f"seasons/{int(season)}/segments/0/leagues/{league_id}"

    def get_json(
        self, path: str, params: Optional[Params] = None, *, endpoint: str = ""
    ) -> Any:
        label = endpoint or path
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            response = requests.get(
                url,
                params=list(params or ()),
                cookies=self._cookies(),
                headers={"User-Agent": "espn-data-layer"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            error_body = exc.response.text if exc.response is not None else ""
            raise EspnApiError(
                f"HTTP {status} for {url}: {error_body or exc}",
                endpoint=label,
                status_code=status,
            ) from exc
        except requests.RequestException as exc:
            raise EspnApiError(
                f"Request failed for {url}: {exc}", endpoint=label
            ) from exc

        if not response.text:
            raise EspnApiError(f"Empty response for {response.url}", endpoint=label)

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise EspnApiError(
                f"Invalid JSON from {response.url}", endpoint=label
            ) from exc
