"""Sleeper API endpoint helpers."""

from __future__ import annotations

from typing import Any, Optional

from .client import SleeperClient

TRENDING_LOOKBACK_HOURS = 48
TRENDING_LIMIT = 100


def _client_or_default(client: Optional[SleeperClient]) -> SleeperClient:
    return client or SleeperClient()


def get_trending_adds(
    lookback_hours: int = TRENDING_LOOKBACK_HOURS,
    limit: int = TRENDING_LIMIT,
    client: Optional[SleeperClient] = None,
) -> list[dict[str, Any]]:
    payload = _client_or_default(client).get_json(
        "/players/nfl/trending/add",
        {"lookback_hours": lookback_hours, "limit": limit},
        endpoint="trending_adds",
    )
    return payload if isinstance(payload, list) else []


def get_players(
    sport: str = "nfl", client: Optional[SleeperClient] = None
) -> dict[str, Any]:
    payload = _client_or_default(client).get_json(f"/players/{sport}", endpoint="players")
    return payload if isinstance(payload, dict) else {}


def get_season_stats(
    season: int, position: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    api = _client_or_default(client)
    payload = api.get_json(
        f"/stats/nfl/{int(season)}",
        {"season_type": "regular", "position[]": position, "order_by": "pts_ppr"},
        base_url=api.stats_base_url,
        endpoint="season_stats",
    )
    return payload if isinstance(payload, list) else []
