"""ESPN API endpoint helpers.

Each helper returns the upstream payload trimmed to the part callers use;
entries inside it are left raw for the normalizers.
"""

from __future__ import annotations

from typing import Any, Optional

from .client import EspnClient


def _client_or_default(client: Optional[EspnClient]) -> EspnClient:
    return client or EspnClient()


def get_league_info(
    league_id: str, season: int, client: Optional[EspnClient] = None
) -> dict[str, Any]:
    api = _client_or_default(client)
    payload = api.get_json(
        api.league_path(league_id, season),
        [("view", "mSettings")],
        endpoint="league_info",
    )
    return payload if isinstance(payload, dict) else {}


def get_teams_at_week(
    league_id: str, season: int, week: int, client: Optional[EspnClient] = None
) -> list[dict[str, Any]]:
    api = _client_or_default(client)
    payload = api.get_json(
        api.league_path(league_id, season),
        [("view", "mTeam"), ("view", "mRoster"), ("scoringPeriodId", int(week))],
        endpoint="teams",
    )
    if not isinstance(payload, dict):
        return []
    return [team for team in payload.get("teams") or [] if isinstance(team, dict)]


def get_boxscore_for_week(
    league_id: str, season: int, week: int, client: Optional[EspnClient] = None
) -> dict[str, Any]:
    """Return ``{"teams": [...], "schedule": [...]}`` for one matchup period.

    Team metadata rides along so matchups can be assembled without a second
    request.
    """

    api = _client_or_default(client)
    payload = api.get_json(
        api.league_path(league_id, season),
        [
            ("view", "mMatchupScore"),
            ("view", "mBoxscore"),
            ("view", "mTeam"),
            ("scoringPeriodId", int(week)),
        ],
        endpoint="boxscore",
    )
    if not isinstance(payload, dict):
        return {"teams": [], "schedule": []}
    schedule = [
        item
        for item in payload.get("schedule") or []
        if isinstance(item, dict) and item.get("matchupPeriodId") == int(week)
    ]
    teams = [team for team in payload.get("teams") or [] if isinstance(team, dict)]
    return {"teams": teams, "schedule": schedule}
