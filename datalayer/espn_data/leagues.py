"""Validation and lookup for linking an ESPN league."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Mapping, Optional

from .config import EspnConfig, load_config
from .errors import LeagueLinkError, UpstreamUnavailableError
from .espn_api import EspnClient, get_league_info
from .fetch import fetch_with_timeout
from .schema.models import LeagueInfo

logger = logging.getLogger(__name__)

MIN_SEASON = 2000


def clean_league_id(raw_league_id: Any) -> str:
    cleaned = re.sub(r"\D", "", str(raw_league_id or "").strip())
    if not cleaned:
        raise LeagueLinkError("League ID must contain numbers")
    return cleaned


def validate_season(raw_season: Any, today: Optional[date] = None) -> int:
    current_year = (today or date.today()).year
    try:
        season = int(str(raw_season).strip())
    except (TypeError, ValueError) as exc:
        raise LeagueLinkError("Please enter a valid season year") from exc
    if season < MIN_SEASON or season > current_year + 1:
        raise LeagueLinkError("Please enter a valid season year")
    return season


def league_info_from_payload(
    payload: Mapping[str, Any], league_id: str, season: int
) -> LeagueInfo:
    settings = payload.get("settings") if isinstance(payload.get("settings"), Mapping) else {}
    name = settings.get("name") or payload.get("name")
    size = settings.get("size") or payload.get("size")
    try:
        team_count = int(size) if size is not None else None
    except (TypeError, ValueError):
        team_count = None
    return LeagueInfo(
        league_id=league_id,
        season=season,
        name=str(name) if name else f"League {league_id}",
        size=team_count,
    )


def describe_link_failure(exc: UpstreamUnavailableError, league_id: str, season: int) -> str:
    if exc.timed_out:
        return "ESPN API request timed out. Please try again."
    if exc.status_code == 401:
        return (
            f"League {league_id} is private and requires authentication. "
            "Currently, only public ESPN leagues are supported. To make your league "
            "accessible: Go to ESPN → League Settings → Make League Publicly Viewable."
        )
    if exc.status_code == 404:
        return (
            f"League {league_id} not found for {season} season. Please verify: "
            "1) League ID is correct, 2) Season year is correct."
        )
    return (
        "Failed to fetch league from ESPN. Please verify your league ID and season "
        f"year are correct. (Error: {exc.status_code or 'Unknown'})"
    )


async def connect_league(
    raw_league_id: Any,
    raw_season: Any,
    *,
    client: Optional[EspnClient] = None,
    config: Optional[EspnConfig] = None,
    timeout: Optional[float] = None,
    today: Optional[date] = None,
) -> LeagueInfo:
    """Validate a league id/season pair and look the league up on ESPN.

    The client (with any ``espn_s2``/``SWID`` cookies) and the timeout come from
    ``config``, or from ``load_config()``, unless passed explicitly.

    Raises:
        LeagueLinkError: input is invalid or ESPN could not serve the league.
    """

    league_id = clean_league_id(raw_league_id)
    season = validate_season(raw_season, today)
    if client is None or timeout is None:
        resolved_config = config or load_config()
        if client is None:
            client = EspnClient(
                timeout_seconds=resolved_config.league_info_timeout,
                espn_s2=resolved_config.espn_s2,
                swid=resolved_config.espn_swid,
            )
        if timeout is None:
            timeout = resolved_config.league_info_timeout
    try:
        payload = await fetch_with_timeout(
            "espn",
            "league_info",
            get_league_info,
            league_id,
            season,
            client=client,
            timeout=timeout,
        )
    except UpstreamUnavailableError as exc:
        logger.warning("Could not link league %s season %s: %s", league_id, season, exc)
        raise LeagueLinkError(describe_link_failure(exc, league_id, season)) from exc
    return league_info_from_payload(payload, league_id, season)
