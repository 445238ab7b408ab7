"""Facade for reading one ESPN league and deriving insights from it.

Every call re-fetches from ESPN/Sleeper and re-normalizes; nothing is cached
between calls.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Iterable, Optional

from .config import EspnConfig, load_config
from .errors import UpstreamUnavailableError
from .espn_api import EspnClient, get_boxscore_for_week, get_league_info, get_teams_at_week
from .fetch import fetch_with_timeout
from .insights import (
    build_rankings,
    build_standings,
    estimate_win_probability,
    rank_waiver_candidates,
    suggest_trades,
)
from .insights.rankings import MAX_RANKED_PLAYERS, RANKING_POSITIONS
from .insights.waivers import DRAFTABLE_POSITIONS
from .insights.win_probability import projected_total
from .leagues import league_info_from_payload
from .normalize import (
    normalize_matchups,
    normalize_player_directory,
    normalize_season_stats,
    normalize_teams,
    normalize_trending_adds,
)
from .schema.models import (
    LeagueInfo,
    MatchupOutlook,
    MatchupView,
    NormalizedPlayer,
    PlayerRanking,
    SeasonStatLine,
    StandingRow,
    TeamView,
    TradeSuggestion,
    WaiverSuggestion,
)
from .season import estimate_week
from .sleeper_api import SleeperClient, get_players, get_season_stats, get_trending_adds

logger = logging.getLogger(__name__)


class EspnLeagueData:
    def __init__(
        self,
        league_id: Optional[str] = None,
        *,
        season: Optional[int] = None,
        espn_client: Optional[EspnClient] = None,
        sleeper_client: Optional[SleeperClient] = None,
        config: Optional[EspnConfig] = None,
    ) -> None:
        resolved_config = config or load_config()
        resolved_league_id = league_id or resolved_config.league_id
        if not resolved_league_id:
            raise ValueError("ESPN_LEAGUE_ID must be set.")
        self.league_id = str(resolved_league_id)
        self.season = int(season or resolved_config.resolved_season)
        self.config = resolved_config
        self.espn_client = espn_client or EspnClient(
            timeout_seconds=resolved_config.league_data_timeout,
            espn_s2=resolved_config.espn_s2,
            swid=resolved_config.espn_swid,
        )
        self.sleeper_client = sleeper_client or SleeperClient(
            timeout_seconds=resolved_config.sleeper_timeout
        )

    def resolve_week(self, week: Optional[int] = None) -> int:
        if week:
            return int(week)
        if self.config.week_override:
            return int(self.config.week_override)
        return estimate_week()

    async def _espn(
        self, endpoint: str, func: Callable[..., Any], *args: Any, timeout: float
    ) -> Any:
        return await fetch_with_timeout(
            "espn", endpoint, func, *args, client=self.espn_client, timeout=timeout
        )

    async def _sleeper(self, endpoint: str, func: Callable[..., Any], *args: Any) -> Any:
        return await fetch_with_timeout(
            "sleeper",
            endpoint,
            func,
            *args,
            client=self.sleeper_client,
            timeout=self.config.sleeper_timeout,
        )

    async def get_league_info(self) -> LeagueInfo:
        payload = await self._espn(
            "league_info",
            get_league_info,
            self.league_id,
            self.season,
            timeout=self.config.league_info_timeout,
        )
        return league_info_from_payload(payload, self.league_id, self.season)

    async def get_teams(self, week: Optional[int] = None) -> list[TeamView]:
        resolved_week = self.resolve_week(week)
        raw_teams = await self._espn(
            "teams",
            get_teams_at_week,
            self.league_id,
            self.season,
            resolved_week,
            timeout=self.config.league_data_timeout,
        )
        return normalize_teams(raw_teams)

    async def get_matchups(self, week: Optional[int] = None) -> list[MatchupView]:
        resolved_week = self.resolve_week(week)
        boxscore = await self._espn(
            "boxscore",
            get_boxscore_for_week,
            self.league_id,
            self.season,
            resolved_week,
            timeout=self.config.league_data_timeout,
        )
        return normalize_matchups(
            boxscore.get("schedule") or [], boxscore.get("teams") or [], resolved_week
        )

    async def get_standings(self, week: Optional[int] = None) -> list[StandingRow]:
        return build_standings(await self.get_teams(week))

    async def find_team(self, team_id: int, week: Optional[int] = None) -> Optional[TeamView]:
        return _find_team(await self.get_teams(week), team_id)

    async def get_matchup_outlook(
        self, team_id: int, week: Optional[int] = None
    ) -> Optional[MatchupOutlook]:
        resolved_week = self.resolve_week(week)
        for matchup in await self.get_matchups(resolved_week):
            sides = [(matchup.home, matchup.away), (matchup.away, matchup.home)]
            for team, opponent in sides:
                if team is None or team.team_id != int(team_id):
                    continue
                opponent_starters = opponent.starters if opponent else []
                return MatchupOutlook(
                    week=resolved_week,
                    team=team,
                    opponent=opponent,
                    projected_points=projected_total(team.starters),
                    opponent_projected_points=projected_total(opponent_starters),
                    win_probability=estimate_win_probability(
                        team.starters, opponent_starters
                    ),
                )
        return None

    async def _user_roster(
        self, team_id: Optional[int], week: int
    ) -> Optional[list[NormalizedPlayer]]:
        if team_id is None:
            return None
        try:
            team = await self.find_team(team_id, week)
        except UpstreamUnavailableError:
            logger.info("Roster for team %s unavailable; ranking on trends only", team_id)
            return None
        if team is None:
            logger.info("Team %s not found in league %s", team_id, self.league_id)
            return None
        return team.roster

    async def _season_stats(self, positions: Iterable[str]) -> dict[str, list[SeasonStatLine]]:
        positions = tuple(positions)
        results = await _gather(
            *(
                self._sleeper("season_stats", get_season_stats, self.season, position)
                for position in positions
            )
        )
        return {
            position: normalize_season_stats(raw_stats)
            for position, raw_stats in zip(positions, results)
        }

    async def get_waiver_suggestions(
        self, team_id: Optional[int] = None, week: Optional[int] = None
    ) -> list[WaiverSuggestion]:
        resolved_week = self.resolve_week(week)
        raw_trending, raw_players, stats_by_position, roster = await _gather(
            self._sleeper("trending_adds", get_trending_adds),
            self._sleeper("players", get_players, "nfl"),
            self._season_stats(DRAFTABLE_POSITIONS),
            self._user_roster(team_id, resolved_week),
        )
        season_stats = [line for lines in stats_by_position.values() for line in lines]
        return rank_waiver_candidates(
            normalize_trending_adds(raw_trending),
            normalize_player_directory(raw_players),
            season_stats,
            roster,
            resolved_week,
            threshold=self.config.weak_position_threshold,
        )

    async def get_trade_suggestions(
        self, team_id: Optional[int], week: Optional[int] = None
    ) -> list[TradeSuggestion]:
        if team_id is None:
            return []
        resolved_week = self.resolve_week(week)
        teams = await self.get_teams(resolved_week)
        my_team = _find_team(teams, team_id)
        if my_team is None:
            logger.info("Team %s not found in league %s; no trades", team_id, self.league_id)
            return []
        return suggest_trades(
            my_team,
            teams,
            resolved_week,
            fairness_threshold=self.config.trade_fairness_threshold,
        )

    async def get_player_rankings(
        self, limit: int = MAX_RANKED_PLAYERS
    ) -> dict[str, list[PlayerRanking]]:
        stats_by_position = await self._season_stats(RANKING_POSITIONS)
        return build_rankings(stats_by_position, limit=limit)


async def _gather(*aws: Awaitable[Any]) -> list[Any]:
    """Await every fetch, then raise the first upstream failure, else the first error."""

    results = await asyncio.gather(*aws, return_exceptions=True)
    errors = [result for result in results if isinstance(result, BaseException)]
    for error in errors:
        if isinstance(error, UpstreamUnavailableError):
            raise error
    if errors:
        raise errors[0]
    return results


def _find_team(teams: Iterable[TeamView], team_id: int) -> Optional[TeamView]:
    for team in teams:
        if team.team_id == int(team_id):
            return team
    return None
