"""Canonical records for the ESPN data layer.

Upstream snapshots (trending adds, player directory, season stats) are plain
frozen dataclasses. Everything handed back to callers is a frozen pydantic
model that serializes with camelCase keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class ProjectedBreakdown:
    per_stat_projections: Mapping[str, float] = field(default_factory=dict)
    uses_points: bool = False

    def total(self) -> float:
        return float(sum(self.per_stat_projections.values()))


@dataclass(frozen=True)
class TrendingAdd:
    player_id: str
    count: int


@dataclass(frozen=True)
class DirectoryPlayer:
    player_id: str
    full_name: str
    position: Optional[str] = None
    team: Optional[str] = None


@dataclass(frozen=True)
class SeasonStatLine:
    player_id: str
    position: Optional[str]
    points: float
    games_played: Optional[int] = None
    full_name: Optional[str] = None
    team: Optional[str] = None


class ViewModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class NormalizedPlayer(ViewModel):
    """One roster slot, resolved from whichever upstream shape it arrived in."""

    player_id: Optional[str] = None
    player_name: str
    position: str
    lineup_slot_id: int
    lineup_slot: str
    is_starter: bool
    nfl_team: str
    opponent: str = ""
    total_points: float = 0.0
    projected_points: float = 0.0


class TeamView(ViewModel):
    team_id: int
    name: str
    abbrev: str = ""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0
    roster: list[NormalizedPlayer] = []

    @property
    def starters(self) -> list[NormalizedPlayer]:
        return [player for player in self.roster if player.is_starter]

    @property
    def record(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"


class MatchupView(ViewModel):
    week: int
    matchup_id: Optional[int] = None
    home: Optional[TeamView] = None
    away: Optional[TeamView] = None
    home_score: float = 0.0
    away_score: float = 0.0


class LeagueInfo(ViewModel):
    league_id: str
    season: int
    name: str
    size: Optional[int] = None


class StandingRow(ViewModel):
    rank: int
    team_id: int
    name: str
    wins: int
    losses: int
    ties: int
    points_for: float
    points_against: float


class PlayerRanking(ViewModel):
    rank: int
    player_id: str
    name: str
    position: str
    team: str
    points: float


class MatchupOutlook(ViewModel):
    week: int
    team: TeamView
    opponent: Optional[TeamView] = None
    projected_points: float
    opponent_projected_points: float
    win_probability: float


class WaiverSuggestion(ViewModel):
    player_id: str
    player_name: str
    position: str
    nfl_team: str
    trending_count: int
    weekly_average: float
    fills_weak_position: bool
    score: float
    recommendation: str


class TradePlayerLine(ViewModel):
    player_id: Optional[str] = None
    player_name: str
    position: str
    nfl_team: str
    is_starter: bool
    projected_points: float
    total_points: float
    value: float


class TradeSuggestion(ViewModel):
    partner_team_id: int
    partner_team_name: str
    give: TradePlayerLine
    receive: TradePlayerLine
    fairness: float
    my_improvement: float
    their_improvement: float
    trade_type: str
    score: float
    rationale: str
