"""Schema exports for the ESPN data layer."""

from . import positions
from .models import (
    DirectoryPlayer,
    LeagueInfo,
    MatchupOutlook,
    MatchupView,
    NormalizedPlayer,
    PlayerRanking,
    ProjectedBreakdown,
    SeasonStatLine,
    StandingRow,
    TeamView,
    TradePlayerLine,
    TradeSuggestion,
    TrendingAdd,
    WaiverSuggestion,
)

__all__ = [
    "positions",
    "DirectoryPlayer",
    "LeagueInfo",
    "MatchupOutlook",
    "MatchupView",
    "NormalizedPlayer",
    "PlayerRanking",
    "ProjectedBreakdown",
    "SeasonStatLine",
    "StandingRow",
    "TeamView",
    "TradePlayerLine",
    "TradeSuggestion",
    "TrendingAdd",
    "WaiverSuggestion",
]
