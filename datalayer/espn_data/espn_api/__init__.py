"""ESPN fantasy API fetch helpers."""

from .client import EspnClient
from .endpoints import get_boxscore_for_week, get_league_info, get_teams_at_week

__all__ = [
    "EspnClient",
    "get_boxscore_for_week",
    "get_league_info",
    "get_teams_at_week",
]
