"""Sleeper API fetch helpers."""

from .client import SleeperClient
from .endpoints import get_players, get_season_stats, get_trending_adds

__all__ = [
    "SleeperClient",
    "get_players",
    "get_season_stats",
    "get_trending_adds",
]
