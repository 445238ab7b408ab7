"""Normalization exports."""

from .matchups import normalize_matchups
from .rosters import (
    EMPTY_SLOT_NAME,
    UNKNOWN_POSITION,
    is_empty_slot,
    locate_player,
    locate_slot_id,
    normalize_roster_entry,
    parse_breakdown,
    process_roster,
    sort_roster,
)
from .sleeper import (
    normalize_player_directory,
    normalize_season_stats,
    normalize_trending_adds,
)
from .teams import normalize_team, normalize_teams

__all__ = [
    "EMPTY_SLOT_NAME",
    "UNKNOWN_POSITION",
    "is_empty_slot",
    "locate_player",
    "locate_slot_id",
    "normalize_roster_entry",
    "parse_breakdown",
    "process_roster",
    "sort_roster",
    "normalize_matchups",
    "normalize_team",
    "normalize_teams",
    "normalize_trending_adds",
    "normalize_player_directory",
    "normalize_season_stats",
]
