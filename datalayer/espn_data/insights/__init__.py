"""Derived views computed from normalized rosters and Sleeper data."""

from .rankings import build_rankings, rank_position
from .standings import build_standings
from .trades import (
    player_value,
    position_strengths,
    rank_positions,
    suggest_trades,
    trade_fairness,
)
from .waivers import (
    position_averages,
    rank_waiver_candidates,
    weak_positions,
    weekly_average,
)
from .win_probability import (
    estimate_win_probability,
    projected_total,
    win_probability_from_totals,
)

__all__ = [
    "build_rankings",
    "rank_position",
    "build_standings",
    "player_value",
    "position_strengths",
    "rank_positions",
    "suggest_trades",
    "trade_fairness",
    "position_averages",
    "rank_waiver_candidates",
    "weak_positions",
    "weekly_average",
    "estimate_win_probability",
    "projected_total",
    "win_probability_from_totals",
]
