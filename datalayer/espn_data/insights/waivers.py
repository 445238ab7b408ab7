"""Waiver-wire ranking from trending adds and roster weaknesses."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Mapping, Optional, Sequence

from ..config import DEFAULT_WEAK_POSITION_THRESHOLD
from ..normalize.rosters import is_empty_slot
from ..schema.models import (
    DirectoryPlayer,
    NormalizedPlayer,
    SeasonStatLine,
    TrendingAdd,
    WaiverSuggestion,
)
from ..schema.positions import to_sleeper_position

logger = logging.getLogger(__name__)

DRAFTABLE_POSITIONS: tuple[str, ...] = ("QB", "RB", "WR", "TE", "K", "DEF")
WEAK_POSITION_BONUS = 100.0
WEEKLY_AVERAGE_WEIGHT = 10.0
MAX_WAIVER_SUGGESTIONS = 25


def weekly_average(total_points: float, weeks: int) -> float:
    return total_points / max(int(weeks), 1)


def position_averages(
    roster: Iterable[NormalizedPlayer], week: int
) -> dict[str, float]:
    """Average weekly points per position, keyed by Sleeper position labels."""

    grouped: dict[str, list[float]] = defaultdict(list)
    for player in roster:
        if is_empty_slot(player):
            continue
        position = to_sleeper_position(player.position)
        if position not in DRAFTABLE_POSITIONS:
            continue
        grouped[position].append(weekly_average(player.total_points, week))
    return {
        position: sum(values) / len(values) for position, values in grouped.items()
    }


def weak_positions(
    averages: Mapping[str, float],
    threshold: float = DEFAULT_WEAK_POSITION_THRESHOLD,
) -> set[str]:
    return {
        position
        for position in DRAFTABLE_POSITIONS
        if position not in averages or averages[position] < threshold
    }


def _candidate_average(stat: Optional[SeasonStatLine], week: int) -> float:
    if stat is None:
        return 0.0
    return weekly_average(stat.points, stat.games_played or week)


def rank_waiver_candidates(
    trending: Sequence[TrendingAdd],
    directory: Mapping[str, DirectoryPlayer],
    season_stats: Iterable[SeasonStatLine],
    roster: Optional[Sequence[NormalizedPlayer]],
    week: int,
    *,
    threshold: float = DEFAULT_WEAK_POSITION_THRESHOLD,
    limit: int = MAX_WAIVER_SUGGESTIONS,
) -> list[WaiverSuggestion]:
    """Score trending pickups, boosting those that fill a weak roster spot.

    ``roster=None`` means the user's roster could not be loaded; ranking then
    falls back to trending activity and production alone.
    """

    if roster is None:
        weak: set[str] = set()
        logger.info("No roster context; ranking waiver candidates on trends only")
    else:
        weak = weak_positions(position_averages(roster, week), threshold)

    stats_by_id = {line.player_id: line for line in season_stats}
    suggestions: list[WaiverSuggestion] = []
    for trend in trending:
        player = directory.get(trend.player_id)
        if player is None or player.position not in DRAFTABLE_POSITIONS:
            continue
        position = player.position
        average = _candidate_average(stats_by_id.get(trend.player_id), week)
        fills_weak = position in weak
        score = trend.count + (WEAK_POSITION_BONUS if fills_weak else 0.0)
        score += WEEKLY_AVERAGE_WEIGHT * average
        suggestions.append(
            WaiverSuggestion(
                player_id=trend.player_id,
                player_name=player.full_name,
                position=position,
                nfl_team=player.team or "FA",
                trending_count=trend.count,
                weekly_average=average,
                fills_weak_position=fills_weak,
                score=score,
                recommendation=(
                    f"Upgrade weak {position} position"
                    if fills_weak
                    else "Trending high-value pickup"
                ),
            )
        )

    suggestions.sort(key=lambda suggestion: suggestion.score, reverse=True)
    return suggestions[:limit]
