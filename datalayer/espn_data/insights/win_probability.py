"""Matchup win probability from projected starter points."""

from __future__ import annotations

import math
from typing import Iterable

from ..schema.models import NormalizedPlayer

# Typical week-to-week spread of a fantasy team's score.
SCORE_STDDEV = 18.0
MIN_WIN_PROBABILITY = 5.0
MAX_WIN_PROBABILITY = 95.0


def projected_total(starters: Iterable[NormalizedPlayer]) -> float:
    return sum(player.projected_points for player in starters)


def win_probability_from_totals(projected: float, opponent_projected: float) -> float:
    """Percent chance that ``projected`` beats ``opponent_projected``.

    The score differential is treated as normal with ``SCORE_STDDEV`` per side;
    ``tanh(z * sqrt(pi / 8))`` stands in for the normal CDF. The result is
    clamped to [5, 95]; a NaN total reports an even matchup.
    """

    z = (projected - opponent_projected) / (SCORE_STDDEV * math.sqrt(2))
    probability = 0.5 * (1 + math.tanh(z * math.sqrt(math.pi / 8))) * 100
    if math.isnan(probability):
        return 50.0
    return min(max(probability, MIN_WIN_PROBABILITY), MAX_WIN_PROBABILITY)


def estimate_win_probability(
    starters: Iterable[NormalizedPlayer],
    opponent_starters: Iterable[NormalizedPlayer],
) -> float:
    return win_probability_from_totals(
        projected_total(starters), projected_total(opponent_starters)
    )
