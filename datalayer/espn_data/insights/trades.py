"""Heuristic one-for-one trade suggestions between league rosters.

A player's value blends this week's projection with realized scoring:
``0.6 * projected + 0.4 * (season total / week)``. Positions are scored by
``0.5 * top + 0.3 * average + 2 * depth`` so the user's two weakest positions
can be matched against surplus at their two strongest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..config import DEFAULT_TRADE_FAIRNESS_THRESHOLD
from ..normalize.rosters import is_empty_slot
from ..schema.models import NormalizedPlayer, TeamView, TradePlayerLine, TradeSuggestion

logger = logging.getLogger(__name__)

TRADE_POSITIONS: tuple[str, ...] = ("QB", "RB", "WR", "TE")
PROJECTION_WEIGHT = 0.6
REALIZED_WEIGHT = 0.4
DEPTH_VALUE_FLOOR = 5.0
MIN_TRADE_VALUE = 4.0
STARTER_TRADE_MIN_DEPTH = 2
IMPROVEMENT_MARGIN = 1.0
MAX_TRADE_SUGGESTIONS = 15

WIN_WIN = "Win-Win"
FAVORABLE = "Favorable"

_FAIRNESS_WEIGHT = 50.0
_MY_IMPROVEMENT_WEIGHT = 5.0
_THEIR_IMPROVEMENT_WEIGHT = 2.0
_WIN_WIN_BONUS = 25.0


@dataclass(frozen=True)
class ValuedPlayer:
    player: NormalizedPlayer
    value: float


@dataclass(frozen=True)
class PositionStrength:
    position: str
    players: tuple[ValuedPlayer, ...]
    top_value: float
    average_value: float
    depth: int

    @property
    def score(self) -> float:
        return 0.5 * self.top_value + 0.3 * self.average_value + 2 * self.depth


def player_value(player: NormalizedPlayer, week: int) -> float:
    per_week = player.total_points / max(int(week), 1)
    return PROJECTION_WEIGHT * player.projected_points + REALIZED_WEIGHT * per_week


def position_strengths(
    roster: Iterable[NormalizedPlayer], week: int
) -> dict[str, PositionStrength]:
    grouped: dict[str, list[ValuedPlayer]] = {position: [] for position in TRADE_POSITIONS}
    for player in roster:
        if is_empty_slot(player) or player.position not in grouped:
            continue
        grouped[player.position].append(ValuedPlayer(player, player_value(player, week)))

    strengths: dict[str, PositionStrength] = {}
    for position, players in grouped.items():
        ranked = tuple(sorted(players, key=lambda item: item.value, reverse=True))
        values = [item.value for item in ranked]
        strengths[position] = PositionStrength(
            position=position,
            players=ranked,
            top_value=values[0] if values else 0.0,
            average_value=sum(values) / len(values) if values else 0.0,
            depth=sum(1 for value in values if value > DEPTH_VALUE_FLOOR),
        )
    return strengths


def rank_positions(strengths: Mapping[str, PositionStrength]) -> list[PositionStrength]:
    """Weakest first."""

    return sorted(strengths.values(), key=lambda strength: strength.score)


def trade_fairness(value_a: float, value_b: float) -> float:
    average = (value_a + value_b) / 2
    if average <= 0:
        return 0.0
    return 1 - abs(value_a - value_b) / average


def _is_tradeable(item: ValuedPlayer, strength: PositionStrength) -> bool:
    if item.value <= DEPTH_VALUE_FLOOR:
        return False
    return not item.player.is_starter or strength.depth > STARTER_TRADE_MIN_DEPTH


def _line(item: ValuedPlayer) -> TradePlayerLine:
    player = item.player
    return TradePlayerLine(
        player_id=player.player_id,
        player_name=player.player_name,
        position=player.position,
        nfl_team=player.nfl_team,
        is_starter=player.is_starter,
        projected_points=player.projected_points,
        total_points=player.total_points,
        value=round(item.value, 2),
    )


def _rationale(
    give: ValuedPlayer,
    receive: ValuedPlayer,
    partner: TeamView,
    my_improvement: float,
    their_improvement: float,
    fairness: float,
) -> str:
    receive_pos = receive.player.position
    give_pos = give.player.position
    text = (
        f"Trade from your {give_pos} depth to shore up {receive_pos}: "
        f"{receive.player.player_name} would add {my_improvement:+.1f} points per week "
        f"over your {receive_pos} average"
    )
    if their_improvement > IMPROVEMENT_MARGIN:
        text += (
            f", and {give.player.player_name} gives {partner.name} "
            f"{their_improvement:+.1f} at {give_pos}"
        )
    else:
        text += f"; {partner.name} gains little at {give_pos}, so expect to negotiate"
    return f"{text}. Values are {fairness:.0%} even."


def suggest_trades(
    my_team: TeamView,
    other_teams: Iterable[TeamView],
    week: int,
    *,
    fairness_threshold: float = DEFAULT_TRADE_FAIRNESS_THRESHOLD,
    limit: int = MAX_TRADE_SUGGESTIONS,
) -> list[TradeSuggestion]:
    my_strengths = position_strengths(my_team.roster, week)
    ranked = rank_positions(my_strengths)
    weakest = ranked[:2]
    strongest = list(reversed(ranked[-2:]))

    suggestions: list[TradeSuggestion] = []
    for partner in other_teams:
        if partner.team_id == my_team.team_id:
            continue
        their_strengths = position_strengths(partner.roster, week)
        for weak in weakest:
            for strong in strongest:
                suggestions.extend(
                    _pair_players(
                        my_strengths,
                        their_strengths,
                        weak.position,
                        strong.position,
                        partner,
                        fairness_threshold,
                    )
                )

    suggestions.sort(key=lambda suggestion: suggestion.score, reverse=True)
    logger.debug(
        "Found %d trade candidates for team %s", len(suggestions), my_team.team_id
    )
    return suggestions[:limit]


def _pair_players(
    my_strengths: Mapping[str, PositionStrength],
    their_strengths: Mapping[str, PositionStrength],
    need_position: str,
    surplus_position: str,
    partner: TeamView,
    fairness_threshold: float,
) -> list[TradeSuggestion]:
    my_surplus = my_strengths[surplus_position]
    their_need = their_strengths[need_position]
    my_offers = [item for item in my_surplus.players if _is_tradeable(item, my_surplus)]
    their_offers = [item for item in their_need.players if _is_tradeable(item, their_need)]

    pairs: list[TradeSuggestion] = []
    for give in my_offers:
        for receive in their_offers:
            fairness = trade_fairness(give.value, receive.value)
            if fairness <= fairness_threshold:
                continue
            if give.value <= MIN_TRADE_VALUE or receive.value <= MIN_TRADE_VALUE:
                continue

            my_improvement = receive.value - my_strengths[need_position].average_value
            their_improvement = give.value - their_strengths[surplus_position].average_value
            if my_improvement > IMPROVEMENT_MARGIN and their_improvement > IMPROVEMENT_MARGIN:
                trade_type = WIN_WIN
            elif my_improvement > IMPROVEMENT_MARGIN:
                trade_type = FAVORABLE
            else:
                continue

            score = (
                _FAIRNESS_WEIGHT * fairness
                + _MY_IMPROVEMENT_WEIGHT * my_improvement
                + _THEIR_IMPROVEMENT_WEIGHT * max(their_improvement, 0.0)
                + (_WIN_WIN_BONUS if trade_type == WIN_WIN else 0.0)
            )
            pairs.append(
                TradeSuggestion(
                    partner_team_id=partner.team_id,
                    partner_team_name=partner.name,
                    give=_line(give),
                    receive=_line(receive),
                    fairness=fairness,
                    my_improvement=round(my_improvement, 2),
                    their_improvement=round(their_improvement, 2),
                    trade_type=trade_type,
                    score=round(score, 2),
                    rationale=_rationale(
                        give, receive, partner, my_improvement, their_improvement, fairness
                    ),
                )
            )
    return pairs
