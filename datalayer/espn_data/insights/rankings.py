"""Season PPR rankings per position."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..schema.models import DirectoryPlayer, PlayerRanking, SeasonStatLine

RANKING_POSITIONS: tuple[str, ...] = ("QB", "RB", "WR", "TE", "K", "DEF")
MAX_RANKED_PLAYERS = 25


def rank_position(
    position: str,
    stat_lines: Iterable[SeasonStatLine],
    directory: Optional[Mapping[str, DirectoryPlayer]] = None,
    limit: int = MAX_RANKED_PLAYERS,
) -> list[PlayerRanking]:
    directory = directory or {}
    lines = [
        line
        for line in stat_lines
        if (line.position or position) == position
    ]
    lines.sort(key=lambda line: line.points, reverse=True)

    rankings: list[PlayerRanking] = []
    for rank, line in enumerate(lines[:limit], start=1):
        entry = directory.get(line.player_id)
        rankings.append(
            PlayerRanking(
                rank=rank,
                player_id=line.player_id,
                name=line.full_name or (entry.full_name if entry else line.player_id),
                position=position,
                team=line.team or (entry.team if entry and entry.team else "FA"),
                points=line.points,
            )
        )
    return rankings


def build_rankings(
    stats_by_position: Mapping[str, Iterable[SeasonStatLine]],
    directory: Optional[Mapping[str, DirectoryPlayer]] = None,
    limit: int = MAX_RANKED_PLAYERS,
) -> dict[str, list[PlayerRanking]]:
    return {
        position: rank_position(position, stats_by_position.get(position, ()), directory, limit)
        for position in RANKING_POSITIONS
    }
