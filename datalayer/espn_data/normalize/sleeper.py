"""Normalization helpers for Sleeper trending, player, and stats payloads."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from ..schema.models import DirectoryPlayer, SeasonStatLine, TrendingAdd


def _full_name(raw_player: Mapping[str, Any]) -> str | None:
    name = raw_player.get("full_name")
    if name:
        return str(name)
    first = raw_player.get("first_name")
    last = raw_player.get("last_name")
    if first and last:
        return f"{first} {last}"
    return None


def _float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def normalize_trending_adds(raw_trending: Iterable[Mapping[str, Any]]) -> list[TrendingAdd]:
    rows: list[TrendingAdd] = []
    for raw_row in raw_trending:
        if not isinstance(raw_row, Mapping):
            continue
        player_id = raw_row.get("player_id")
        if not player_id:
            continue
        try:
            count = int(raw_row.get("count") or 0)
        except (TypeError, ValueError, OverflowError):
            count = 0
        rows.append(TrendingAdd(player_id=str(player_id), count=count))
    return rows


def normalize_player_directory(raw_players: Mapping[str, Any]) -> dict[str, DirectoryPlayer]:
    directory: dict[str, DirectoryPlayer] = {}
    for player_id, raw_player in raw_players.items():
        if not isinstance(raw_player, Mapping):
            continue
        resolved_id = str(raw_player.get("player_id") or player_id)
        name = _full_name(raw_player)
        if name is None and raw_player.get("position") == "DEF":
            name = f"{resolved_id} D/ST"
        directory[resolved_id] = DirectoryPlayer(
            player_id=resolved_id,
            full_name=name or "Unknown Player",
            position=raw_player.get("position"),
            team=raw_player.get("team"),
        )
    return directory


def normalize_season_stats(raw_stats: Iterable[Mapping[str, Any]]) -> list[SeasonStatLine]:
    rows: list[SeasonStatLine] = []
    for raw_row in raw_stats:
        if not isinstance(raw_row, Mapping):
            continue
        player_id = raw_row.get("player_id")
        if not player_id:
            continue
        stats = raw_row.get("stats") if isinstance(raw_row.get("stats"), Mapping) else {}
        player = raw_row.get("player") if isinstance(raw_row.get("player"), Mapping) else {}

        points = _float(raw_row.get("points"))
        if points is None:
            points = _float(stats.get("pts_ppr"))
        games = _float(stats.get("gp"))

        rows.append(
            SeasonStatLine(
                player_id=str(player_id),
                position=raw_row.get("position") or player.get("position"),
                points=points or 0.0,
                games_played=int(games) if games else None,
                full_name=_full_name(player) or raw_row.get("full_name"),
                team=player.get("team") or raw_row.get("team"),
            )
        )
    return rows
