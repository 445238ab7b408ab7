"""Normalization helpers for ESPN team payloads."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

from ..schema.models import NormalizedPlayer, TeamView
from ..schema.positions import NFL_TEAM_ABBREVIATIONS
from .rosters import process_roster


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _float(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def team_name(raw_team: Mapping[str, Any]) -> str:
    name = raw_team.get("name")
    if name:
        return str(name).strip()
    location = str(raw_team.get("location") or "").strip()
    nickname = str(raw_team.get("nickname") or "").strip()
    combined = f"{location} {nickname}".strip()
    if combined:
        return combined
    return f"Team {raw_team.get('id')}"


def raw_roster_entries(raw_team: Mapping[str, Any]) -> list[Any]:
    roster = raw_team.get("roster")
    if isinstance(roster, Mapping):
        roster = roster.get("entries")
    return list(roster) if isinstance(roster, (list, tuple)) else []


def _overall_record(raw_team: Mapping[str, Any]) -> Mapping[str, Any]:
    record = raw_team.get("record")
    if isinstance(record, Mapping):
        overall = record.get("overall")
        if isinstance(overall, Mapping):
            return overall
    return raw_team


def normalize_team(
    raw_team: Mapping[str, Any],
    *,
    roster: Optional[list[NormalizedPlayer]] = None,
    team_lookup: Mapping[int, str] = NFL_TEAM_ABBREVIATIONS,
) -> TeamView:
    record = _overall_record(raw_team)
    points_for = record.get("pointsFor")
    if points_for is None:
        points_for = raw_team.get("totalPointsScored") or raw_team.get("regularSeasonPointsFor")
    points_against = record.get("pointsAgainst")
    if points_against is None:
        points_against = raw_team.get("regularSeasonPointsAgainst")

    if roster is None:
        roster = process_roster(raw_roster_entries(raw_team), team_lookup)

    return TeamView(
        team_id=_int(raw_team.get("id")),
        name=team_name(raw_team),
        abbrev=str(raw_team.get("abbrev") or raw_team.get("abbreviation") or ""),
        wins=_int(record.get("wins")),
        losses=_int(record.get("losses")),
        ties=_int(record.get("ties")),
        points_for=_float(points_for),
        points_against=_float(points_against),
        roster=roster,
    )


def normalize_teams(
    raw_teams: Iterable[Mapping[str, Any]],
    team_lookup: Mapping[int, str] = NFL_TEAM_ABBREVIATIONS,
) -> list[TeamView]:
    return [
        normalize_team(raw_team, team_lookup=team_lookup)
        for raw_team in raw_teams
        if isinstance(raw_team, Mapping)
    ]
