"""Normalization helpers for ESPN boxscore payloads."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

from ..schema.models import MatchupView, TeamView
from ..schema.positions import NFL_TEAM_ABBREVIATIONS
from .rosters import process_roster
from .teams import normalize_team


def _side_entries(side: Mapping[str, Any]) -> list[Any]:
    for key in ("rosterForCurrentScoringPeriod", "rosterForMatchupPeriod"):
        roster = side.get(key)
        if isinstance(roster, Mapping) and isinstance(roster.get("entries"), list):
            return roster["entries"]
    return []


def _score(value: Any) -> Optional[float]:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    return score if math.isfinite(score) else None


def _side_score(side: Mapping[str, Any]) -> float:
    for key in ("totalPointsLive", "totalPoints"):
        score = _score(side.get(key))
        if score is not None:
            return score
    return 0.0


def _split_sides(raw_matchup: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Return home/away as ``{"team_id", "score", "entries"}``.

    Handles both the raw ``home``/``away`` objects and the flattened
    ``homeTeamId``/``homeScore``/``homeRoster`` shape.
    """

    sides: dict[str, dict[str, Any]] = {}
    for side_name in ("home", "away"):
        side = raw_matchup.get(side_name)
        if isinstance(side, Mapping):
            sides[side_name] = {
                "team_id": side.get("teamId"),
                "score": _side_score(side),
                "entries": _side_entries(side),
            }
            continue
        team_id = raw_matchup.get(f"{side_name}TeamId")
        if team_id is None:
            continue
        score = _score(raw_matchup.get(f"{side_name}Score")) or 0.0
        roster = raw_matchup.get(f"{side_name}Roster")
        sides[side_name] = {
            "team_id": team_id,
            "score": score,
            "entries": roster if isinstance(roster, list) else [],
        }
    return sides


def _side_view(
    side: Optional[dict[str, Any]],
    teams_by_id: Mapping[int, Mapping[str, Any]],
    team_lookup: Mapping[int, str],
) -> Optional[TeamView]:
    if side is None:
        return None
    try:
        team_id = int(side["team_id"])
    except (TypeError, ValueError, OverflowError):
        return None
    raw_team = teams_by_id.get(team_id) or {"id": team_id}
    roster = process_roster(side["entries"], team_lookup)
    return normalize_team(raw_team, roster=roster, team_lookup=team_lookup)


def normalize_matchups(
    raw_matchups: Iterable[Mapping[str, Any]],
    raw_teams: Iterable[Mapping[str, Any]],
    week: int,
    team_lookup: Mapping[int, str] = NFL_TEAM_ABBREVIATIONS,
) -> list[MatchupView]:
    teams_by_id: dict[int, Mapping[str, Any]] = {}
    for raw_team in raw_teams:
        try:
            teams_by_id[int(raw_team["id"])] = raw_team
        except (KeyError, TypeError, ValueError, OverflowError):
            continue

    matchups: list[MatchupView] = []
    for raw_matchup in raw_matchups:
        if not isinstance(raw_matchup, Mapping):
            continue
        sides = _split_sides(raw_matchup)
        if not sides:
            continue
        home = sides.get("home")
        away = sides.get("away")
        matchup_id = raw_matchup.get("id")
        matchups.append(
            MatchupView(
                week=int(week),
                matchup_id=int(matchup_id) if isinstance(matchup_id, int) else None,
                home=_side_view(home, teams_by_id, team_lookup),
                away=_side_view(away, teams_by_id, team_lookup),
                home_score=home["score"] if home else 0.0,
                away_score=away["score"] if away else 0.0,
            )
        )
    return matchups
