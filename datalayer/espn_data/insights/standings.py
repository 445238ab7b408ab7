"""League standings derived from team records."""

from __future__ import annotations

from typing import Iterable

from ..schema.models import StandingRow, TeamView


def build_standings(teams: Iterable[TeamView]) -> list[StandingRow]:
    ordered = sorted(teams, key=lambda team: (-team.wins, -team.points_for))
    return [
        StandingRow(
            rank=rank,
            team_id=team.team_id,
            name=team.name,
            wins=team.wins,
            losses=team.losses,
            ties=team.ties,
            points_for=team.points_for,
            points_against=team.points_against,
        )
        for rank, team in enumerate(ordered, start=1)
    ]
