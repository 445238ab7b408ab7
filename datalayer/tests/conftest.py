import json
from pathlib import Path

import pytest

from datalayer.espn_data.config import EspnConfig
from datalayer.espn_data.schema.models import NormalizedPlayer, TeamView
from datalayer.espn_data.schema.positions import is_starter_slot, slot_label


@pytest.fixture
def fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixture_dir: Path):
    def _load(name: str):
        path = fixture_dir / name
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    return _load


@pytest.fixture
def upstream_fixtures(load_fixture):
    return {
        "league_info": load_fixture("espn/league_info.json"),
        "teams": load_fixture("espn/teams.json"),
        "boxscore": load_fixture("espn/boxscore.json"),
        "trending": load_fixture("sleeper/trending.json"),
        "players": load_fixture("sleeper/players.json"),
        "stats": load_fixture("sleeper/stats.json"),
    }


@pytest.fixture
def espn_config() -> EspnConfig:
    return EspnConfig(league_id="123", season=2024, week_override=None)


@pytest.fixture
def monkeypatch_upstream(monkeypatch, upstream_fixtures):
    import datalayer.espn_data.espn_league_data as eld

    def _season_stats(season, position, client=None):
        return [
            row
            for row in upstream_fixtures["stats"]
            if row["player"]["position"] == position
        ]

    monkeypatch.setattr(
        eld,
        "get_league_info",
        lambda league_id, season, client=None: upstream_fixtures["league_info"],
    )
    monkeypatch.setattr(
        eld,
        "get_teams_at_week",
        lambda league_id, season, week, client=None: upstream_fixtures["teams"],
    )
    monkeypatch.setattr(
        eld,
        "get_boxscore_for_week",
        lambda league_id, season, week, client=None: upstream_fixtures["boxscore"],
    )
    monkeypatch.setattr(
        eld,
        "get_trending_adds",
        lambda client=None: upstream_fixtures["trending"],
    )
    monkeypatch.setattr(
        eld,
        "get_players",
        lambda sport, client=None: upstream_fixtures["players"],
    )
    monkeypatch.setattr(eld, "get_season_stats", _season_stats)
    return upstream_fixtures


@pytest.fixture
def make_player():
    def _make(
        name: str,
        position: str,
        slot: int,
        *,
        projected: float = 0.0,
        total: float = 0.0,
        team: str = "FA",
    ) -> NormalizedPlayer:
        return NormalizedPlayer(
            player_id=name.lower().replace(" ", "-"),
            player_name=name,
            position=position,
            lineup_slot_id=slot,
            lineup_slot=slot_label(slot),
            is_starter=is_starter_slot(slot),
            nfl_team=team,
            total_points=total,
            projected_points=projected,
        )

    return _make


@pytest.fixture
def make_team():
    def _make(team_id: int, name: str, roster, **record) -> TeamView:
        return TeamView(team_id=team_id, name=name, roster=list(roster), **record)

    return _make
