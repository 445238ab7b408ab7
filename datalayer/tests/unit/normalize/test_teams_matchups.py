import json

import pytest

from datalayer.espn_data.normalize import normalize_matchups, normalize_teams
from datalayer.espn_data.normalize.teams import normalize_team, raw_roster_entries, team_name


def test_normalize_teams_reads_record_and_roster(load_fixture):
    teams = normalize_teams(load_fixture("espn/teams.json"))

    alpha, beta, gamma = teams
    assert alpha.team_id == 1
    assert alpha.name == "Alpha Squad"
    assert alpha.abbrev == "ALP"
    assert (alpha.wins, alpha.losses, alpha.ties) == (4, 1, 0)
    assert alpha.points_for == pytest.approx(600.5)
    assert alpha.points_against == pytest.approx(500.0)
    assert len(alpha.roster) == 10
    assert alpha.roster[0].player_name == "Patrick Mahomes"
    assert [player.player_name for player in beta.starters] == [
        "Josh Allen",
        "Christian McCaffrey",
        "CeeDee Lamb",
    ]
    assert gamma.name == "Gamma Rays"
    assert gamma.record == "3-2"
    assert gamma.points_for == pytest.approx(550.0)
    assert [player.player_name for player in gamma.roster] == ["Lamar Jackson"]


def test_team_name_fallbacks():
    assert team_name({"id": 7, "name": "  Named  "}) == "Named"
    assert team_name({"id": 7, "location": "Big", "nickname": ""}) == "Big"
    assert team_name({"id": 7}) == "Team 7"


def test_raw_roster_entries_accepts_both_shapes():
    assert raw_roster_entries({"roster": {"entries": [1, 2]}}) == [1, 2]
    assert raw_roster_entries({"roster": [3]}) == [3]
    assert raw_roster_entries({"roster": None}) == []


def test_team_without_record_defaults_to_zero():
    team = normalize_team({"id": "5", "name": "Bare", "record": {"overall": {"wins": "x"}}})

    assert team.team_id == 5
    assert team.wins == 0
    assert team.points_for == 0.0
    assert team.roster == []
    assert team.record == "0-0"


def test_team_payload_uses_camel_case(load_fixture):
    team = normalize_teams(load_fixture("espn/teams.json"))[1]

    payload = team.to_payload()

    assert payload["teamId"] == 2
    assert payload["pointsFor"] == pytest.approx(620.0)
    assert payload["roster"][0]["playerName"] == "Josh Allen"
    assert payload["roster"][0]["isStarter"] is True
    assert payload["roster"][0]["nflTeam"] == "BUF"


def test_normalize_matchups_handles_both_side_shapes(load_fixture):
    boxscore = load_fixture("espn/boxscore.json")

    matchups = normalize_matchups(boxscore["schedule"], boxscore["teams"], week=5)

    assert len(matchups) == 2
    first, second = matchups
    assert first.week == 5
    assert first.matchup_id == 9
    assert first.home.name == "Alpha Squad"
    assert first.home_score == pytest.approx(98.5)
    assert first.away.name == "Beta Bombers"
    assert first.away_score == pytest.approx(87.25)
    assert [player.player_name for player in first.home.roster] == [
        "Patrick Mahomes",
        "Justin Jefferson",
        "Bijan Robinson",
    ]
    assert first.home.starters[0].projected_points == pytest.approx(19.0)

    assert second.matchup_id is None
    assert second.home.name == "Gamma Rays"
    assert second.home_score == pytest.approx(70.0)
    assert second.away.team_id == 4
    assert second.away.name == "Team 4"
    assert second.away.roster == []
    assert second.away_score == pytest.approx(64.5)


def test_matchup_prefers_live_points():
    raw = {
        "id": 1,
        "home": {"teamId": 1, "totalPointsLive": 50.5, "totalPoints": 40.0},
        "away": {"teamId": 2, "totalPoints": 30.0},
    }

    matchup = normalize_matchups([raw], [], week=2)[0]

    assert matchup.home_score == pytest.approx(50.5)
    assert matchup.away_score == pytest.approx(30.0)


def test_bye_week_matchup_has_no_away_side():
    raw = {"id": 3, "home": {"teamId": 1, "totalPoints": 80.0}}

    matchup = normalize_matchups([raw], [{"id": 1, "name": "Solo"}], week=3)[0]

    assert matchup.home.name == "Solo"
    assert matchup.away is None
    assert matchup.away_score == 0.0


def test_matchups_without_sides_are_skipped():
    assert normalize_matchups([{"id": 1}, "junk"], [], week=1) == []


def test_non_finite_team_values_fall_back():
    raw = json.loads(
        '{"id": 1e999, "name": "Odd", "record": {"overall": {"wins": Infinity,'
        ' "losses": 2, "pointsFor": NaN, "pointsAgainst": -Infinity}}}'
    )

    team = normalize_team(raw)

    assert team.team_id == 0
    assert team.wins == 0
    assert team.losses == 2
    assert team.points_for == 0.0
    assert team.points_against == 0.0


def test_non_finite_matchup_values_do_not_raise():
    boxscore = json.loads(
        '{"teams": [{"id": Infinity, "name": "Bad"}, {"id": 2, "name": "Good"}],'
        ' "schedule": ['
        '{"id": 1, "home": {"teamId": 1e999, "totalPoints": NaN},'
        ' "away": {"teamId": 2, "totalPointsLive": Infinity, "totalPoints": 55.5}},'
        '{"homeTeamId": 2, "homeScore": NaN, "awayTeamId": NaN, "awayScore": 3.0}'
        "]}"
    )

    first, second = normalize_matchups(boxscore["schedule"], boxscore["teams"], week=1)

    assert first.home is None
    assert first.home_score == 0.0
    assert first.away.name == "Good"
    assert first.away_score == pytest.approx(55.5)
    assert second.home.name == "Good"
    assert second.home_score == 0.0
    assert second.away is None
