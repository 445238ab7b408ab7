import pytest

from datalayer.espn_data.insights import (
    position_averages,
    rank_waiver_candidates,
    weak_positions,
    weekly_average,
)
from datalayer.espn_data.normalize import (
    normalize_player_directory,
    normalize_season_stats,
    normalize_teams,
    normalize_trending_adds,
)
from datalayer.espn_data.schema.models import DirectoryPlayer, SeasonStatLine, TrendingAdd


@pytest.fixture
def sleeper_inputs(load_fixture):
    return (
        normalize_trending_adds(load_fixture("sleeper/trending.json")),
        normalize_player_directory(load_fixture("sleeper/players.json")),
        normalize_season_stats(load_fixture("sleeper/stats.json")),
    )


@pytest.fixture
def alpha_roster(load_fixture):
    return normalize_teams(load_fixture("espn/teams.json"))[0].roster


def test_weekly_average_guards_week_zero():
    assert weekly_average(50.0, 5) == pytest.approx(10.0)
    assert weekly_average(50.0, 0) == pytest.approx(50.0)


def test_position_averages_use_sleeper_labels_and_skip_empty_slots(alpha_roster):
    averages = position_averages(alpha_roster, week=5)

    assert set(averages) == {"QB", "RB", "WR", "TE", "K", "DEF"}
    assert averages["QB"] == pytest.approx(22.0)
    assert averages["RB"] == pytest.approx(10.0)
    assert averages["WR"] == pytest.approx((4.0 + 18.0 + 19.0) / 3)
    assert averages["DEF"] == pytest.approx(6.0)
    assert averages["K"] == pytest.approx(7.0)


def test_missing_positions_count_as_weak():
    weak = weak_positions({"QB": 20.0, "RB": 7.9, "WR": 8.0}, threshold=8.0)

    assert weak == {"RB", "TE", "K", "DEF"}


def test_ranking_boosts_weak_positions(sleeper_inputs, alpha_roster):
    trending, directory, stats = sleeper_inputs

    suggestions = rank_waiver_candidates(trending, directory, stats, alpha_roster, week=5)

    assert [item.player_id for item in suggestions] == ["4046", "8150", "GB"]
    mahomes, williams, packers = suggestions
    assert mahomes.score == pytest.approx(370.0)
    assert mahomes.weekly_average == pytest.approx(25.0)
    assert mahomes.fills_weak_position is False
    assert mahomes.recommendation == "Trending high-value pickup"
    assert williams.score == pytest.approx(280.0)
    assert williams.weekly_average == pytest.approx(20.0)
    assert packers.score == pytest.approx(210.0)
    assert packers.fills_weak_position is True
    assert packers.recommendation == "Upgrade weak DEF position"
    assert packers.player_name == "Green Bay Packers"
    assert packers.nfl_team == "GB"


def test_weak_bonus_is_exactly_one_hundred(sleeper_inputs, alpha_roster):
    trending, directory, stats = sleeper_inputs

    with_roster = rank_waiver_candidates(trending, directory, stats, alpha_roster, week=5)
    without_roster = rank_waiver_candidates(trending, directory, stats, None, week=5)

    packers = {item.player_id: item for item in with_roster}["GB"]
    bare = {item.player_id: item for item in without_roster}["GB"]
    assert packers.score - bare.score == pytest.approx(100.0)
    assert not any(item.fills_weak_position for item in without_roster)


def test_non_draftable_and_unknown_players_are_excluded(sleeper_inputs, alpha_roster):
    trending, directory, stats = sleeper_inputs

    ids = {
        item.player_id
        for item in rank_waiver_candidates(trending, directory, stats, alpha_roster, week=5)
    }

    assert "OL1" not in ids
    assert "unknown" not in ids


def test_candidate_without_stats_uses_count_only():
    directory = {"1": DirectoryPlayer(player_id="1", full_name="Rookie", position="WR")}

    suggestions = rank_waiver_candidates(
        [TrendingAdd("1", 42)], directory, [], roster=[], week=3
    )

    assert suggestions[0].weekly_average == 0.0
    assert suggestions[0].score == pytest.approx(142.0)
    assert suggestions[0].nfl_team == "FA"


def test_ranking_is_capped():
    directory = {
        str(index): DirectoryPlayer(player_id=str(index), full_name=f"P{index}", position="RB")
        for index in range(40)
    }
    trending = [TrendingAdd(str(index), index) for index in range(40)]

    suggestions = rank_waiver_candidates(trending, directory, [], None, week=1)

    assert len(suggestions) == 25
    assert suggestions[0].player_id == "39"


def test_weak_quarterback_room_adds_exactly_one_hundred(make_player):
    directory = {
        "qb1": DirectoryPlayer(player_id="qb1", full_name="Arm One", position="QB", team="BUF"),
        "qb2": DirectoryPlayer(player_id="qb2", full_name="Arm Two", position="QB", team="MIA"),
        "wr1": DirectoryPlayer(player_id="wr1", full_name="Hands", position="WR", team="DAL"),
    }
    stats = [
        SeasonStatLine("qb1", "QB", 200.0, games_played=10),
        SeasonStatLine("qb2", "QB", 150.0, games_played=8),
        SeasonStatLine("wr1", "WR", 120.0, games_played=10),
    ]
    trending = [TrendingAdd("qb1", 90), TrendingAdd("qb2", 40), TrendingAdd("wr1", 60)]
    bench = [make_player("Wideout", "WR", 4, total=30.0)]
    weak_room = [make_player("Backup", "QB", 0, total=15.0)] + bench
    strong_room = [make_player("Starter", "QB", 0, total=60.0)] + bench

    assert position_averages(weak_room, week=5)["QB"] == pytest.approx(3.0)
    assert position_averages(strong_room, week=5)["QB"] == pytest.approx(12.0)

    weak = {
        item.player_id: item
        for item in rank_waiver_candidates(trending, directory, stats, weak_room, week=5)
    }
    strong = {
        item.player_id: item
        for item in rank_waiver_candidates(trending, directory, stats, strong_room, week=5)
    }

    for player_id in ("qb1", "qb2"):
        assert weak[player_id].fills_weak_position is True
        assert strong[player_id].fills_weak_position is False
        assert weak[player_id].score - strong[player_id].score == pytest.approx(100.0)
    assert weak["wr1"].score == pytest.approx(strong["wr1"].score)
