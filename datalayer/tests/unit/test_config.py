import pytest

import datalayer.espn_data.config as config_module
from datalayer.espn_data.config import EspnConfig, load_config

_ENV_VARS = (
    "ESPN_LEAGUE_ID",
    "ESPN_SEASON",
    "ESPN_S2",
    "ESPN_SWID",
    "ESPN_WEEK_OVERRIDE",
    "ESPN_LEAGUE_INFO_TIMEOUT",
    "ESPN_DATA_TIMEOUT",
    "SLEEPER_TIMEOUT",
    "WAIVER_WEAK_THRESHOLD",
    "TRADE_FAIRNESS_THRESHOLD",
)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env):
    config = load_config()

    assert config.league_id is None
    assert config.season is None
    assert config.week_override is None
    assert config.league_info_timeout == 10.0
    assert config.league_data_timeout == 15.0
    assert config.sleeper_timeout == 10.0
    assert config.weak_position_threshold == 8.0
    assert config.trade_fairness_threshold == 0.65


def test_reads_environment(clean_env):
    clean_env.setenv("ESPN_LEAGUE_ID", "98765")
    clean_env.setenv("ESPN_SEASON", "2023")
    clean_env.setenv("ESPN_S2", "cookie")
    clean_env.setenv("ESPN_SWID", "{swid}")
    clean_env.setenv("ESPN_WEEK_OVERRIDE", "4")
    clean_env.setenv("ESPN_DATA_TIMEOUT", "2.5")
    clean_env.setenv("TRADE_FAIRNESS_THRESHOLD", "0.8")

    config = load_config()

    assert config.league_id == "98765"
    assert config.season == 2023
    assert config.resolved_season == 2023
    assert config.espn_s2 == "cookie"
    assert config.espn_swid == "{swid}"
    assert config.week_override == 4
    assert config.league_data_timeout == 2.5
    assert config.trade_fairness_threshold == 0.8


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("ESPN_WEEK_OVERRIDE", "five", "ESPN_WEEK_OVERRIDE must be an integer."),
        ("SLEEPER_TIMEOUT", "soon", "SLEEPER_TIMEOUT must be a number."),
    ],
)
def test_invalid_values_name_the_variable(clean_env, name, value, message):
    clean_env.setenv(name, value)

    with pytest.raises(ValueError, match=message):
        load_config()


def test_resolved_season_falls_back_to_current_season():
    assert EspnConfig().resolved_season >= 2024
