"""Configuration helpers for the ESPN data layer."""

from __future__ import annotations

from dataclasses import dataclass
import os
from dotenv import load_dotenv

from .season import season_start_year

DEFAULT_WEAK_POSITION_THRESHOLD = 8.0
DEFAULT_TRADE_FAIRNESS_THRESHOLD = 0.65


@dataclass(frozen=True)
class EspnConfig:
    league_id: str | None = None
    season: int | None = None
    espn_s2: str = ""
    espn_swid: str = ""
    week_override: int | None = None
    league_info_timeout: float = 10.0
    league_data_timeout: float = 15.0
    sleeper_timeout: float = 10.0
    weak_position_threshold: float = DEFAULT_WEAK_POSITION_THRESHOLD
    trade_fairness_threshold: float = DEFAULT_TRADE_FAIRNESS_THRESHOLD

    @property
    def resolved_season(self) -> int:
        return self.season if self.season is not None else season_start_year()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number.") from exc


def load_config() -> EspnConfig:
    load_dotenv()
    league_id = os.getenv("ESPN_LEAGUE_ID") or None

    return EspnConfig(
        league_id=league_id,
        season=_optional_int("ESPN_SEASON"),
        espn_s2=os.getenv("ESPN_S2", ""),
        espn_swid=os.getenv("ESPN_SWID", ""),
        week_override=_optional_int("ESPN_WEEK_OVERRIDE"),
        league_info_timeout=_float("ESPN_LEAGUE_INFO_TIMEOUT", 10.0),
        league_data_timeout=_float("ESPN_DATA_TIMEOUT", 15.0),
        sleeper_timeout=_float("SLEEPER_TIMEOUT", 10.0),
        weak_position_threshold=_float(
            "WAIVER_WEAK_THRESHOLD", DEFAULT_WEAK_POSITION_THRESHOLD
        ),
        trade_fairness_threshold=_float(
            "TRADE_FAIRNESS_THRESHOLD", DEFAULT_TRADE_FAIRNESS_THRESHOLD
        ),
    )
