"""Public package exports for the ESPN data layer."""

from .config import EspnConfig, load_config
from .errors import (
    EspnApiError,
    LeagueLinkError,
    SleeperApiError,
    UpstreamUnavailableError,
)
from .espn_league_data import EspnLeagueData
from .leagues import connect_league
from .schema import models as schema_models
from .season import estimate_week

__all__ = [
    "EspnConfig",
    "EspnLeagueData",
    "load_config",
    "connect_league",
    "estimate_week",
    "schema_models",
    "EspnApiError",
    "LeagueLinkError",
    "SleeperApiError",
    "UpstreamUnavailableError",
]
