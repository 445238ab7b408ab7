"""Static lookup tables for ESPN lineup slots, positions, and NFL teams."""

from __future__ import annotations

from typing import Any, Mapping

BENCH_SLOT_ID = 20
IR_SLOT_ID = 21
FLEX_SLOT_ID = 23
DEFENSE_SLOT_ID = 16

LINEUP_SLOT_LABELS: Mapping[int, str] = {
    0: "QB",
    2: "RB",
    4: "WR",
    6: "TE",
    16: "D/ST",
    17: "K",
    20: "BE",
    21: "IR",
    23: "FLEX",
}

# Slots dedicated to a single real position; FLEX/BE/IR say nothing about it.
DEDICATED_SLOT_POSITIONS: Mapping[int, str] = {
    0: "QB",
    2: "RB",
    4: "WR",
    6: "TE",
    16: "D/ST",
    17: "K",
}

# ESPN's defaultPositionId values.
ESPN_POSITION_IDS: Mapping[int, str] = {
    1: "QB",
    2: "RB",
    3: "WR",
    4: "TE",
    5: "K",
    16: "D/ST",
}

SLOT_IDS_BY_LABEL: Mapping[str, int] = {
    "QB": 0,
    "RB": 2,
    "WR": 4,
    "TE": 6,
    "D/ST": 16,
    "DST": 16,
    "DEF": 16,
    "K": 17,
    "BE": 20,
    "BN": 20,
    "BENCH": 20,
    "IR": 21,
    "FLEX": 23,
    "RB/WR/TE": 23,
}

STANDARD_POSITIONS: tuple[str, ...] = ("QB", "RB", "WR", "TE", "K", "D/ST")

NFL_TEAM_ABBREVIATIONS: Mapping[int, str] = {
    1: "ATL",
    2: "BUF",
    3: "CHI",
    4: "CIN",
    5: "CLE",
    6: "DAL",
    7: "DEN",
    8: "DET",
    9: "GB",
    10: "TEN",
    11: "IND",
    12: "KC",
    13: "LV",
    14: "LAR",
    15: "MIA",
    16: "MIN",
    17: "NE",
    18: "NO",
    19: "NYG",
    20: "NYJ",
    21: "PHI",
    22: "ARI",
    23: "PIT",
    24: "LAC",
    25: "SF",
    26: "SEA",
    27: "TB",
    28: "WSH",
    29: "CAR",
    30: "JAX",
    33: "BAL",
    34: "HOU",
}

UNKNOWN_SLOT_LABEL = "SLOT"
FREE_AGENT_TEAM = "FA"


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def slot_label(slot_id: Any) -> str:
    key = _as_int(slot_id)
    if key is None:
        return UNKNOWN_SLOT_LABEL
    return LINEUP_SLOT_LABELS.get(key, UNKNOWN_SLOT_LABEL)


def team_abbreviation(team_id: Any) -> str:
    key = _as_int(team_id)
    if key is None:
        return FREE_AGENT_TEAM
    return NFL_TEAM_ABBREVIATIONS.get(key, FREE_AGENT_TEAM)


def slot_id_for_label(label: Any) -> int | None:
    if not isinstance(label, str):
        return None
    return SLOT_IDS_BY_LABEL.get(label.strip().upper())


def is_starter_slot(slot_id: int) -> bool:
    return slot_id < BENCH_SLOT_ID and slot_id != IR_SLOT_ID


def to_sleeper_position(position: str) -> str:
    """ESPN labels the defense "D/ST"; Sleeper calls it "DEF"."""

    return "DEF" if position == "D/ST" else position


def to_espn_position(position: str) -> str:
    return "D/ST" if position in {"DEF", "DST"} else position
