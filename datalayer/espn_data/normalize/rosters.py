"""Normalization helpers for ESPN roster entries.

The same roster slot arrives in different shapes depending on the endpoint:
the player may sit under ``player``, ``playerPoolEntry.player``, directly on
the entry, or under ``entry.playerPoolEntry.player``, and the lineup slot may
be numeric or a label. Every lookup below walks a fixed fallback chain and
ends in a default, so normalization never raises.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

from ..schema.models import NormalizedPlayer, ProjectedBreakdown
from ..schema.positions import (
    BENCH_SLOT_ID,
    DEDICATED_SLOT_POSITIONS,
    DEFENSE_SLOT_ID,
    ESPN_POSITION_IDS,
    FREE_AGENT_TEAM,
    NFL_TEAM_ABBREVIATIONS,
    STANDARD_POSITIONS,
    is_starter_slot,
    slot_id_for_label,
    slot_label,
    to_espn_position,
)

EMPTY_SLOT_NAME = "Empty Slot"
UNKNOWN_POSITION = "N/A"

_NAME_FIELDS = ("fullName", "firstName", "lastName")
_SLOT_ID_FIELDS = ("lineupSlotId", "slot", "lineupSlot", "slotCategoryId")
_SLOT_LABEL_FIELDS = ("rosteredPosition", "slotPosition")
_TOTAL_POINT_FIELDS = ("totalPoints", "appliedStatTotal")
_BREAKDOWN_FIELD = "projectedPointBreakdown"
_USES_POINTS_KEY = "usesPoints"


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _dig(value: Any, *keys: str) -> Any:
    current = value
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _has_name_fields(raw: Mapping[str, Any]) -> bool:
    return any(_text(raw.get(key)) for key in _NAME_FIELDS)


def locate_player(entry: Any) -> Optional[Mapping[str, Any]]:
    raw = _as_mapping(entry)
    candidates = (
        raw.get("player"),
        _dig(raw, "playerPoolEntry", "player"),
        raw if _has_name_fields(raw) else None,
        _dig(raw, "entry", "playerPoolEntry", "player"),
    )
    for candidate in candidates:
        if isinstance(candidate, Mapping) and candidate:
            return candidate
    return None


def locate_slot_id(entry: Any) -> int:
    raw = _as_mapping(entry)
    for key in _SLOT_ID_FIELDS:
        value = raw.get(key)
        slot_id = _as_int(value)
        if slot_id is None:
            slot_id = slot_id_for_label(value)
        if slot_id is not None:
            return slot_id
    for key in _SLOT_LABEL_FIELDS:
        slot_id = slot_id_for_label(raw.get(key))
        if slot_id is not None:
            return slot_id
    return BENCH_SLOT_ID


def _pro_team_id(player: Mapping[str, Any], entry: Mapping[str, Any]) -> Any:
    for source in (player, entry):
        for key in ("proTeamId", "proTeam"):
            value = source.get(key)
            if value is not None and value != "":
                return value
    return None


def _opponent_team_id(player: Mapping[str, Any], entry: Mapping[str, Any]) -> Any:
    for source in (player, entry):
        value = source.get("opponentProTeamId")
        if value is not None:
            return value
    return None


def _team_abbreviation(
    pro_team: Any, team_lookup: Mapping[int, str]
) -> Optional[str]:
    if pro_team is None:
        return None
    team_id = _as_int(pro_team)
    if team_id is not None:
        return team_lookup.get(team_id)
    label = _text(pro_team)
    if label and label.upper() in team_lookup.values():
        return label.upper()
    return None


def _display_name(
    player: Mapping[str, Any],
    slot_id: int,
    team_abbrev: Optional[str],
    pro_team: Any,
) -> str:
    full_name = _text(player.get("fullName"))
    if full_name:
        return full_name
    first = _text(player.get("firstName"))
    last = _text(player.get("lastName"))
    if first and last:
        return f"{first} {last}"
    if slot_id == DEFENSE_SLOT_ID and team_abbrev:
        return f"{team_abbrev} D/ST"
    if last:
        return last
    if pro_team is not None:
        return f"{team_abbrev or FREE_AGENT_TEAM} D/ST"
    return EMPTY_SLOT_NAME


def _standard_from_label(label: Any) -> Optional[str]:
    text = _text(label)
    if not text:
        return None
    upper = text.upper()
    if upper in {"D/ST", "DST", "DEF"}:
        return "D/ST"
    for part in upper.split("/"):
        candidate = to_espn_position(part.strip())
        if candidate in STANDARD_POSITIONS:
            return candidate
    return None


def _resolve_position(player: Mapping[str, Any], slot_id: int) -> str:
    position = _standard_from_label(player.get("defaultPosition"))
    if position:
        return position

    default_id = _as_int(player.get("defaultPositionId"))
    if default_id is not None and default_id in ESPN_POSITION_IDS:
        return ESPN_POSITION_IDS[default_id]

    eligible = player.get("eligiblePositions")
    if isinstance(eligible, (list, tuple)):
        for label in eligible:
            position = _standard_from_label(label)
            if position:
                return position

    eligible_slots = player.get("eligibleSlots")
    if isinstance(eligible_slots, (list, tuple)):
        for value in eligible_slots:
            eligible_slot = _as_int(value)
            if eligible_slot in DEDICATED_SLOT_POSITIONS:
                return DEDICATED_SLOT_POSITIONS[eligible_slot]

    return DEDICATED_SLOT_POSITIONS.get(slot_id, UNKNOWN_POSITION)


def parse_breakdown(raw: Any) -> Optional[ProjectedBreakdown]:
    if not isinstance(raw, Mapping) or not raw:
        return None
    per_stat: dict[str, float] = {}
    for key, value in raw.items():
        if key == _USES_POINTS_KEY:
            continue
        points = _as_float(value)
        if points is not None:
            per_stat[str(key)] = points
    return ProjectedBreakdown(
        per_stat_projections=per_stat,
        uses_points=bool(raw.get(_USES_POINTS_KEY)),
    )


def _first_number(sources: Iterable[Mapping[str, Any]], keys: Iterable[str]) -> Optional[float]:
    keys = tuple(keys)
    for source in sources:
        for key in keys:
            value = _as_float(source.get(key))
            if value is not None:
                return value
    return None


def _total_points(entry: Mapping[str, Any], player: Mapping[str, Any]) -> float:
    pool_entry = _as_mapping(entry.get("playerPoolEntry"))
    total = _first_number((entry, pool_entry, player), _TOTAL_POINT_FIELDS)
    return total if total is not None else 0.0


def _projected_points(entry: Mapping[str, Any], player: Mapping[str, Any]) -> float:
    nested_player = _as_mapping(_dig(entry, "playerPoolEntry", "player"))
    for source in (entry, player, nested_player):
        breakdown = parse_breakdown(source.get(_BREAKDOWN_FIELD))
        if breakdown is not None:
            return breakdown.total()
    projected = _first_number((entry, player), ("projectedPoints",))
    return projected if projected is not None else 0.0


def _player_id(player: Mapping[str, Any], entry: Mapping[str, Any]) -> Optional[str]:
    for source, keys in ((player, ("playerId", "id")), (entry, ("playerId",))):
        for key in keys:
            value = _text(source.get(key))
            if value:
                return value
    return None


def normalize_roster_entry(
    entry: Any, team_lookup: Mapping[int, str] = NFL_TEAM_ABBREVIATIONS
) -> NormalizedPlayer:
    raw = _as_mapping(entry)
    located = locate_player(raw)
    player = located or {}
    slot_id = locate_slot_id(raw)

    pro_team = _pro_team_id(player, raw)
    team_abbrev = _team_abbreviation(pro_team, team_lookup)
    opponent = _team_abbreviation(_opponent_team_id(player, raw), team_lookup)

    return NormalizedPlayer(
        player_id=_player_id(player, raw) if located else None,
        player_name=_display_name(player, slot_id, team_abbrev, pro_team),
        position=_resolve_position(player, slot_id),
        lineup_slot_id=slot_id,
        lineup_slot=slot_label(slot_id),
        is_starter=is_starter_slot(slot_id),
        nfl_team=team_abbrev or FREE_AGENT_TEAM,
        opponent=opponent or "",
        total_points=_total_points(raw, player),
        projected_points=_projected_points(raw, player),
    )


def is_empty_slot(player: NormalizedPlayer) -> bool:
    return player.player_name == EMPTY_SLOT_NAME


def sort_roster(players: Iterable[NormalizedPlayer]) -> list[NormalizedPlayer]:
    """Starters first, then ascending lineup slot; ties keep input order."""

    return sorted(players, key=lambda player: (not player.is_starter, player.lineup_slot_id))


def process_roster(
    entries: Any, team_lookup: Mapping[int, str] = NFL_TEAM_ABBREVIATIONS
) -> list[NormalizedPlayer]:
    if not isinstance(entries, (list, tuple)):
        return []
    return sort_roster(normalize_roster_entry(entry, team_lookup) for entry in entries)
