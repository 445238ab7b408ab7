"""CLI for the ESPN data layer.

Each subcommand maps to one EspnLeagueData read and prints the result as
JSON with the same camelCase keys the dashboard consumes.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from typing import Any

from dotenv import load_dotenv

from datalayer.espn_data import (
    EspnLeagueData,
    LeagueLinkError,
    UpstreamUnavailableError,
    connect_league,
)
from datalayer.espn_data.schema.models import ViewModel


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="espndl")
    subparsers = parser.add_subparsers(dest="command", required=True)

    connect = subparsers.add_parser(
        "connect", help="Validate a league id and season against ESPN."
    )
    connect.add_argument("league_id", help="ESPN league id.")
    connect.add_argument("season", help="Season year, e.g. 2024.")

    for name, help_text in (
        ("teams", "Teams and normalized rosters for a week."),
        ("matchups", "Matchups and normalized rosters for a week."),
        ("standings", "League standings by wins, then points for."),
        ("outlook", "A team's matchup with its win probability."),
        ("waivers", "Ranked waiver-wire pickups for a team."),
        ("trades", "Suggested one-for-one trades for a team."),
        ("rankings", "Season PPR rankings by position."),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument(
            "--league-id",
            help="ESPN league id (overrides ESPN_LEAGUE_ID).",
        )
        command.add_argument("--season", type=int, help="Season year.")
        if name != "rankings":
            command.add_argument("--week", type=int, help="NFL week (defaults to current).")
        if name in {"outlook", "waivers", "trades"}:
            command.add_argument(
                "--team-id",
                type=int,
                required=name != "waivers",
                help="Your ESPN team id.",
            )
        if name == "rankings":
            command.add_argument("--limit", type=int, default=25)

    return parser


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, ViewModel):
        return value.to_payload()
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def _print_json(payload: object) -> None:
    print(json.dumps(_to_jsonable(payload), indent=2, sort_keys=True, default=str))


async def _run(args: argparse.Namespace) -> Any:
    if args.command == "connect":
        return await connect_league(args.league_id, args.season)

    data = EspnLeagueData(league_id=args.league_id, season=args.season)
    if args.command == "rankings":
        return await data.get_player_rankings(limit=args.limit)

    week = data.resolve_week(args.week)
    if args.command == "teams":
        return {"week": week, "teams": await data.get_teams(week)}
    if args.command == "matchups":
        return {"week": week, "matchups": await data.get_matchups(week)}
    if args.command == "standings":
        return await data.get_standings(week)
    if args.command == "outlook":
        return await data.get_matchup_outlook(args.team_id, week)
    if args.command == "waivers":
        return await data.get_waiver_suggestions(args.team_id, week)
    if args.command == "trades":
        return await data.get_trade_suggestions(args.team_id, week)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        result = asyncio.run(_run(args))
    except LeagueLinkError as exc:
        print(f"Error: {exc}")
        return 1
    except UpstreamUnavailableError as exc:
        print(f"Error: upstream {exc.source} unavailable ({exc.endpoint}): {exc}")
        return 1
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2

    _print_json(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
