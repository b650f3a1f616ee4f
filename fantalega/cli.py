"""CLI for the fantalega league engine.

Commands mirror the LeagueData query methods; every command prints JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

from fantalega.analyst import LeagueAnalyst, load_analyst_config
from fantalega.engine import generate_schedule
from fantalega.league_data import ALL_PLAY_ALL, COMPETITIONS, STANDARD, LeagueData


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fantalega")
    parser.add_argument(
        "--snapshot",
        help="Path to a JSON league snapshot (overrides FANTALEGA_SNAPSHOT_PATH).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    standings = subparsers.add_parser("standings", help="Print a league table.")
    standings.add_argument(
        "--competition",
        choices=sorted(COMPETITIONS),
        default=STANDARD,
        help=f"Table format (default: {STANDARD}; '{ALL_PLAY_ALL}' for Battle Royale).",
    )

    h2h = subparsers.add_parser("h2h", help="Head-to-head record between two teams.")
    h2h.add_argument("team_a")
    h2h.add_argument("team_b")

    team = subparsers.add_parser("team", help="Performance profile of one team.")
    team.add_argument("team_name")

    subparsers.add_parser("predictions", help="Schedina leaderboard.")
    subparsers.add_parser("next-matchday", help="Matchday open for predictions.")

    schedule = subparsers.add_parser(
        "schedule", help="Generate a four-leg round-robin calendar (no data needed)."
    )
    schedule.add_argument("teams", nargs="+")

    ask = subparsers.add_parser("ask", help="Ask the league analyst a free-text question.")
    ask.add_argument("question")
    ask.add_argument("--model", help="LLM model (overrides FANTALEGA_ANALYST_MODEL).")

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, default=str))


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "schedule":
        _print_json([match.to_row() for match in generate_schedule(args.teams)])
        return 0

    if args.command == "ask":
        try:
            analyst_config = load_analyst_config(model=args.model)
        except ValueError as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            return 1

    data = LeagueData(snapshot_path=args.snapshot)
    data.load()

    if args.command == "standings":
        _print_json(data.get_standings(args.competition))
        return 0
    if args.command == "h2h":
        _print_json(data.get_head_to_head(args.team_a, args.team_b))
        return 0
    if args.command == "team":
        _print_json(data.get_team_profile(args.team_name))
        return 0
    if args.command == "predictions":
        _print_json(data.get_predictions_leaderboard())
        return 0
    if args.command == "next-matchday":
        _print_json({"next_matchday": data.get_next_matchday()})
        return 0
    if args.command == "ask":
        answer = asyncio.run(LeagueAnalyst(data, analyst_config).ask(args.question))
        _print_json({"question": args.question, "answer": answer})
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
