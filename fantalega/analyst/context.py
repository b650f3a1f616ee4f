"""League context handed to the analyst agent."""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..engine import calculate_all_play_all_league, calculate_standard_league
from ..engine._helpers import played_matches
from ..schema.models import Match


def build_league_context(matches: Iterable[Match], recent_results: int = 10) -> dict[str, Any]:
    """Both tables plus the last ``recent_results`` played matches.

    Recent results keep the order of the match log, so the newest entered
    result comes last.
    """
    matches = list(matches)
    standard = [
        {
            "rank": row.rank,
            "team": row.team,
            "p": row.played,
            "pts": row.points,
            "w": row.won,
            "d": row.drawn,
            "l": row.lost,
            "gf": row.gf,
            "ga": row.ga,
        }
        for row in calculate_standard_league(matches)
    ]
    battle_royale = [
        {
            "rank": row.rank,
            "team": row.team,
            "pts": row.points,
            "w": row.won,
            "d": row.drawn,
            "l": row.lost,
        }
        for row in calculate_all_play_all_league(matches)
    ]
    played = played_matches(matches)
    recent = played[-recent_results:] if recent_results else []
    return {
        "standard": standard,
        "battle_royale": battle_royale,
        "recent_results": [
            f"Matchday {m.matchday}: {m.home_team} {m.home_score}-{m.away_score} {m.away_team}"
            for m in recent
        ],
    }


def build_user_prompt(question: str, context: dict[str, Any]) -> str:
    lines = [
        "Here is the data for the league.",
        "",
        "## Competition 1: Campionato (standard league)",
        json.dumps(context["standard"], indent=2),
        "",
        "## Competition 2: Battle Royale (all-vs-all every matchday)",
        "Every matchday each team plays against all other teams.",
        "3 points for a win, 1 for a draw, 0 for a loss, decided on goals scored.",
        json.dumps(context["battle_royale"], indent=2),
        "",
        "## Recent match results",
        json.dumps(context["recent_results"], indent=2),
        "",
        f'## User question: "{question}"',
    ]
    return "\n".join(lines)
