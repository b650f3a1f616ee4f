"""Head-to-head history and rivalry classification between two teams."""

from __future__ import annotations

from typing import Iterable

from ..schema.models import Match, RivalryType
from ._helpers import by_matchday, outcome, perspective, played_matches


def _shared_history(matches: Iterable[Match], team_a: str, team_b: str) -> list[Match]:
    pair = {team_a, team_b}
    return [
        match
        for match in played_matches(matches)
        if {match.home_team, match.away_team} == pair
    ]


def _tally(history: list[Match], team: str) -> tuple[int, int, int]:
    """Return (wins, draws, losses) for ``team`` over ``history``."""
    wins = draws = losses = 0
    for match in history:
        _, goals_for, goals_against, _ = perspective(match, team)
        result = outcome(goals_for, goals_against)
        if result == "W":
            wins += 1
        elif result == "D":
            draws += 1
        else:
            losses += 1
    return wins, draws, losses


def get_head_to_head_history(
    matches: Iterable[Match], team_a: str, team_b: str
) -> list[Match]:
    """Played meetings between the two teams, oldest first."""
    return by_matchday(_shared_history(matches, team_a, team_b))


def get_rivalry_status(
    matches: Iterable[Match], subject: str, opponent: str
) -> RivalryType:
    """Classify ``subject``'s record against ``opponent``.

    Returns "nemesis" when the subject never won and lost at least once,
    "ez" when it won every meeting, "rival" when every meeting was drawn and
    None for mixed records or when the teams never met.
    """
    history = _shared_history(matches, subject, opponent)
    if not history:
        return None

    wins, draws, losses = _tally(history, subject)
    if wins == 0 and losses > 0:
        return "nemesis"
    if wins == len(history):
        return "ez"
    if draws == len(history):
        return "rival"
    return None


def get_h2h_description(matches: Iterable[Match], team_a: str, team_b: str) -> str:
    """One-line summary of the meetings between ``team_a`` and ``team_b``."""
    history = _shared_history(matches, team_a, team_b)
    total = len(history)
    if total == 0:
        return "No previous meetings between the two teams."

    wins_a, draws, wins_b = _tally(history, team_a)

    # Rule order matters: a one-sided record matches both "never beaten"
    # and "won all"; "never beaten" wins.
    if wins_a == 0 and wins_b > 0:
        return f"{team_a} has never beaten {team_b} ({wins_b} losses out of {total})."
    if wins_b == 0 and wins_a > 0:
        return f"{team_b} has never beaten {team_a} ({wins_a} losses out of {total})."
    if draws == total:
        return "The two teams have drawn every meeting."
    if wins_a == total:
        return f"{team_a} won all {total} meetings against {team_b}."
    if wins_b == total:
        return f"{team_b} won all {total} meetings against {team_a}."

    draw_label = "draw" if draws == 1 else "draws"
    return (
        f"{total} precedents: {wins_a} wins {team_a}, {draws} {draw_label}, "
        f"{wins_b} wins {team_b}."
    )
