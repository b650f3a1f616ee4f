"""Single-team analytics for the team detail view."""

from __future__ import annotations

from typing import Iterable, Optional

from ..schema.models import (
    FormResult,
    Match,
    OpponentRecord,
    ScoreFrequency,
    TeamProfileStats,
)
from ._helpers import by_matchday, outcome, perspective, played_matches, round_half_up

FORM_LENGTH = 10
TOP_RESULTS = 3
GOAL_BUCKETS = ("0", "1", "2", "3", "4+")


def _goal_bucket(goals: int) -> str:
    return GOAL_BUCKETS[min(goals, len(GOAL_BUCKETS) - 1)]


def _pick(
    records: Iterable[OpponentRecord], predicate, sort_key
) -> Optional[OpponentRecord]:
    candidates = sorted((r for r in records if predicate(r)), key=sort_key)
    return candidates[0] if candidates else None


def get_team_profile(matches: Iterable[Match], team_name: str) -> TeamProfileStats | None:
    """Aggregate every played match of ``team_name``.

    Returns None when the team has not played yet. ``form`` holds the last
    ten results most recent first; ``avg_fantasy_points`` is None when no
    match carries fantasy points.
    """
    team_matches = by_matchday(
        match for match in played_matches(matches) if match.involves(team_name)
    )
    played = len(team_matches)
    if played == 0:
        return None

    goals_for_total = goals_against_total = 0
    fp_total = 0.0
    fp_count = 0
    wins = draws = losses = 0
    form: list[FormResult] = []
    frequencies: dict[str, ScoreFrequency] = {}
    opponents: dict[str, OpponentRecord] = {}
    distribution = {bucket: 0 for bucket in GOAL_BUCKETS}

    for match in team_matches:
        opponent, goals_for, goals_against, fantasy_points = perspective(match, team_name)
        result = outcome(goals_for, goals_against)
        score = f"{goals_for}-{goals_against}"

        goals_for_total += goals_for
        goals_against_total += goals_against
        if fantasy_points is not None:
            fp_total += fantasy_points
            fp_count += 1

        record = opponents.setdefault(opponent, OpponentRecord(opponent=opponent))
        record.total += 1
        if result == "W":
            wins += 1
            record.wins += 1
        elif result == "L":
            losses += 1
            record.losses += 1
        else:
            draws += 1
            record.draws += 1

        form.append(FormResult(result=result, opponent=opponent, score=score))
        frequency = frequencies.setdefault(score, ScoreFrequency(score=score, result=result))
        frequency.count += 1
        distribution[_goal_bucket(goals_for)] += 1

    top_results = sorted(frequencies.values(), key=lambda f: -f.count)[:TOP_RESULTS]
    records = list(opponents.values())

    return TeamProfileStats(
        team=team_name,
        played=played,
        wins=wins,
        draws=draws,
        losses=losses,
        total_goals_for=goals_for_total,
        total_goals_against=goals_against_total,
        avg_goals_for=round_half_up(goals_for_total / played, 2),
        avg_goals_against=round_half_up(goals_against_total / played, 2),
        avg_fantasy_points=round_half_up(fp_total / fp_count, 2) if fp_count else None,
        win_rate=int(round_half_up(wins / played * 100)),
        form=form[-FORM_LENGTH:][::-1],
        top_results=top_results,
        goal_distribution=distribution,
        nemesis=_pick(records, lambda r: r.wins == 0, lambda r: (-r.losses, -r.total)),
        ez_win=_pick(records, lambda r: r.wins == r.total, lambda r: -r.total),
        fierce_rival=_pick(records, lambda r: r.draws == r.total, lambda r: -r.total),
        matches=team_matches[::-1],
    )
