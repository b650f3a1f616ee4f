"""Shared utility functions for engine modules."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..schema.models import Match, Outcome, Sign


def played_matches(matches: Iterable[Match]) -> list[Match]:
    """Return matches that carry both scores."""
    return [match for match in matches if match.has_result]


def by_matchday(matches: Iterable[Match]) -> list[Match]:
    """Stable ascending matchday sort."""
    return sorted(matches, key=lambda match: match.matchday)


def collect_teams(matches: Iterable[Match]) -> list[str]:
    """Every team named in the collection, in first-appearance order."""
    teams: dict[str, None] = {}
    for match in matches:
        teams.setdefault(match.home_team, None)
        teams.setdefault(match.away_team, None)
    return list(teams)


def outcome(goals_for: int, goals_against: int) -> Outcome:
    if goals_for > goals_against:
        return "W"
    if goals_for < goals_against:
        return "L"
    return "D"


def match_sign(match: Match) -> Sign | None:
    """1/X/2 outcome of a played match, or None when it has no result."""
    if not match.has_result:
        return None
    if match.home_score > match.away_score:
        return "1"
    if match.home_score < match.away_score:
        return "2"
    return "X"


def perspective(match: Match, team: str) -> tuple[str, int, int, float | None]:
    """Return (opponent, goals_for, goals_against, fantasy_points) for ``team``."""
    if match.home_team == team:
        return (
            match.away_team,
            match.home_score or 0,
            match.away_score or 0,
            match.home_fantasy_points,
        )
    return (
        match.home_team,
        match.away_score or 0,
        match.home_score or 0,
        match.away_fantasy_points,
    )


def round_half_up(value: float, digits: int = 0) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
