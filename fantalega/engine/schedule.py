"""Fixture generation and result entry."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..schema.models import Match
from ._helpers import played_matches

BYE = "BYE"
LEGS = 4
LAST_MATCHDAY = 38


def _round_robin(teams: list[str]) -> list[tuple[int, str, str]]:
    """Single leg via the circle method; the first team stays fixed."""
    if len(teams) % 2:
        teams = [*teams, BYE]
    size = len(teams)
    rounds = size - 1

    fixtures: list[tuple[int, str, str]] = []
    rotation = list(teams)
    for round_index in range(rounds):
        for i in range(size // 2):
            home, away = rotation[i], rotation[size - 1 - i]
            if BYE not in (home, away):
                fixtures.append((round_index + 1, home, away))
        last = rotation.pop()
        rotation.insert(1, last)
    return fixtures


def generate_schedule(team_names: Sequence[str]) -> list[Match]:
    """Four-leg round robin with alternating home sides, all unplayed."""
    teams = list(team_names)
    if len(teams) < 2:
        return []

    first_leg = _round_robin(teams)
    rounds = len(teams) - 1 if len(teams) % 2 == 0 else len(teams)

    matches: list[Match] = []
    for leg in range(LEGS):
        swap = leg % 2 == 1
        for matchday, home, away in first_leg:
            if swap:
                home, away = away, home
            matches.append(
                Match(
                    id=f"auto-{len(matches) + 1}",
                    matchday=matchday + rounds * leg,
                    home_team=home,
                    away_team=away,
                )
            )
    return sorted(matches, key=lambda match: match.matchday)


def record_result(
    matches: Iterable[Match],
    match_id: str,
    home_score: Optional[int],
    away_score: Optional[int],
    home_fantasy_points: Optional[float] = None,
    away_fantasy_points: Optional[float] = None,
) -> list[Match]:
    """Return a new collection with the result of ``match_id`` replaced.

    Passing None scores clears the result. Raises KeyError for an unknown id.
    """
    updated: list[Match] = []
    found = False
    for match in matches:
        if match.id == match_id:
            found = True
            match = replace(
                match,
                home_score=home_score,
                away_score=away_score,
                home_fantasy_points=home_fantasy_points,
                away_fantasy_points=away_fantasy_points,
                is_played=home_score is not None and away_score is not None,
            )
        updated.append(match)
    if not found:
        raise KeyError(f"Unknown match id: {match_id}")
    return updated


def next_matchday(matches: Iterable[Match]) -> int:
    """Matchday open for predictions: the one after the last played."""
    last_played = max((match.matchday for match in played_matches(matches)), default=0)
    return min(last_played + 1, LAST_MATCHDAY)
