"""League tables for the standard and all-play-all competitions."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from ..schema.models import FormResult, Match, TeamStats
from ._helpers import by_matchday, collect_teams, outcome, played_matches

WIN_POINTS = 3
DRAW_POINTS = 1


def _initialize_stats(matches: list[Match]) -> dict[str, TeamStats]:
    return {team: TeamStats(team=team) for team in collect_teams(matches)}


def _assign_ranks(rows: list[TeamStats]) -> list[TeamStats]:
    for index, row in enumerate(rows, start=1):
        row.rank = index
    return rows


def _record_side(stats: TeamStats, *, opponent: str, goals_for: int, goals_against: int,
                 fantasy_points: float | None) -> None:
    result = outcome(goals_for, goals_against)
    stats.played += 1
    stats.gf += goals_for
    stats.ga += goals_against
    stats.total_fp += fantasy_points or 0.0
    if result == "W":
        stats.won += 1
        stats.points += WIN_POINTS
    elif result == "L":
        stats.lost += 1
    else:
        stats.drawn += 1
        stats.points += DRAW_POINTS
    stats.form.append(
        FormResult(result=result, opponent=opponent, score=f"{goals_for}-{goals_against}")
    )


def calculate_standard_league(matches: Iterable[Match]) -> list[TeamStats]:
    """Classic 3/1/0 table built from the fixtures actually played.

    Ties are broken by total fantasy points, goal difference and goals
    scored, in that order. Teams level on all four keep their order of first
    appearance in ``matches``.
    """
    matches = list(matches)
    stats = _initialize_stats(matches)

    for match in by_matchday(played_matches(matches)):
        _record_side(
            stats[match.home_team],
            opponent=match.away_team,
            goals_for=match.home_score,
            goals_against=match.away_score,
            fantasy_points=match.home_fantasy_points,
        )
        _record_side(
            stats[match.away_team],
            opponent=match.home_team,
            goals_for=match.away_score,
            goals_against=match.home_score,
            fantasy_points=match.away_fantasy_points,
        )

    rows = list(stats.values())
    for row in rows:
        row.gd = row.gf - row.ga
    rows.sort(key=lambda row: (-row.points, -row.total_fp, -row.gd, -row.gf))
    return _assign_ranks(rows)


def calculate_all_play_all_league(matches: Iterable[Match]) -> list[TeamStats]:
    """Battle Royale table: each matchday every performance meets every other.

    ``won``/``drawn``/``lost`` count comparisons, while ``played`` and
    ``total_fp`` advance once per performance, so with more than two teams
    ``played`` is not ``won + drawn + lost``. Goal columns are unused.
    """
    matches = list(matches)
    stats = _initialize_stats(matches)

    performances: dict[int, list[tuple[str, int, float]]] = defaultdict(list)
    for match in played_matches(matches):
        day = performances[match.matchday]
        day.append((match.home_team, match.home_score, match.home_fantasy_points or 0.0))
        day.append((match.away_team, match.away_score, match.away_fantasy_points or 0.0))

    for day in performances.values():
        for index, (team, goals, fantasy_points) in enumerate(day):
            row = stats[team]
            row.played += 1
            row.total_fp += fantasy_points
            for other_index, (_, other_goals, _) in enumerate(day):
                if other_index == index:
                    continue
                if goals > other_goals:
                    row.won += 1
                    row.points += WIN_POINTS
                elif goals < other_goals:
                    row.lost += 1
                else:
                    row.drawn += 1
                    row.points += DRAW_POINTS

    rows = list(stats.values())
    rows.sort(key=lambda row: (-row.points, -row.total_fp, -row.won))
    return _assign_ranks(rows)
