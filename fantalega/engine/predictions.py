"""Schedina (1/X/2 predictions game) leaderboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..schema.models import (
    LegacySchedineData,
    Match,
    SchedinaLeaderboardRow,
    SchedinaSubmission,
    SchedineAdjustments,
)
from ._helpers import collect_teams, match_sign, played_matches

logger = logging.getLogger(__name__)

# The game always shows five fixtures per matchday; a card only counts as a
# perfect week when all five were evaluated and guessed.
PERFECT_WEEK_MATCHES = 5


@dataclass
class _Accumulator:
    total: int = 0
    perfect: int = 0
    last_week: int = 0


def last_completed_matchday(matches: Iterable[Match]) -> int:
    """Highest matchday with at least one played match, 0 if none."""
    return max((match.matchday for match in played_matches(matches)), default=0)


def score_submission(
    submission: SchedinaSubmission, matches_by_id: dict[str, Match]
) -> tuple[int, int]:
    """Return (correct, evaluated) for one card.

    Predictions pointing at unknown or unplayed matches are not evaluated.
    """
    correct = evaluated = 0
    for prediction in submission.predictions:
        match = matches_by_id.get(prediction.match_id)
        if match is None:
            continue
        actual = match_sign(match)
        if actual is None:
            continue
        evaluated += 1
        if actual == prediction.prediction:
            correct += 1
    return correct, evaluated


def calculate_predictions_leaderboard(
    matches: Iterable[Match],
    submissions: Iterable[SchedinaSubmission],
    legacy_data: LegacySchedineData,
    adjustments: SchedineAdjustments,
) -> list[SchedinaLeaderboardRow]:
    matches = list(matches)

    accumulators: dict[str, _Accumulator] = {
        team: _Accumulator(total=record.total_correct, perfect=record.perfect_weeks)
        for team, record in legacy_data.items()
    }
    for team in collect_teams(matches):
        accumulators.setdefault(team, _Accumulator())

    for team, adjustment in adjustments.items():
        acc = accumulators.get(team)
        if acc is None:
            logger.debug("Ignoring adjustment for unknown team %s", team)
            continue
        acc.total += adjustment.extra_correct
        acc.perfect += adjustment.extra_perfect

    last_matchday = last_completed_matchday(matches)
    matches_by_id = {match.id: match for match in matches}

    for submission in submissions:
        acc = accumulators.get(submission.team_name)
        if acc is None:
            logger.debug(
                "Ignoring submission from unknown team %s (matchday %s)",
                submission.team_name,
                submission.matchday,
            )
            continue

        correct, evaluated = score_submission(submission, matches_by_id)
        if evaluated == PERFECT_WEEK_MATCHES and correct == PERFECT_WEEK_MATCHES:
            acc.perfect += 1
        acc.total += correct
        if submission.matchday == last_matchday:
            acc.last_week = correct

    rows = [
        SchedinaLeaderboardRow(
            team_name=team,
            total_correct=acc.total,
            perfect_weeks=acc.perfect,
            last_week_correct=acc.last_week,
        )
        for team, acc in accumulators.items()
    ]
    rows.sort(key=lambda row: (-row.total_correct, -row.perfect_weeks))
    for index, row in enumerate(rows, start=1):
        row.rank = index
    return rows
