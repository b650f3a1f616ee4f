"""Helpers keeping one current schedina per team and matchday."""

from __future__ import annotations

from typing import Iterable

from ..schema.models import SchedinaSubmission


def upsert_submission(
    submissions: Iterable[SchedinaSubmission], submission: SchedinaSubmission
) -> list[SchedinaSubmission]:
    """Replace any card for the same team and matchday with ``submission``."""
    kept = [
        existing
        for existing in submissions
        if not (
            existing.team_name == submission.team_name
            and existing.matchday == submission.matchday
        )
    ]
    kept.append(submission)
    return kept


def delete_submission(
    submissions: Iterable[SchedinaSubmission], team_name: str, matchday: int
) -> list[SchedinaSubmission]:
    return [
        existing
        for existing in submissions
        if not (existing.team_name == team_name and existing.matchday == matchday)
    ]


def latest_submissions(
    submissions: Iterable[SchedinaSubmission],
) -> list[SchedinaSubmission]:
    """Collapse duplicates per (team, matchday), keeping the newest timestamp.

    ISO-8601 instants in the same zone compare correctly as strings; on equal
    timestamps the later entry wins. Output keeps first-seen key order.
    """
    latest: dict[tuple[str, int], SchedinaSubmission] = {}
    for submission in submissions:
        key = (submission.team_name, submission.matchday)
        current = latest.get(key)
        if current is None or submission.timestamp >= current.timestamp:
            latest[key] = submission
    return list(latest.values())
