"""Normalization helpers for match payloads."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..schema.models import Match
from ._coerce import to_float, to_int, to_name

logger = logging.getLogger(__name__)


def normalize_match(raw_row: Mapping[str, Any]) -> Match | None:
    """Build a Match from one store row, or None when the row is unusable."""
    match_id = to_name(raw_row.get("id"))
    matchday = to_int(raw_row.get("matchday"))
    home_team = to_name(raw_row.get("homeTeam"))
    away_team = to_name(raw_row.get("awayTeam"))
    if match_id is None or matchday is None or home_team is None or away_team is None:
        return None
    if home_team == away_team:
        return None

    home_score = to_int(raw_row.get("homeScore"))
    away_score = to_int(raw_row.get("awayScore"))
    # A stored isPlayed flag is not trusted; both scores decide.
    is_played = home_score is not None and away_score is not None
    if not is_played:
        home_score = away_score = None

    return Match(
        id=match_id,
        matchday=matchday,
        home_team=home_team,
        away_team=away_team,
        home_score=home_score,
        away_score=away_score,
        home_fantasy_points=to_float(raw_row.get("homeFantasyPoints")),
        away_fantasy_points=to_float(raw_row.get("awayFantasyPoints")),
        is_played=is_played,
    )


def normalize_matches(raw_matches: Iterable[Mapping[str, Any]] | None) -> list[Match]:
    rows: list[Match] = []
    for raw_row in raw_matches or []:
        if not isinstance(raw_row, Mapping):
            continue
        match = normalize_match(raw_row)
        if match is None:
            logger.debug("Skipping malformed match row: %r", raw_row)
            continue
        rows.append(match)
    return rows
