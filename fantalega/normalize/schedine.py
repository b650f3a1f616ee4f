"""Normalization helpers for schedina submissions, adjustments and legacy data."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..schema.models import Adjustment, LegacyRecord, Prediction, SchedinaSubmission
from ._coerce import to_int, to_name

_SIGNS = {"1", "X", "2"}


def _normalize_predictions(value: Any) -> tuple[Prediction, ...]:
    if not isinstance(value, list):
        return ()
    predictions: dict[str, Prediction] = {}
    for raw in value:
        if not isinstance(raw, Mapping):
            continue
        match_id = to_name(raw.get("matchId"))
        sign = str(raw.get("prediction") or "").strip().upper()
        if match_id is None or sign not in _SIGNS:
            continue
        # At most one prediction per match; the last one given is kept.
        predictions[match_id] = Prediction(match_id=match_id, prediction=sign)
    return tuple(predictions.values())


def normalize_submissions(
    raw_submissions: Iterable[Mapping[str, Any]] | None,
) -> list[SchedinaSubmission]:
    rows: list[SchedinaSubmission] = []
    for raw in raw_submissions or []:
        if not isinstance(raw, Mapping):
            continue
        team_name = to_name(raw.get("teamName"))
        matchday = to_int(raw.get("matchday"))
        if team_name is None or matchday is None:
            continue
        rows.append(
            SchedinaSubmission(
                team_name=team_name,
                matchday=matchday,
                predictions=_normalize_predictions(raw.get("predictions")),
                timestamp=str(raw.get("timestamp") or ""),
            )
        )
    return rows


def normalize_adjustments(
    raw_adjustments: Mapping[str, Any] | None,
) -> dict[str, Adjustment]:
    adjustments: dict[str, Adjustment] = {}
    for team, raw in (raw_adjustments or {}).items():
        name = to_name(team)
        if name is None or not isinstance(raw, Mapping):
            continue
        adjustments[name] = Adjustment(
            extra_correct=to_int(raw.get("extraCorrect")) or 0,
            extra_perfect=to_int(raw.get("extraPerfect")) or 0,
        )
    return adjustments


def normalize_legacy(raw_legacy: Mapping[str, Any] | None) -> dict[str, LegacyRecord]:
    legacy: dict[str, LegacyRecord] = {}
    for team, raw in (raw_legacy or {}).items():
        name = to_name(team)
        if name is None or not isinstance(raw, Mapping):
            continue
        legacy[name] = LegacyRecord(
            total_correct=to_int(raw.get("totalCorrect")) or 0,
            perfect_weeks=to_int(raw.get("perfectWeeks")) or 0,
        )
    return legacy
