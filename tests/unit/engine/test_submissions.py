from fantalega.engine.submissions import (
    delete_submission,
    latest_submissions,
    upsert_submission,
)
from fantalega.schema.models import Prediction, SchedinaSubmission


def _card(team, matchday, sign="1", timestamp="2025-01-01T00:00:00Z"):
    return SchedinaSubmission(
        team_name=team,
        matchday=matchday,
        predictions=(Prediction(match_id="m1", prediction=sign),),
        timestamp=timestamp,
    )


def test_upsert_replaces_same_team_and_matchday():
    existing = [_card("A", 1, "1"), _card("B", 1, "X"), _card("A", 2, "2")]

    updated = upsert_submission(existing, _card("A", 1, "2"))

    assert len(updated) == 3
    assert updated[-1].predictions[0].prediction == "2"
    assert [(s.team_name, s.matchday) for s in updated] == [("B", 1), ("A", 2), ("A", 1)]
    assert len(existing) == 3


def test_delete_submission():
    existing = [_card("A", 1), _card("A", 2)]

    assert [(s.team_name, s.matchday) for s in delete_submission(existing, "A", 1)] == [
        ("A", 2)
    ]


def test_latest_submissions_keeps_newest_timestamp():
    cards = [
        _card("A", 1, "2", "2025-01-02T00:00:00Z"),
        _card("A", 1, "1", "2025-01-01T00:00:00Z"),
        _card("B", 1, "X", "2025-01-01T00:00:00Z"),
    ]

    latest = latest_submissions(cards)

    assert [(s.team_name, s.predictions[0].prediction) for s in latest] == [("A", "2"), ("B", "X")]
