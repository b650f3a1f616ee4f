from collections import Counter

import pytest

from fantalega.engine.schedule import generate_schedule, next_matchday, record_result


def test_generate_schedule_even_teams():
    matches = generate_schedule(["A", "B", "C", "D"])

    assert len(matches) == 24
    assert [m.matchday for m in matches] == sorted(m.matchday for m in matches)
    assert {m.matchday for m in matches} == set(range(1, 13))
    assert len({m.id for m in matches}) == 24
    assert all(not m.is_played and m.home_score is None for m in matches)

    for day in range(1, 13):
        teams = [t for m in matches if m.matchday == day for t in (m.home_team, m.away_team)]
        assert sorted(teams) == ["A", "B", "C", "D"]

    home_away = Counter((m.home_team, m.away_team) for m in matches)
    assert home_away[("A", "D")] == 2
    assert home_away[("D", "A")] == 2
    assert all(count == 2 for count in home_away.values())


def test_generate_schedule_odd_teams_drop_bye():
    matches = generate_schedule(["A", "B", "C"])

    assert len(matches) == 12
    assert all("BYE" not in (m.home_team, m.away_team) for m in matches)
    assert max(m.matchday for m in matches) == 12


def test_generate_schedule_needs_two_teams():
    assert generate_schedule(["A"]) == []


def test_record_result_returns_new_collection(make_match):
    matches = [make_match(1, "A", "B", match_id="x"), make_match(1, "C", "D", match_id="y")]

    updated = record_result(matches, "x", 2, 1, 70.5, 64.0)

    assert updated[0].is_played is True
    assert (updated[0].home_score, updated[0].away_score) == (2, 1)
    assert updated[0].home_fantasy_points == 70.5
    assert matches[0].is_played is False
    assert updated[1] is matches[1]


def test_record_result_clearing_scores_marks_unplayed(make_match):
    matches = [make_match(1, "A", "B", 1, 0, match_id="x")]

    updated = record_result(matches, "x", None, None)

    assert updated[0].is_played is False


def test_record_result_unknown_id(make_match):
    with pytest.raises(KeyError):
        record_result([make_match(1, "A", "B")], "missing", 1, 0)


def test_next_matchday(make_match):
    assert next_matchday([]) == 1
    assert next_matchday([make_match(4, "A", "B", 1, 0), make_match(5, "A", "B")]) == 5
    assert next_matchday([make_match(38, "A", "B", 1, 0)]) == 38
