from fantalega.engine.standings import (
    calculate_all_play_all_league,
    calculate_standard_league,
)


def _by_team(rows):
    return {row.team: row for row in rows}


def test_standard_single_win(make_match):
    matches = [make_match(1, "A", "B", 2, 0, 70.0, 60.0)]

    rows = calculate_standard_league(matches)

    assert [row.team for row in rows] == ["A", "B"]
    a, b = rows
    assert (a.rank, a.played, a.won, a.points, a.gf, a.ga, a.gd) == (1, 1, 1, 3, 2, 0, 2)
    assert (b.rank, b.played, b.lost, b.points, b.gf, b.ga, b.gd) == (2, 1, 1, 0, 0, 2, -2)
    assert a.form[0].result == "W"
    assert a.form[0].score == "2-0"
    assert b.form[0].result == "L"
    assert b.form[0].opponent == "A"
    assert b.form[0].score == "0-2"


def test_standard_draw_breaks_tie_on_fantasy_points(make_match):
    matches = [make_match(1, "A", "B", 1, 1, 65.0, 71.5)]

    rows = calculate_standard_league(matches)

    assert [row.team for row in rows] == ["B", "A"]
    assert all(row.points == 1 and row.drawn == 1 for row in rows)
    assert rows[0].total_fp == 71.5


def test_standard_tie_break_chain_goal_difference_then_goals_for(make_match):
    matches = [
        make_match(1, "A", "X", 3, 0, 60.0, 60.0),
        make_match(1, "B", "Y", 1, 0, 60.0, 60.0),
        make_match(2, "C", "Z", 4, 2, 60.0, 60.0),
    ]

    rows = calculate_standard_league(matches)

    # All on 3 points and 60 FP; goal difference is +3, +2, +1.
    assert [row.team for row in rows[:3]] == ["A", "C", "B"]


def test_standard_goals_for_decides_when_difference_equal(make_match):
    matches = [
        make_match(1, "A", "X", 1, 0, 60.0, 50.0),
        make_match(1, "B", "Y", 3, 2, 60.0, 50.0),
    ]

    rows = calculate_standard_league(matches)

    assert [row.team for row in rows[:2]] == ["B", "A"]


def test_unplayed_teams_listed_with_zero_row(make_match):
    matches = [
        make_match(1, "A", "B", 2, 1),
        make_match(2, "C", "D"),
    ]

    for calculate in (calculate_standard_league, calculate_all_play_all_league):
        rows = _by_team(calculate(matches))
        assert set(rows) == {"A", "B", "C", "D"}
        assert rows["C"].played == 0
        assert rows["D"].points == 0
        assert rows["D"].total_fp == 0.0
        assert sorted(row.rank for row in rows.values()) == [1, 2, 3, 4]


def test_form_follows_matchday_order_not_input_order(make_match):
    matches = [
        make_match(3, "A", "B", 0, 1),
        make_match(1, "A", "C", 2, 0),
        make_match(2, "D", "A", 1, 1),
    ]

    row = _by_team(calculate_standard_league(matches))["A"]

    assert [f.result for f in row.form] == ["W", "D", "L"]
    assert [f.opponent for f in row.form] == ["C", "D", "B"]


def test_null_fantasy_points_count_as_zero(make_match):
    matches = [make_match(1, "A", "B", 1, 0, None, 55.0)]

    rows = _by_team(calculate_standard_league(matches))

    assert rows["A"].total_fp == 0.0
    assert rows["B"].total_fp == 55.0


def test_standard_invariants_hold(make_match):
    matches = [
        make_match(1, "A", "B", 2, 0),
        make_match(1, "C", "D", 1, 1),
        make_match(2, "A", "C", 0, 3),
        make_match(2, "B", "D", 2, 2),
        make_match(3, "A", "D", 1, 0),
        make_match(3, "B", "C"),
    ]
    played = [m for m in matches if m.is_played]
    decisive = [m for m in played if m.home_score != m.away_score]

    rows = calculate_standard_league(matches)

    for row in rows:
        assert row.played == row.won + row.drawn + row.lost
        assert row.gd == row.gf - row.ga
    assert sum(row.won for row in rows) == len(decisive)
    assert sum(row.drawn for row in rows) == 2 * (len(played) - len(decisive))


def test_recalculation_is_deterministic(make_match):
    matches = [
        make_match(1, "A", "B", 1, 1, 60.0, 60.0),
        make_match(1, "C", "D", 1, 1, 60.0, 60.0),
    ]

    first = [row.to_row() for row in calculate_standard_league(matches)]
    second = [row.to_row() for row in calculate_standard_league(matches)]

    assert first == second
    # Level on every key: first-appearance order is kept.
    assert [row["team"] for row in first] == ["A", "B", "C", "D"]


def test_all_play_all_compares_every_performance(make_match):
    matches = [
        make_match(1, "A", "B", 3, 0, 70.0, 50.0),
        make_match(1, "C", "D", 1, 1, 65.0, 66.0),
    ]

    rows = _by_team(calculate_all_play_all_league(matches))

    a, b, c, d = rows["A"], rows["B"], rows["C"], rows["D"]
    assert (a.won, a.drawn, a.lost, a.points, a.played) == (3, 0, 0, 9, 1)
    assert (b.won, b.drawn, b.lost, b.points, b.played) == (0, 0, 3, 0, 1)
    assert (c.won, c.drawn, c.lost, c.points) == (1, 1, 1, 4)
    assert (d.won, d.drawn, d.lost, d.points) == (1, 1, 1, 4)
    # D edges C on fantasy points.
    ranked = calculate_all_play_all_league(matches)
    assert [row.team for row in ranked] == ["A", "D", "C", "B"]


def test_all_play_all_accumulates_over_matchdays(make_match):
    matches = [
        make_match(1, "A", "B", 2, 1, 70.0, 60.0),
        make_match(2, "B", "A", 2, 0, 64.0, 58.0),
    ]

    rows = _by_team(calculate_all_play_all_league(matches))

    assert rows["A"].played == 2
    assert rows["A"].total_fp == 128.0
    assert rows["A"].points == 3
    assert rows["B"].points == 3
    assert rows["A"].gf == rows["A"].ga == rows["A"].gd == 0
    assert rows["A"].form == []


def test_all_play_all_ties_fall_back_to_wins(make_match):
    # Q and Z draw three times, A wins once: 3 points and 60 FP each.
    matches = [
        make_match(2, "Q", "Z", 1, 1, 20.0, 20.0),
        make_match(3, "Q", "Z", 0, 0, 20.0, 20.0),
        make_match(4, "Z", "Q", 2, 2, 20.0, 20.0),
        make_match(1, "A", "B", 1, 0, 60.0, 10.0),
    ]

    rows = calculate_all_play_all_league(matches)

    assert [row.team for row in rows] == ["A", "Q", "Z", "B"]
    assert [row.points for row in rows[:3]] == [3, 3, 3]


def test_all_play_all_results_count_comparisons(make_match):
    matches = [
        make_match(1, "A", "B", 2, 1, 60.0, 60.0),
        make_match(1, "C", "D", 0, 0, 60.0, 60.0),
        make_match(2, "A", "C", 1, 1, 60.0, 60.0),
        make_match(2, "B", "D", 3, 0, 60.0, 60.0),
    ]

    rows = calculate_all_play_all_league(matches)

    for row in rows:
        assert row.played == 2
        assert row.won + row.drawn + row.lost == 3 * row.played
