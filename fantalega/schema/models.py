"""Canonical record models for the fantalega engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Mapping, Optional

Outcome = Literal["W", "D", "L"]
Sign = Literal["1", "X", "2"]
RivalryType = Optional[Literal["nemesis", "ez", "rival"]]


class RowMixin:
    """Small helper to turn records into plain dicts."""

    def to_row(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Match(RowMixin):
    id: str
    matchday: int
    home_team: str
    away_team: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    home_fantasy_points: Optional[float] = None
    away_fantasy_points: Optional[float] = None
    is_played: bool = False

    @property
    def has_result(self) -> bool:
        return self.is_played and self.home_score is not None and self.away_score is not None

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)


@dataclass(frozen=True)
class FormResult(RowMixin):
    result: Outcome
    opponent: str
    score: str


@dataclass
class TeamStats(RowMixin):
    team: str
    rank: int = 0
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    gf: int = 0
    ga: int = 0
    gd: int = 0
    points: int = 0
    total_fp: float = 0.0
    form: list[FormResult] = field(default_factory=list)


@dataclass(frozen=True)
class Prediction(RowMixin):
    match_id: str
    prediction: Sign


@dataclass(frozen=True)
class SchedinaSubmission(RowMixin):
    team_name: str
    matchday: int
    predictions: tuple[Prediction, ...] = ()
    timestamp: str = ""


@dataclass(frozen=True)
class LegacyRecord(RowMixin):
    total_correct: int = 0
    perfect_weeks: int = 0


@dataclass(frozen=True)
class Adjustment(RowMixin):
    extra_correct: int = 0
    extra_perfect: int = 0


LegacySchedineData = Mapping[str, LegacyRecord]
SchedineAdjustments = Mapping[str, Adjustment]


@dataclass
class SchedinaLeaderboardRow(RowMixin):
    team_name: str
    rank: int = 0
    total_correct: int = 0
    perfect_weeks: int = 0
    last_week_correct: int = 0


@dataclass
class OpponentRecord(RowMixin):
    opponent: str
    wins: int = 0
    draws: int = 0
    losses: int = 0
    total: int = 0


@dataclass
class ScoreFrequency(RowMixin):
    score: str
    result: Outcome
    count: int = 0


@dataclass
class TeamProfileStats(RowMixin):
    team: str
    played: int
    wins: int
    draws: int
    losses: int
    total_goals_for: int
    total_goals_against: int
    avg_goals_for: float
    avg_goals_against: float
    avg_fantasy_points: Optional[float]
    win_rate: int
    form: list[FormResult]
    top_results: list[ScoreFrequency]
    goal_distribution: dict[str, int]
    nemesis: Optional[OpponentRecord] = None
    ez_win: Optional[OpponentRecord] = None
    fierce_rival: Optional[OpponentRecord] = None
    matches: list[Match] = field(default_factory=list)
