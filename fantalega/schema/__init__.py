"""Record models shared by the normalizers and the engine."""

from .models import (
    Adjustment,
    FormResult,
    LegacyRecord,
    LegacySchedineData,
    Match,
    OpponentRecord,
    Prediction,
    RivalryType,
    SchedinaLeaderboardRow,
    SchedinaSubmission,
    SchedineAdjustments,
    ScoreFrequency,
    TeamProfileStats,
    TeamStats,
)

__all__ = [
    "Adjustment",
    "FormResult",
    "LegacyRecord",
    "LegacySchedineData",
    "Match",
    "OpponentRecord",
    "Prediction",
    "RivalryType",
    "SchedinaLeaderboardRow",
    "SchedinaSubmission",
    "SchedineAdjustments",
    "ScoreFrequency",
    "TeamProfileStats",
    "TeamStats",
]
