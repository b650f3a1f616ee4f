"""League computation engine.

Every function in this package is pure: it reads the records it is given and
returns freshly built results, so callers simply re-run them whenever the
match log, submissions or adjustments change.

Modules:
    standings: standard and all-play-all tables
    head_to_head: pairwise history, rivalry labels and summaries
    predictions: schedina leaderboard
    team_profile: single-team analytics
    schedule: fixture generation and result entry
    submissions: last-write-wins handling of prediction cards
"""

from .head_to_head import get_h2h_description, get_head_to_head_history, get_rivalry_status
from .predictions import (
    PERFECT_WEEK_MATCHES,
    calculate_predictions_leaderboard,
    last_completed_matchday,
)
from .schedule import generate_schedule, next_matchday, record_result
from .standings import calculate_all_play_all_league, calculate_standard_league
from .submissions import delete_submission, latest_submissions, upsert_submission
from .team_profile import get_team_profile

__all__ = [
    # Standings
    "calculate_standard_league",
    "calculate_all_play_all_league",
    # Head to head
    "get_head_to_head_history",
    "get_rivalry_status",
    "get_h2h_description",
    # Predictions
    "PERFECT_WEEK_MATCHES",
    "calculate_predictions_leaderboard",
    "last_completed_matchday",
    # Team profile
    "get_team_profile",
    # League operations
    "generate_schedule",
    "record_result",
    "next_matchday",
    "upsert_submission",
    "delete_submission",
    "latest_submissions",
]
