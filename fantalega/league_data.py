"""Facade for loading a league snapshot and querying the engine."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .config import LeagueConfig, load_config
from .engine import (
    calculate_all_play_all_league,
    calculate_predictions_leaderboard,
    calculate_standard_league,
    get_h2h_description,
    get_head_to_head_history,
    get_rivalry_status,
    get_team_profile,
    last_completed_matchday,
    latest_submissions,
    next_matchday,
)
from .normalize import (
    normalize_adjustments,
    normalize_legacy,
    normalize_matches,
    normalize_submissions,
)
from .schema.models import Adjustment, LegacyRecord, Match, SchedinaSubmission
from .store_api import (
    ADJUSTMENTS_KEY,
    MATCHES_KEY,
    SUBMISSIONS_KEY,
    StoreClient,
    get_adjustments,
    get_matches,
    get_submissions,
)

logger = logging.getLogger(__name__)

STANDARD = "standard"
ALL_PLAY_ALL = "all-play-all"
COMPETITIONS = {
    STANDARD: calculate_standard_league,
    ALL_PLAY_ALL: calculate_all_play_all_league,
}


def _read_json(path: str) -> Any:
    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle)


class LeagueData:
    def __init__(
        self,
        *,
        config: Optional[LeagueConfig] = None,
        client: Optional[StoreClient] = None,
        snapshot_path: Optional[str] = None,
    ) -> None:
        resolved_config = config or load_config(snapshot_path=snapshot_path)
        self.snapshot_path = snapshot_path or resolved_config.snapshot_path
        self.legacy_path = resolved_config.legacy_path
        self.client = client
        if self.client is None and not self.snapshot_path and resolved_config.store_url:
            self.client = StoreClient(
                base_url=resolved_config.store_url, api_key=resolved_config.store_key
            )
        self.loaded = False
        self.matches: list[Match] = []
        self.submissions: list[SchedinaSubmission] = []
        self.adjustments: dict[str, Adjustment] = {}
        self.legacy: dict[str, LegacyRecord] = {}

    def _fetch_raw(self) -> dict[str, Any]:
        if self.snapshot_path:
            logger.info("Loading league snapshot from %s", self.snapshot_path)
            raw = _read_json(self.snapshot_path)
            if not isinstance(raw, dict):
                raise ValueError(f"Snapshot {self.snapshot_path} must be a JSON object.")
            return raw
        if self.client is None:
            raise RuntimeError("No snapshot path or store client configured.")
        logger.info("Loading league data from %s", self.client.base_url)
        return {
            MATCHES_KEY: get_matches(self.client),
            SUBMISSIONS_KEY: get_submissions(self.client),
            ADJUSTMENTS_KEY: get_adjustments(self.client),
        }

    def load(self) -> None:
        raw = self._fetch_raw()
        self.matches = normalize_matches(raw.get(MATCHES_KEY))
        # The store keeps one card per team and matchday, but older dumps may not.
        self.submissions = latest_submissions(normalize_submissions(raw.get(SUBMISSIONS_KEY)))
        self.adjustments = normalize_adjustments(raw.get(ADJUSTMENTS_KEY))
        self.legacy = normalize_legacy(_read_json(self.legacy_path)) if self.legacy_path else {}
        self.loaded = True
        logger.info(
            "Loaded %d matches, %d submissions, %d adjustments",
            len(self.matches),
            len(self.submissions),
            len(self.adjustments),
        )

    def _require_loaded(self) -> None:
        if not self.loaded:
            raise RuntimeError("Data not loaded. Call load() before querying.")

    def get_standings(self, competition: str = STANDARD) -> dict[str, Any]:
        """Ranked table for ``competition`` ("standard" or "all-play-all")."""
        self._require_loaded()
        calculate = COMPETITIONS.get(competition)
        if calculate is None:
            raise ValueError(f"Unknown competition: {competition}")
        return {
            "competition": competition,
            "as_of_matchday": last_completed_matchday(self.matches),
            "standings": [row.to_row() for row in calculate(self.matches)],
        }

    def get_head_to_head(self, team_a: str, team_b: str) -> dict[str, Any]:
        """Meetings, rivalry label (from ``team_a``'s side) and summary line."""
        self._require_loaded()
        history = get_head_to_head_history(self.matches, team_a, team_b)
        return {
            "found": bool(history),
            "team_a": team_a,
            "team_b": team_b,
            "rivalry": get_rivalry_status(self.matches, team_a, team_b),
            "description": get_h2h_description(self.matches, team_a, team_b),
            "history": [match.to_row() for match in history],
        }

    def get_team_profile(self, team_name: str) -> dict[str, Any]:
        self._require_loaded()
        profile = get_team_profile(self.matches, team_name)
        if profile is None:
            return {"found": False, "team": team_name}
        return {"found": True, "profile": profile.to_row()}

    def get_predictions_leaderboard(self) -> dict[str, Any]:
        self._require_loaded()
        rows = calculate_predictions_leaderboard(
            self.matches, self.submissions, self.legacy, self.adjustments
        )
        return {
            "as_of_matchday": last_completed_matchday(self.matches),
            "leaderboard": [row.to_row() for row in rows],
        }

    def get_next_matchday(self) -> int:
        self._require_loaded()
        return next_matchday(self.matches)
