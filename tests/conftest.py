import json
from pathlib import Path

import pytest

from fantalega.config import LeagueConfig
from fantalega.schema.models import Match


@pytest.fixture
def fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixture_dir: Path):
    def _load(name: str):
        path = fixture_dir / name
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    return _load


@pytest.fixture
def snapshot_config(fixture_dir: Path) -> LeagueConfig:
    return LeagueConfig(
        snapshot_path=str(fixture_dir / "snapshot.json"),
        legacy_path=str(fixture_dir / "legacy.json"),
    )


@pytest.fixture
def make_match():
    counter = {"next": 0}

    def _make(matchday, home, away, home_score=None, away_score=None,
              home_fp=None, away_fp=None, match_id=None):
        counter["next"] += 1
        return Match(
            id=match_id or f"m-{counter['next']}",
            matchday=matchday,
            home_team=home,
            away_team=away,
            home_score=home_score,
            away_score=away_score,
            home_fantasy_points=home_fp,
            away_fantasy_points=away_fp,
            is_played=home_score is not None and away_score is not None,
        )

    return _make
