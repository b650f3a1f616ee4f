"""Public package exports for the fantalega league engine."""

from .config import LeagueConfig, load_config
from .league_data import LeagueData
from .schema import models as schema_models

__all__ = [
    "LeagueConfig",
    "LeagueData",
    "load_config",
    "schema_models",
]
