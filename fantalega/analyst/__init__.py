from .analyst_agent import LeagueAnalyst
from .config import AnalystConfig, load_analyst_config
from .context import build_league_context, build_user_prompt

__all__ = [
    "AnalystConfig",
    "LeagueAnalyst",
    "build_league_context",
    "build_user_prompt",
    "load_analyst_config",
]
