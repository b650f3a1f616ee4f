"""Question-answering agent over the league tables."""

from __future__ import annotations

import logging
from typing import Optional

from agents import Agent, Runner

from ..league_data import LeagueData
from .config import AnalystConfig
from .context import build_league_context, build_user_prompt

logger = logging.getLogger(__name__)

ANALYST_INSTRUCTIONS = """You are an expert fantasy football league data analyst.

1. Answer the user's question based strictly on the data provided.
2. If asked for stats, be precise.
3. If asked for "funny" stats, look for anomalies, e.g. a team with many goals
   but few points, or a team that wins the Battle Royale but loses the Campionato.
4. Be concise and engaging.
5. Do not invent data that is not present in the context.
"""


class LeagueAnalyst:
    """Answers free-text questions about a loaded league.

    The agent has no tools: everything it may use is rendered into the
    prompt from the current standings and recent results.
    """

    def __init__(self, data: LeagueData, config: Optional[AnalystConfig] = None):
        self.data = data
        self.config = config or AnalystConfig()

    def build_prompt(self, question: str) -> str:
        context = build_league_context(self.data.matches, self.config.recent_results)
        return build_user_prompt(question, context)

    async def ask(self, question: str) -> str:
        question = question.strip()
        if not question:
            raise ValueError("Question must not be empty.")
        if not self.data.loaded:
            raise RuntimeError("Data not loaded. Call load() before querying.")

        agent = Agent(
            name="league_analyst",
            instructions=ANALYST_INSTRUCTIONS,
            model=self.config.model,
            tools=[],
        )
        logger.info("Asking %s: %s", self.config.model, question)
        result = await Runner.run(agent, self.build_prompt(question))
        return result.final_output
