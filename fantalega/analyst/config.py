"""Configuration for the league analyst agent."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-5-mini"


class AnalystConfig(BaseModel):
    """Model and context settings for answering league questions."""

    model: str = Field(default=DEFAULT_MODEL, description="LLM model to use")
    openai_api_key: Optional[str] = Field(
        default=None, description="OpenAI API key (can also use OPENAI_API_KEY env)"
    )
    recent_results: int = Field(
        default=10, ge=0, description="Played results included in the context, newest last"
    )


def load_analyst_config(model: Optional[str] = None) -> AnalystConfig:
    """Load analyst settings from the environment.

    Raises:
        ValueError: when no OpenAI API key is available.
    """
    load_dotenv()

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY environment variable is required")

    return AnalystConfig(
        model=model or os.getenv("FANTALEGA_ANALYST_MODEL", DEFAULT_MODEL),
        openai_api_key=api_key,
    )
