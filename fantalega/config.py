"""Configuration helpers for the fantalega engine."""

from __future__ import annotations

from dataclasses import dataclass
import os
from dotenv import load_dotenv


@dataclass(frozen=True)
class LeagueConfig:
    store_url: str | None = None
    store_key: str | None = None
    snapshot_path: str | None = None
    legacy_path: str | None = None


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def load_config(snapshot_path: str | None = None) -> LeagueConfig:
    load_dotenv()
    store_url = _optional_env("FANTALEGA_STORE_URL")
    snapshot_path = snapshot_path or _optional_env("FANTALEGA_SNAPSHOT_PATH")
    if not store_url and not snapshot_path:
        raise ValueError("FANTALEGA_STORE_URL or FANTALEGA_SNAPSHOT_PATH must be set.")

    return LeagueConfig(
        store_url=store_url,
        store_key=_optional_env("FANTALEGA_STORE_KEY"),
        snapshot_path=snapshot_path,
        legacy_path=_optional_env("FANTALEGA_LEGACY_PATH"),
    )
