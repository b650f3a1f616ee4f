"""Store key helpers, one per synced collection."""

from __future__ import annotations

from typing import Any, Optional

from .client import StoreClient

MATCHES_KEY = "matches"
SUBMISSIONS_KEY = "schedine"
ADJUSTMENTS_KEY = "adjustments"


def get_matches(client: StoreClient) -> Optional[list[dict[str, Any]]]:
    return client.get_value(MATCHES_KEY)


def get_submissions(client: StoreClient) -> Optional[list[dict[str, Any]]]:
    return client.get_value(SUBMISSIONS_KEY)


def get_adjustments(client: StoreClient) -> Optional[dict[str, Any]]:
    return client.get_value(ADJUSTMENTS_KEY)
