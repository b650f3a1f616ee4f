"""Key-value store fetch helpers."""

from .client import StoreApiError, StoreClient
from .endpoints import (
    ADJUSTMENTS_KEY,
    MATCHES_KEY,
    SUBMISSIONS_KEY,
    get_adjustments,
    get_matches,
    get_submissions,
)

__all__ = [
    "StoreApiError",
    "StoreClient",
    "ADJUSTMENTS_KEY",
    "MATCHES_KEY",
    "SUBMISSIONS_KEY",
    "get_adjustments",
    "get_matches",
    "get_submissions",
]
