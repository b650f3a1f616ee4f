"""Normalization exports."""

from .matches import normalize_match, normalize_matches
from .schedine import (
    normalize_adjustments,
    normalize_legacy,
    normalize_submissions,
)

__all__ = [
    "normalize_match",
    "normalize_matches",
    "normalize_submissions",
    "normalize_adjustments",
    "normalize_legacy",
]
