"""Fuzzy string matching based on weighted edit distance."""
from fuzzy_match.distance import similarity, weighted_edit_distance
from fuzzy_match.normalize import normalize
from fuzzy_match.scorer import (
    STRATEGIES,
    Normalization,
    partial_ratio,
    ratio,
    score_all,
    token_set_ratio,
    token_sort_ratio,
)

__version__ = "0.1.0"

__all__ = [
    "STRATEGIES",
    "Normalization",
    "normalize",
    "partial_ratio",
    "ratio",
    "score_all",
    "similarity",
    "token_set_ratio",
    "token_sort_ratio",
    "weighted_edit_distance",
]
