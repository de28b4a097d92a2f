"""Pydantic models for request/response schemas."""
from typing import Dict

from pydantic import BaseModel, Field

from fuzzy_match.scorer import Normalization


# Request Models
class CompareRequest(BaseModel):
    """A single pair of strings to compare."""

    a: str
    b: str
    normalization: Normalization = Normalization.NORMALIZE


# Response Models
class CompareResponse(BaseModel):
    """Score of one strategy for one pair."""

    request_id: str
    strategy: str
    score: float = Field(..., ge=0.0, le=1.0)
    normalization: Normalization
    timing_ms: Dict[str, float]


class ScoresResponse(BaseModel):
    """Scores of every strategy for one pair."""

    request_id: str
    scores: Dict[str, float]
    timing_ms: Dict[str, float]
