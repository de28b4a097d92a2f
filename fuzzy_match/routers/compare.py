"""Comparison endpoints."""
import time

from fastapi import APIRouter, Request

from fuzzy_match import errors
from fuzzy_match.logging import get_logger, log_comparison_result
from fuzzy_match.models import CompareRequest, CompareResponse, ScoresResponse
from fuzzy_match.scorer import STRATEGIES, score_all, strategy_names
from fuzzy_match.settings import settings

logger = get_logger()
router = APIRouter()


def check_input_length(compare_req: CompareRequest) -> None:
    """Reject pairs whose strings exceed the configured limit."""
    for field in ("a", "b"):
        length = len(getattr(compare_req, field))
        if length > settings.max_input_chars:
            raise errors.InputTooLongError(field, length, settings.max_input_chars)


@router.post("/compare", response_model=ScoresResponse)
def compare_all(request: Request, compare_req: CompareRequest) -> ScoresResponse:
    """Score one pair with every strategy."""
    check_input_length(compare_req)

    t0 = time.time()
    scores = score_all(compare_req.a, compare_req.b, compare_req.normalization)
    timing_ms = {"score": (time.time() - t0) * 1000}

    log_comparison_result(
        logger=logger,
        request_id=request.state.request_id,
        strategy="all",
        score=max(scores.values()),
        normalization=compare_req.normalization.value,
        timing_ms=timing_ms,
        len_a=len(compare_req.a),
        len_b=len(compare_req.b),
    )

    return ScoresResponse(
        request_id=request.state.request_id,
        scores=scores,
        timing_ms=timing_ms,
    )


@router.post("/compare/{strategy}", response_model=CompareResponse)
def compare(request: Request, strategy: str, compare_req: CompareRequest) -> CompareResponse:
    """Score one pair with the named strategy."""
    scorer = STRATEGIES.get(strategy)
    if scorer is None:
        raise errors.UnknownStrategyError(strategy, strategy_names())
    check_input_length(compare_req)

    t0 = time.time()
    score = scorer(compare_req.a, compare_req.b, compare_req.normalization)
    timing_ms = {"score": (time.time() - t0) * 1000}

    log_comparison_result(
        logger=logger,
        request_id=request.state.request_id,
        strategy=strategy,
        score=score,
        normalization=compare_req.normalization.value,
        timing_ms=timing_ms,
        len_a=len(compare_req.a),
        len_b=len(compare_req.b),
    )

    return CompareResponse(
        request_id=request.state.request_id,
        strategy=strategy,
        score=score,
        normalization=compare_req.normalization,
        timing_ms=timing_ms,
    )
