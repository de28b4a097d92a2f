"""The four comparison strategies built on the distance engine."""
import logging
from enum import Enum
from typing import Callable, Dict, List, Tuple

from fuzzy_match.distance import DEFAULT_SUBSTITUTION_COST, FREE_SUBSTITUTION_COST, similarity
from fuzzy_match.normalize import normalize, tokenize

logger = logging.getLogger(__name__)


class Normalization(str, Enum):
    """Whether the strategies should normalize their inputs first."""

    NORMALIZE = "normalize"
    ALREADY_NORMALIZED = "already_normalized"


def _prepare(a: str, b: str, normalization: Normalization) -> Tuple[str, str]:
    if normalization == Normalization.ALREADY_NORMALIZED:
        return a, b
    return normalize(a), normalize(b)


def ratio(a: str, b: str, normalization: Normalization = Normalization.NORMALIZE) -> float:
    """Compare the two strings as a whole.

    >>> ratio("Hello", "Hallo")
    0.8
    """
    if a == b:
        return 1.0

    norm_a, norm_b = _prepare(a, b, normalization)
    return similarity(norm_a, norm_b, DEFAULT_SUBSTITUTION_COST)


def partial_ratio(a: str, b: str, normalization: Normalization = Normalization.NORMALIZE) -> float:
    """Best match between the shorter string and any token of the longer one.

    Not symmetric: when both normalized strings have the same length the
    first argument is the one split into tokens.

    >>> partial_ratio("Do we buy the airplane?", "Airplane")
    1.0
    """
    if a == b:
        return 1.0

    norm_a, norm_b = _prepare(a, b, normalization)
    if len(norm_a) >= len(norm_b):
        longer, shorter = norm_a, norm_b
    else:
        longer, shorter = norm_b, norm_a

    return max(similarity(token, shorter, DEFAULT_SUBSTITUTION_COST) for token in tokenize(longer))


def _sorted_tokens(text: str) -> str:
    return " ".join(sorted(tokenize(text)))


def token_sort_ratio(a: str, b: str, normalization: Normalization = Normalization.NORMALIZE) -> float:
    """Compare the strings after sorting their tokens, ignoring word order.

    Substitutions are free here, so only the difference in length counts.
    """
    if a == b:
        return 1.0

    norm_a, norm_b = _prepare(a, b, normalization)
    return similarity(_sorted_tokens(norm_a), _sorted_tokens(norm_b), FREE_SUBSTITUTION_COST)


def token_set_ratio(a: str, b: str, normalization: Normalization = Normalization.NORMALIZE) -> float:
    """Compare the shared vocabulary of both strings against each side.

    The shared tokens are compared with each side's full token set and the
    two full sets are compared with each other; the best of the three wins.
    """
    if a == b:
        return 1.0

    norm_a, norm_b = _prepare(a, b, normalization)
    tokens_a = set(tokenize(norm_a))
    tokens_b = set(tokenize(norm_b))

    intersection = " ".join(sorted(tokens_a & tokens_b))
    difference_a = " ".join(sorted(tokens_a - tokens_b))
    difference_b = " ".join(sorted(tokens_b - tokens_a))

    combined_a = f"{intersection} {difference_a}"
    combined_b = f"{intersection} {difference_b}"

    return max(
        similarity(intersection, combined_a, DEFAULT_SUBSTITUTION_COST),
        similarity(intersection, combined_b, DEFAULT_SUBSTITUTION_COST),
        similarity(combined_a, combined_b, DEFAULT_SUBSTITUTION_COST),
    )


STRATEGIES: Dict[str, Callable[..., float]] = {
    "ratio": ratio,
    "partial_ratio": partial_ratio,
    "token_sort_ratio": token_sort_ratio,
    "token_set_ratio": token_set_ratio,
}


def strategy_names() -> List[str]:
    """Names of the available strategies, in registry order."""
    return list(STRATEGIES)


def score_all(a: str, b: str, normalization: Normalization = Normalization.NORMALIZE) -> Dict[str, float]:
    """Score one pair of strings with every strategy."""
    scores = {name: strategy(a, b, normalization) for name, strategy in STRATEGIES.items()}
    logger.debug("Scored pair with all strategies", extra={"len_a": len(a), "len_b": len(b)})
    return scores
