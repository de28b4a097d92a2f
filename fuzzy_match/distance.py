"""Weighted edit distance and the similarity score derived from it.

Insertions and deletions always cost 1; the substitution cost is chosen by
the caller. A substitution cost of 2 makes a substitution no cheaper than a
deletion followed by an insertion, while 0 makes the distance depend only on
the difference in length.

Lengths and indices are counted in code points, so multi-byte text is sized
and compared in the same unit.
"""
from typing import List

DEFAULT_SUBSTITUTION_COST = 2
FREE_SUBSTITUTION_COST = 0


def weighted_edit_distance(a: str, b: str, substitution_cost: int = DEFAULT_SUBSTITUTION_COST) -> int:
    """Minimum cost of insertions, deletions and substitutions turning ``a`` into ``b``.

    Args:
        a: Source string (matrix rows)
        b: Target string (matrix columns)
        substitution_cost: Cost of replacing one character with a different one

    Returns:
        The value of the bottom-right cell of the distance matrix

    Raises:
        ValueError: If substitution_cost is negative
    """
    if substitution_cost < 0:
        raise ValueError(f"substitution_cost must be non-negative, got {substitution_cost}")

    # Only the previous row of the matrix is needed to fill the current one
    previous_row: List[int] = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else substitution_cost
            current_row.append(
                min(
                    previous_row[j] + 1,  # deletion
                    current_row[j - 1] + 1,  # insertion
                    previous_row[j - 1] + cost,  # substitution
                )
            )
        previous_row = current_row

    return previous_row[-1]


def similarity(a: str, b: str, substitution_cost: int = DEFAULT_SUBSTITUTION_COST) -> float:
    """Convert the weighted edit distance into a score in ``[0, 1]``."""
    total_length = len(a) + len(b)
    if total_length == 0:
        # Nothing to edit between two empty strings
        return 1.0

    distance = weighted_edit_distance(a, b, substitution_cost)
    return (total_length - distance) / total_length
