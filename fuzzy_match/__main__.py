"""Print sample comparisons, or all scores for a pair given on the command line.

Usage:
    python -m fuzzy_match
    python -m fuzzy_match "first string" "second string"
"""
import sys

from fuzzy_match.scorer import partial_ratio, ratio, score_all, token_set_ratio, token_sort_ratio

SAMPLES = [
    (ratio, "Hallo", "Hello"),
    (partial_ratio, "Do we buy the airplane?", "Airplane"),
    (token_sort_ratio, "My mom bought me ice cream", "The ice cream was bought by my mom"),
    (token_set_ratio, "There are a lot of differences between Rust and C++", "differences in Rust C++"),
]


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        for strategy, a, b in SAMPLES:
            print(f"{strategy.__name__:18}: {strategy(a, b):.7f}  ({a!r} vs {b!r})")
        return 0

    if len(argv) != 2:
        print(__doc__)
        return 1

    a, b = argv
    print(f"\nComparing:\n  1. {a}\n  2. {b}\n")
    for name, score in score_all(a, b).items():
        print(f"{name:18}: {score:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
