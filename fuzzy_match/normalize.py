"""Normalize raw strings into the canonical form compared by the scorers."""
import re
from typing import List

# Anything that is not an ASCII letter, ASCII digit or whitespace
NON_ALNUM_PATTERN = re.compile(r"[^a-zA-Z0-9\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Strip punctuation, lowercase, collapse whitespace and trim.

    >>> normalize("   It IS   imp^^^^0rtant")
    'it is imp0rtant'
    """
    if not text:
        return ""
    cleaned = NON_ALNUM_PATTERN.sub("", text).lower()
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def tokenize(text: str) -> List[str]:
    """Split a normalized string into tokens on single spaces."""
    return text.split(" ")
