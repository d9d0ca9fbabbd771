"""Decide whether two strings are anagrams over the letters a to d."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence

LETTERS = "abcd"

DEFAULT_FIRST = "dbb cccccaacb cdbababdcdcdab dcdad"
DEFAULT_SECOND = "bbbcc bdddccccad cdbbaaacaccdabdd"


def letter_counts(text: str) -> tuple[int, ...]:
    """Return how often each of the letters a, b, c and d occurs in ``text``."""
    counts = Counter(char for char in text if char in LETTERS)
    return tuple(counts[letter] for letter in LETTERS)


def is_anagram(first: str, second: str) -> bool:
    """Return True when both strings hold the same letters a to d equally often."""
    return letter_counts(first) == letter_counts(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Compare two strings (the built-in pair unless two are given)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        first, second = DEFAULT_FIRST, DEFAULT_SECOND
    elif len(args) == 2:
        first, second = args
    else:
        sys.stderr.write("usage: anagrams [FIRST SECOND]\n")
        return 2
    sys.stdout.write("Anagram!" if is_anagram(first, second) else "Not Anagram!")
    return 0