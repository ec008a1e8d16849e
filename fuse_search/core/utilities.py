"""Bit-mask, scoring and range helpers shared by the Bitap matcher."""

from typing import Dict, List, Sequence

from ..models.response import ClosedRange


def calculate_score(
    pattern_length: int,
    errors: int,
    match_location: int,
    expected_location: int,
    distance: int,
) -> float:
    """
    Compute the score for a match with a number of errors at a location.

    Args:
        pattern_length: Length of the pattern being sought
        errors: Number of errors in the match
        match_location: Location of the match
        expected_location: Expected location of the match
        distance: How far a match may drift before it counts as a full mismatch

    Returns:
        Overall score for the match (0.0 = good, 1.0 = bad). Values above 1.0
        are only meaningful for comparison.
    """
    accuracy = errors / pattern_length
    proximity = abs(match_location - expected_location)

    if distance == 0:
        # No drift allowed at all
        return accuracy if proximity == 0 else 1.0

    return accuracy + proximity / distance


def calculate_pattern_alphabet(pattern: str) -> Dict[str, int]:
    """
    Build the Bitap alphabet for a pattern.

    Each distinct character maps to a bit-mask with bit ``len - 1 - i`` set for
    every position ``i`` where it occurs in the pattern.

    Args:
        pattern: Non-empty, already normalized pattern text

    Returns:
        Mapping of character to bit-mask
    """
    length = len(pattern)
    alphabet: Dict[str, int] = {}

    for i, char in enumerate(pattern):
        alphabet[char] = alphabet.get(char, 0) | (1 << (length - i - 1))

    return alphabet


def find_ranges(mask: Sequence[int]) -> List[ClosedRange]:
    """
    Collapse a 0/1 match mask into closed ranges of consecutive 1s.

    >>> [(r.start, r.end) for r in find_ranges([0, 1, 1, 0, 1, 1, 1])]
    [(1, 2), (4, 6)]

    Args:
        mask: One flag per text position

    Returns:
        Ordered list of inclusive ranges
    """
    ranges: List[ClosedRange] = []
    start = -1

    for n, bit in enumerate(mask):
        if start == -1 and bit == 1:
            start = n
        elif start != -1 and bit == 0:
            ranges.append(ClosedRange(start=start, end=n - 1))
            start = -1

    if start != -1:
        ranges.append(ClosedRange(start=start, end=len(mask) - 1))

    return ranges
