"""Bit-parallel approximate substring matching (Bitap with errors)."""

from typing import List

from ..models.pattern import Pattern
from ..models.response import ClosedRange, SearchResult
from .utilities import calculate_score, find_ranges


class BitapMatcher:
    """Scores how well a compiled pattern occurs in a text."""

    def __init__(self, location: int = 0, distance: int = 100, threshold: float = 0.6) -> None:
        """
        Initialize the matcher.

        Args:
            location: Approximately where in the text the pattern is expected
            distance: How far from location a match may drift; 0 requires the
                match to start exactly at location
            threshold: Maximum acceptable score (0.0 perfect, 1.0 anything)
        """
        self.location = location
        self.distance = distance
        self.threshold = threshold

    def search(self, pattern: Pattern, text: str) -> SearchResult:
        """
        Search for a pattern in an already normalized text.

        Args:
            pattern: Compiled pattern
            text: Text to search in, normalized the same way as the pattern

        Returns:
            SearchResult with the best score found (1.0 when nothing matched)
            and the ranges of characters that matched
        """
        text_length = len(text)

        # Exact match
        if pattern.text == text:
            return SearchResult(score=0.0, ranges=[ClosedRange(start=0, end=text_length - 1)])

        location = self.location
        distance = self.distance
        pattern_length = pattern.length
        char_mask = pattern.char_mask

        # Mask of every matched character, used to build the ranges
        match_mask = [0] * text_length

        threshold = self._scan_exact(pattern, text, match_mask)

        final_score = 1.0
        bin_max = pattern_length + text_length
        last_bit_arr: List[int] = []

        # Each iteration allows for one more error
        for i in range(pattern_length):
            bin_mid = self._max_drift(pattern_length, i, threshold, bin_max)

            # Drift allowed at this error level bounds the next one
            bin_max = bin_mid
            start = max(1, location - bin_mid + 1)
            finish = min(location + bin_mid, text_length) + pattern_length

            # The window never widens again
            if start > finish:
                break

            bit_arr = [0] * (finish + 2)
            bit_arr[finish + 1] = (1 << i) - 1

            j = finish
            while j >= start:
                current_location = j - 1

                char_match = 0
                if current_location < text_length:
                    char_match = char_mask(text[current_location])
                    if char_match:
                        match_mask[current_location] = 1

                # First pass: exact match
                bit_arr[j] = ((bit_arr[j + 1] << 1) | 1) & char_match

                # Subsequent passes: fuzzy match
                if i > 0:
                    bit_arr[j] |= (
                        ((last_bit_arr[j + 1] | last_bit_arr[j]) << 1) | 1
                    ) | last_bit_arr[j + 1]

                if bit_arr[j] & pattern.mask:
                    score = calculate_score(pattern_length, i, current_location, location, distance)

                    if score <= threshold:
                        threshold = score
                        final_score = score

                        if current_location > location:
                            # Don't drift further from location than this match
                            start = max(1, 2 * location - current_location)
                        else:
                            # Already passed location, nothing better at this error level
                            break

                j -= 1

            # No hope for a better match at greater error levels
            if calculate_score(pattern_length, i + 1, location, location, distance) > threshold:
                break

            last_bit_arr = bit_arr

        return SearchResult(score=final_score, ranges=find_ranges(match_mask))

    def _scan_exact(self, pattern: Pattern, text: str, match_mask: List[int]) -> float:
        """
        Mark literal occurrences of the pattern and tighten the threshold.

        Scanning starts at the first occurrence at or after location, or at
        the beginning of the text when there is none.

        Returns:
            The threshold after accounting for every exact occurrence
        """
        threshold = self.threshold
        pattern_length = pattern.length

        index = text.find(pattern.text, self.location)
        if index == -1:
            index = text.find(pattern.text)

        while index != -1:
            score = calculate_score(pattern_length, 0, index, self.location, self.distance)
            threshold = min(threshold, score)

            match_mask[index:index + pattern_length] = [1] * pattern_length
            index = text.find(pattern.text, index + pattern_length)

        return threshold

    def _max_drift(self, pattern_length: int, errors: int, threshold: float, bin_max: int) -> int:
        """Binary search the largest drift from location that still meets threshold."""
        bin_min = 0
        bin_mid = bin_max

        while bin_min < bin_mid:
            score = calculate_score(
                pattern_length, errors, self.location, self.location + bin_mid, self.distance
            )
            if score <= threshold:
                bin_min = bin_mid
            else:
                bin_max = bin_mid
            bin_mid = (bin_max - bin_min) // 2 + bin_min

        return bin_mid
