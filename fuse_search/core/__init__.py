"""Core fuzzy matching functionality."""

from .engine import SearchEngine
from .bitap import BitapMatcher
from .normalizer import TextNormalizer
from .utilities import calculate_pattern_alphabet, calculate_score, find_ranges

__all__ = [
    "SearchEngine",
    "BitapMatcher",
    "TextNormalizer",
    "calculate_pattern_alphabet",
    "calculate_score",
    "find_ranges",
]
