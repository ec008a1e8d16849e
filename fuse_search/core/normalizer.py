"""Text normalization utilities for consistent matching."""

import re
from typing import List


class TextNormalizer:
    """Applies the engine's casing policy and splits patterns into words."""

    def __init__(self, is_case_sensitive: bool = False) -> None:
        """
        Initialize the normalizer.

        Args:
            is_case_sensitive: Keep letter case when True
        """
        self.is_case_sensitive = is_case_sensitive

        # Compile regex patterns for performance
        self.whitespace_regex = re.compile(r'\s+')

    def normalize(self, text: str) -> str:
        """
        Normalize text for matching.

        The result always has the same length as the input so that match
        ranges index the caller's text.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if not text or self.is_case_sensitive:
            return text or ""

        lowered = text.lower()
        if len(lowered) == len(text):
            return lowered

        # Some characters expand when lowercased (e.g. "İ"); leave those alone
        return "".join(
            char.lower() if len(char.lower()) == 1 else char for char in text
        )

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into whitespace separated words.

        Args:
            text: Input text

        Returns:
            List of non-empty tokens
        """
        if not text:
            return []

        return [token for token in self.whitespace_regex.split(text) if token]
