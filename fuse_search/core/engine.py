"""Main search engine implementation."""

import time
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from ..config import Settings, get_settings
from ..log_config import get_logger
from ..models.pattern import Pattern
from ..models.request import SearchOptions, WeightedField
from ..models.response import (
    ClosedRange,
    CollectionItemResult,
    FieldMatchResult,
    ListSearchResult,
    SearchResult,
)
from .bitap import BitapMatcher
from .normalizer import TextNormalizer

logger = get_logger(__name__)

# Substituted for a perfect match on a full-weight field so the item total
# stays comparable with items matching on several fields
PERFECT_FIELD_SCORE = 0.001

FieldsKey = Callable[[Any], Iterable[Any]]


class SearchEngine:
    """Fuzzy search over strings, string lists and weighted multi-field items."""

    def __init__(
        self,
        location: int = 0,
        distance: int = 100,
        threshold: float = 0.6,
        max_pattern_length: int = 32,
        is_case_sensitive: bool = False,
        tokenize: bool = False,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            location: Approximately where in the text the pattern is expected
            distance: How close a match must be to location. A distance of 0
                requires the match to start exactly at location
            threshold: At what score the algorithm gives up. 0.0 requires a
                perfect match of letters and location, 1.0 matches anything
            max_pattern_length: Longer patterns are not searched at all
            is_case_sensitive: Whether comparisons keep letter case
            tokenize: Search individual words as well as the full pattern
                and average the scores

        Raises:
            pydantic.ValidationError: If any option is out of range
        """
        self.options = SearchOptions(
            location=location,
            distance=distance,
            threshold=threshold,
            max_pattern_length=max_pattern_length,
            is_case_sensitive=is_case_sensitive,
            tokenize=tokenize,
        )
        self.normalizer = TextNormalizer(self.options.is_case_sensitive)
        self.matcher = BitapMatcher(
            location=self.options.location,
            distance=self.options.distance,
            threshold=self.options.threshold,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SearchEngine":
        """Create an engine from application settings."""
        settings = settings or get_settings()
        return cls(
            location=settings.location,
            distance=settings.distance,
            threshold=settings.threshold,
            max_pattern_length=settings.max_pattern_length,
            is_case_sensitive=settings.is_case_sensitive,
            tokenize=settings.tokenize,
        )

    @property
    def tokenize(self) -> bool:
        return self.options.tokenize

    def is_pattern_too_long(self, text: str) -> bool:
        """Whether a pattern would be rejected for exceeding max_pattern_length."""
        return len(text or "") > self.options.max_pattern_length

    def create_pattern(self, text: str) -> Optional[Pattern]:
        """
        Compile a pattern for repeated searches.

        Args:
            text: Pattern text

        Returns:
            Compiled Pattern, or None if the text is empty or too long
        """
        normalized = self.normalizer.normalize(text)

        if not normalized:
            logger.debug("Empty pattern, nothing to search for")
            return None

        if self.is_pattern_too_long(normalized):
            logger.warning(
                "Pattern exceeds maximum length",
                pattern_length=len(normalized),
                max_pattern_length=self.options.max_pattern_length,
            )
            return None

        return Pattern.compile(normalized)

    def search(self, pattern: Union[Pattern, str, None], text: str) -> Optional[SearchResult]:
        """
        Search for a pattern in a string.

        Args:
            pattern: Compiled pattern, or pattern text to compile first
            text: The string to search in

        Returns:
            SearchResult with a score between 0.0 (exact match) and 1.0 and the
            matched ranges, or None if there is no match
        """
        if isinstance(pattern, str):
            pattern = self.create_pattern(pattern)

        if pattern is None:
            return None

        normalized = self.normalizer.normalize(text)

        if not self.tokenize:
            result = self.matcher.search(pattern, normalized)
            return None if result.score == 1 else result

        # Search every word as well as the full pattern so strings matching the
        # whole phrase rank above strings matching only its words
        word_patterns = [
            word_pattern
            for word_pattern in map(self.create_pattern, self.normalizer.tokenize(pattern.text))
            if word_pattern is not None
        ]

        full_result = self.matcher.search(pattern, normalized)
        total_score = full_result.score
        ranges: List[ClosedRange] = list(full_result.ranges)

        for word_pattern in word_patterns:
            word_result = self.matcher.search(word_pattern, normalized)
            total_score += word_result.score
            ranges.extend(word_result.ranges)

        score = total_score / (len(word_patterns) + 1)

        if score == 1:
            return None

        return SearchResult(score=score, ranges=ranges)

    def search_text(self, query: str, text: str) -> Optional[SearchResult]:
        """Search for pattern text in a string; see search()."""
        return self.search(self.create_pattern(query), text)

    def search_list(self, query: str, items: Sequence[str]) -> List[ListSearchResult]:
        """
        Search for a pattern in a list of strings.

        The pattern is compiled once and reused for every string.

        Args:
            query: Pattern text
            items: Strings to search in

        Returns:
            Matching strings' results tagged with their index, best first
        """
        start_time = time.time()
        pattern = self.create_pattern(query)

        results = []
        for index, item in enumerate(items):
            result = self.search(pattern, item)
            if result is not None:
                results.append(ListSearchResult(index=index, score=result.score, ranges=result.ranges))

        results.sort(key=lambda x: x.score)

        logger.debug(
            "List search completed",
            total_items=len(items),
            total_results=len(results),
            execution_time_ms=(time.time() - start_time) * 1000,
        )
        return results

    def search_collection(
        self,
        query: str,
        items: Sequence[Any],
        key: Optional[FieldsKey] = None,
    ) -> List[CollectionItemResult]:
        """
        Search for a pattern across the weighted fields of a collection.

        Every item supplies an ordered list of weighted fields, either through a
        ``weighted_fields`` attribute (see Searchable) or through ``key``. A
        field may be a WeightedField, a ``(name, weight)`` pair or a string.

        Example::

            class Book:
                def __init__(self, title, author):
                    self.title, self.author = title, author

                @property
                def weighted_fields(self):
                    return [WeightedField(name=self.title, weight=0.3),
                            WeightedField(name=self.author, weight=0.7)]

            engine.search_collection("Man", books)

        Args:
            query: Pattern text
            items: Items to search
            key: Optional callable returning an item's fields

        Returns:
            Matching items with the mean of their weighted field scores, best first

        Raises:
            TypeError: If an item exposes no fields and no key is given
        """
        start_time = time.time()
        pattern = self.create_pattern(query)

        results = []
        for index, item in enumerate(items):
            field_results = []
            total_score = 0.0

            for weighted_field in self._resolve_fields(index, item, key):
                result = self.search(pattern, weighted_field.name)
                if result is None:
                    continue

                weight = 1 if weighted_field.weight == 1 else 1 - weighted_field.weight
                raw_score = result.score
                if raw_score == 0 and weight == 1:
                    raw_score = PERFECT_FIELD_SCORE
                score = raw_score * weight

                total_score += score
                field_results.append(
                    FieldMatchResult(field_value=weighted_field.name, score=score, ranges=result.ranges)
                )

            if not field_results:
                continue

            results.append(
                CollectionItemResult(
                    index=index,
                    score=total_score / len(field_results),
                    field_results=field_results,
                )
            )

        results.sort(key=lambda x: x.score)

        logger.debug(
            "Collection search completed",
            total_items=len(items),
            total_results=len(results),
            execution_time_ms=(time.time() - start_time) * 1000,
        )
        return results

    def _resolve_fields(
        self, index: int, item: Any, key: Optional[FieldsKey]
    ) -> List[WeightedField]:
        """Get an item's fields as WeightedField objects."""
        if key is not None:
            fields = key(item)
        else:
            try:
                fields = item.weighted_fields
            except AttributeError:
                raise TypeError(
                    f"Item {index} has no weighted_fields; pass key= to describe its fields"
                ) from None

        return [WeightedField.coerce(value) for value in fields]
