"""Performance benchmarks for fuzzy search."""

import random
import string
import time

import pytest
from fuse_search.core.engine import SearchEngine
from fuse_search.models.request import WeightedField


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def titles(self):
        """Generate a large list of strings with a few realistic titles."""
        rng = random.Random(42)
        titles = [
            "".join(rng.choice(string.ascii_lowercase + " ") for _ in range(rng.randint(10, 40)))
            for _ in range(1000)
        ]
        titles.extend(["Old Man's War", "The Lock Artist", "The Lost Symbol", "The Silmarillion"])
        return titles

    @pytest.fixture
    def engine(self):
        """Create a search engine with default options."""
        return SearchEngine()

    def test_list_search_performance(self, engine, titles, benchmark):
        """Benchmark searching a large list."""
        def list_search():
            return engine.search_list("old man war", titles)

        results = benchmark(list_search)
        assert any(result.index == titles.index("Old Man's War") for result in results)

    def test_compiled_pattern_performance(self, engine, benchmark):
        """Benchmark repeated searches with one compiled pattern."""
        pattern = engine.create_pattern("silmarilion")

        def pattern_search():
            return engine.search(pattern, "The Silmarillion")

        result = benchmark(pattern_search)
        assert result is not None

    def test_collection_search_performance(self, engine, titles, benchmark):
        """Benchmark a weighted collection search."""
        items = [
            [WeightedField(name=title, weight=0.3), WeightedField(name=title[::-1], weight=0.7)]
            for title in titles
        ]

        def collection_search():
            return engine.search_collection("lost symbol", items, key=lambda item: item)

        results = benchmark(collection_search)
        scores = [result.score for result in results]
        assert scores == sorted(scores)

    def test_long_pattern_performance(self, engine):
        """Test that the longest allowed pattern stays fast."""
        pattern = engine.create_pattern("a" * 16 + "b" * 16)
        text = "ab" * 200

        start_time = time.time()
        engine.search(pattern, text)
        end_time = time.time()

        # Should complete in reasonable time (< 1s)
        assert (end_time - start_time) < 1.0
