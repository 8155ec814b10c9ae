"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Performance regression tests for fixture bundles.

Each profile must generate, serialize, write and pack within a fixed budget,
and packing must shrink the written fixture.
"""

import logging
import time

import pytest

from skillfix.benchmark import OPERATIONS, FixtureBenchmark
from skillfix.profiles import build_profile

logger = logging.getLogger(__name__)

BUDGET_SECONDS = {
    "small": 5.0,
    "medium": 15.0,
    "large": 30.0,
}


def _total_seconds(result) -> float:
    return sum(result.get_stats(operation)["max"] for operation in OPERATIONS)


@pytest.mark.performance
class TestFixturePerformance:
    """Performance budgets for each fixture profile."""

    @pytest.mark.parametrize("profile", ["small", "medium"])
    def test_profile_within_budget(self, profile, temp_dir):
        result = FixtureBenchmark(profile=profile, iterations=3, output_dir=str(temp_dir)).run()

        total = _total_seconds(result)
        logger.info(
            f"{profile}: {result.metadata['packed_bytes'] / 1024:.2f} KB packed, {total * 1000:.2f} ms"
        )
        assert total < BUDGET_SECONDS[profile]
        assert result.metadata["packed_bytes"] < result.metadata["uncompressed_bytes"]

    @pytest.mark.slow
    def test_large_profile_within_budget(self, temp_dir):
        result = FixtureBenchmark(profile="large", iterations=1, output_dir=str(temp_dir)).run()
        assert _total_seconds(result) < BUDGET_SECONDS["large"]
        assert result.metadata["serialized_bytes"] > 1024 * 1024

    def test_small_generation_is_fast(self):
        start = time.perf_counter()
        for _ in range(100):
            build_profile("small")
        duration = time.perf_counter() - start
        assert duration < 5.0

    def test_sizes_grow_with_profile(self):
        sizes = [len(build_profile(name).to_json()) for name in ("small", "medium")]
        assert sizes[0] < sizes[1]
