"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Load benchmarking for fixture bundles.

This module measures how long it takes to generate, serialize, write and pack
a fixture profile, and summarizes the measurements with percentile statistics.
"""

import json
import os
import statistics
import tempfile
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import numpy as np
import psutil

from skillfix.core.logging import get_logger, log_operation
from skillfix.generator import InvalidArgumentError
from skillfix.profiles import get_profile
from skillfix.writer import pack_fixture, write_fixture

logger = get_logger(__name__)

OPERATIONS = ("generate", "serialize", "write", "pack")


@dataclass
class PerformanceMeasurement:
    """Represents a single performance measurement."""

    name: str
    operation: str
    duration: float
    timestamp: float = field(default_factory=time.time)
    dataset_size: int | None = None
    memory_before: float | None = None
    memory_after: float | None = None
    cpu_percent: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def memory_delta(self) -> float | None:
        """Return memory usage delta if both before and after measurements are available."""
        if self.memory_before is not None and self.memory_after is not None:
            return self.memory_after - self.memory_before
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert measurement to dictionary for serialization."""
        result = {
            "name": self.name,
            "operation": self.operation,
            "duration": self.duration,
            "timestamp": self.timestamp,
        }

        optional = {
            "dataset_size": self.dataset_size,
            "memory_before": self.memory_before,
            "memory_after": self.memory_after,
            "cpu_percent": self.cpu_percent,
        }
        result.update({key: value for key, value in optional.items() if value is not None})
        if self.metadata:
            result["metadata"] = self.metadata

        return result


@dataclass
class PerformanceResult:
    """Collection of performance measurements with analysis capabilities."""

    name: str
    measurements: list[PerformanceMeasurement] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def add_measurement(self, measurement: PerformanceMeasurement) -> None:
        """Add a measurement to the result set."""
        self.measurements.append(measurement)

    @property
    def operations(self) -> list[str]:
        """Operation names in order of first appearance."""
        return list(dict.fromkeys(m.operation for m in self.measurements))

    def get_stats(self, operation: str | None = None) -> dict[str, Any]:
        """Calculate statistics for the measurements."""
        filtered = (
            self.measurements
            if operation is None
            else [m for m in self.measurements if m.operation == operation]
        )

        if not filtered:
            return {"count": 0}

        durations = sorted(m.duration for m in filtered)

        stats = {
            "count": len(filtered),
            "min": durations[0],
            "max": durations[-1],
            "mean": statistics.mean(durations),
            "median": statistics.median(durations),
        }

        if len(filtered) > 1:
            stats["stddev"] = statistics.stdev(durations)

        for percentile in (50, 90, 95, 99):
            stats[f"p{percentile}"] = float(np.percentile(durations, percentile))

        total_duration = sum(durations)
        stats["throughput"] = len(filtered) / total_duration if total_duration > 0 else 0

        memory_deltas = [m.memory_delta for m in filtered if m.memory_delta is not None]
        if memory_deltas:
            stats["memory_mean_delta"] = statistics.mean(memory_deltas)
            stats["memory_max_delta"] = max(memory_deltas)

        return stats

    def save_to_file(self, file_path: str | Path) -> None:
        """Save performance results to a JSON file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        result_dict = {
            "name": self.name,
            "metadata": self.metadata,
            "timestamp": datetime.now().isoformat(),
            "measurements": [m.to_dict() for m in self.measurements],
        }

        with open(file_path, "w") as f:
            json.dump(result_dict, f, indent=2)

        logger.info(f"Performance results saved to {file_path}")

    @classmethod
    def load_from_file(cls, file_path: str | Path) -> "PerformanceResult":
        """Load performance results from a JSON file."""
        with open(file_path) as f:
            data = json.load(f)

        result = cls(name=data["name"], metadata=data.get("metadata", {}))

        for m_data in data["measurements"]:
            result.add_measurement(
                PerformanceMeasurement(
                    name=m_data["name"],
                    operation=m_data["operation"],
                    duration=m_data["duration"],
                    timestamp=m_data["timestamp"],
                    dataset_size=m_data.get("dataset_size"),
                    memory_before=m_data.get("memory_before"),
                    memory_after=m_data.get("memory_after"),
                    cpu_percent=m_data.get("cpu_percent"),
                    metadata=m_data.get("metadata", {}),
                ),
            )

        return result


class FixtureBenchmark:
    """Measures generate, serialize, write and pack for one fixture profile."""

    def __init__(self, profile: str = "small", iterations: int = 5, output_dir: str | None = None):
        """
        Initialize the benchmark.

        Args:
        ----
            profile: Name of the fixture profile to measure
            iterations: How many times each operation is repeated
            output_dir: Directory for fixture files and results; a temporary
                directory is used when omitted

        Raises:
        ------
            InvalidArgumentError: If iterations is below 1
            UnknownProfileError: If the profile is not registered

        """
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise InvalidArgumentError(f"iterations must be a positive integer, got {iterations!r}")

        self.profile = get_profile(profile)
        self.iterations = iterations
        self.output_dir = Path(output_dir) if output_dir else None
        self.result = PerformanceResult(
            name=f"{self.profile.key}_fixture",
            metadata={
                "profile": self.profile.key,
                "bundle": self.profile.bundle_name,
                "records": self.profile.count,
                "iterations": iterations,
            },
        )
        self._process = psutil.Process(os.getpid())

    def _measure(self, operation: str, func: Callable[[], Any], **metadata: Any) -> Any:
        memory_before = self._process.memory_info().rss / 1024 / 1024  # MB

        start_time = time.perf_counter()
        value = func()
        duration = time.perf_counter() - start_time

        memory_after = self._process.memory_info().rss / 1024 / 1024  # MB

        self.result.add_measurement(
            PerformanceMeasurement(
                name=self.result.name,
                operation=operation,
                duration=duration,
                dataset_size=self.profile.count,
                memory_before=memory_before,
                memory_after=memory_after,
                cpu_percent=self._process.cpu_percent(),
                metadata=metadata,
            ),
        )
        logger.debug(f"Operation '{operation}' completed in {duration:.4f}s")
        return value

    def _run_iterations(self, workdir: Path) -> None:
        for iteration in range(self.iterations):
            bundle = self._measure("generate", self.profile.build, iteration=iteration)
            payload = self._measure("serialize", bundle.to_json, iteration=iteration)
            target = workdir / f"{self.profile.key}-skill-{iteration}"
            self._measure("write", lambda: write_fixture(bundle, target), iteration=iteration)
            packed = self._measure("pack", lambda: pack_fixture(target), iteration=iteration)

            self.result.metadata.update(
                {
                    "serialized_bytes": len(payload.encode("utf-8")),
                    "packed_bytes": packed.size,
                    "uncompressed_bytes": packed.uncompressed_size,
                    "compression_ratio": packed.compression_ratio,
                },
            )

    def run(self) -> PerformanceResult:
        """Run every iteration and return the collected result."""
        with log_operation(
            logger,
            f"benchmarking {self.profile.bundle_name}",
            context={"iterations": self.iterations},
        ):
            if self.output_dir is not None:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                self._run_iterations(self.output_dir)
                self.result.save_to_file(self.output_dir / "results.json")
            else:
                with tempfile.TemporaryDirectory(prefix="skillfix-") as workdir:
                    self._run_iterations(Path(workdir))

        return self.result
