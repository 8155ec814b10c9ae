"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Materialize fixture bundles on disk and pack them the way a skill bundler does.

A written fixture is a directory holding ``skill.json`` (the bundle export) and
a ``SKILL.md`` manifest. Packing produces an in-memory gzip tarball so callers
can compare compressed and uncompressed sizes.
"""

import io
import tarfile
from dataclasses import dataclass
from pathlib import Path

from skillfix.core.logging import get_logger, log_operation
from skillfix.models import Bundle

logger = get_logger(__name__)

DATA_FILENAME = "skill.json"
MANIFEST_FILENAME = "SKILL.md"


@dataclass(frozen=True)
class PackResult:
    """Outcome of packing a fixture directory."""

    buffer: bytes
    uncompressed_size: int
    file_count: int

    @property
    def size(self) -> int:
        """Compressed size in bytes."""
        return len(self.buffer)

    @property
    def compression_ratio(self) -> float:
        """Percentage of bytes saved by compression."""
        if self.uncompressed_size == 0:
            return 0.0
        return (self.uncompressed_size - self.size) / self.uncompressed_size * 100


def render_manifest(bundle: Bundle) -> str:
    """Render the SKILL.md manifest for a bundle."""
    return (
        "---\n"
        f"name: {bundle.name}\n"
        f"version: {bundle.version}\n"
        f"records: {len(bundle.data)}\n"
        "---\n\n"
        f"# {bundle.name}\n\n"
        "Performance fixture generated by skillfix.\n"
    )


def write_fixture(bundle: Bundle, directory: str | Path) -> Path:
    """
    Write a bundle to a fixture directory.

    Args:
    ----
        bundle: The bundle to write
        directory: Target directory, created if missing

    Returns:
    -------
        The fixture directory path

    """
    directory = Path(directory)
    with log_operation(logger, f"writing fixture {bundle.name}", context={"path": str(directory)}):
        directory.mkdir(parents=True, exist_ok=True)
        (directory / DATA_FILENAME).write_text(bundle.to_json(), encoding="utf-8")
        (directory / MANIFEST_FILENAME).write_text(render_manifest(bundle), encoding="utf-8")
    return directory


def pack_fixture(directory: str | Path) -> PackResult:
    """
    Pack every file under a fixture directory into a gzip tarball in memory.

    Args:
    ----
        directory: The fixture directory

    Returns:
    -------
        A PackResult with the tarball bytes and size accounting

    Raises:
    ------
        FileNotFoundError: If the directory does not exist

    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Fixture directory {directory} does not exist")

    files = sorted(p for p in directory.rglob("*") if p.is_file())
    uncompressed_size = sum(p.stat().st_size for p in files)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for path in files:
            archive.add(path, arcname=path.relative_to(directory).as_posix())

    result = PackResult(
        buffer=buffer.getvalue(),
        uncompressed_size=uncompressed_size,
        file_count=len(files),
    )
    logger.debug(
        f"Packed {result.file_count} files: {uncompressed_size} -> {result.size} bytes "
        f"({result.compression_ratio:.2f}% saved)",
    )
    return result
