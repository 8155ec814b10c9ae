"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Fixture record generation.

Builds fixture bundles from an index-to-record transformation. Every record of
a single call shares one timestamp, read once from the clock, so two bundles
generated from a frozen clock are identical.
"""

import random
from collections.abc import Callable
from datetime import datetime, timezone

from skillfix.core.logging import get_logger
from skillfix.models import Bundle, Record, RecordAttributes, RecordMetadata

logger = get_logger(__name__)

Clock = Callable[[], datetime]

DEFAULT_NAME = "small-test-skill"
DEFAULT_VERSION = "1.0.0"
DEFAULT_COUNT = 10
DEFAULT_SEED = 42

DESCRIPTION = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
DETAILED_DESCRIPTION = f"{DESCRIPTION} " * 10
DETAILED_CONTENT = "Detailed content information. " * 50
DETAILED_TAGS = ("tag1", "tag2", "tag3")


class InvalidArgumentError(ValueError):
    """Raised when a generator receives an argument outside its domain."""


def utc_now() -> datetime:
    """Default clock: the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """
    Format a datetime as an ISO-8601 UTC string with millisecond precision.

    Naive datetimes are taken to be UTC already.

    Args:
    ----
        moment: The instant to format

    Returns:
    -------
        A string such as ``2025-01-01T12:00:00.000Z``

    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def validate_count(count) -> int:
    """Return ``count`` if it is a non-negative integer, else raise InvalidArgumentError."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    return count


def generate(
    count: int = DEFAULT_COUNT,
    *,
    name: str = DEFAULT_NAME,
    version: str = DEFAULT_VERSION,
    clock: Clock | None = None,
) -> Bundle:
    """
    Generate a bundle of ``count`` basic records.

    Args:
    ----
        count: Number of records to generate
        name: Bundle name
        version: Bundle version
        clock: Time source, read exactly once; defaults to UTC wall-clock

    Returns:
    -------
        A frozen Bundle whose record ``i`` has ``id == i`` and ``name == "Item i"``

    Raises:
    ------
        InvalidArgumentError: If count is negative or not an integer

    """
    validate_count(count)
    now = iso_timestamp((clock or utc_now)())
    metadata = RecordMetadata(created=now, modified=now)

    data = tuple(
        Record(id=i, name=f"Item {i}", description=DESCRIPTION, metadata=metadata)
        for i in range(count)
    )
    logger.debug(f"Generated {count} records for {name}@{version}")
    return Bundle(name=name, version=version, data=data)


def generate_detailed(
    count: int,
    seed: int = DEFAULT_SEED,
    *,
    name: str = "medium-test-skill",
    version: str = DEFAULT_VERSION,
    clock: Clock | None = None,
) -> Bundle:
    """
    Generate a bundle of ``count`` detailed records.

    Detailed records carry padded description and content text, tags and an
    attribute block whose ``weight`` comes from a ``random.Random(seed)``.

    Raises:
    ------
        InvalidArgumentError: If count is negative or not an integer

    """
    validate_count(count)
    rnd = random.Random(seed)
    now = iso_timestamp((clock or utc_now)())

    data = tuple(
        Record(
            id=i,
            name=f"Item {i}",
            description=DETAILED_DESCRIPTION,
            content=DETAILED_CONTENT,
            metadata=RecordMetadata(
                created=now,
                modified=now,
                tags=DETAILED_TAGS,
                attributes=RecordAttributes(
                    color="blue",
                    size="medium",
                    weight=rnd.random() * 100,
                ),
            ),
        )
        for i in range(count)
    )
    logger.debug(f"Generated {count} detailed records for {name}@{version} (seed={seed})")
    return Bundle(name=name, version=version, data=data)
