"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Named fixture profiles.

A profile fixes the bundle name, record count and record kind of a fixture so
the performance suite always measures inputs of the same shape and size.
"""

import threading
from dataclasses import dataclass
from enum import Enum

from skillfix.generator import (
    DEFAULT_SEED,
    DEFAULT_VERSION,
    Clock,
    generate,
    generate_detailed,
)
from skillfix.models import Bundle


class RecordKind(str, Enum):
    BASIC = "basic"
    DETAILED = "detailed"


class UnknownProfileError(KeyError):
    """Raised when a profile name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown profile '{name}'. Expected one of: {', '.join(sorted(PROFILES))}",
        )

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class FixtureProfile:
    """Recipe for one fixture bundle."""

    key: str
    bundle_name: str
    count: int
    kind: RecordKind = RecordKind.BASIC
    version: str = DEFAULT_VERSION

    def build(self, clock: Clock | None = None, seed: int | None = None) -> Bundle:
        """Build a fresh bundle for this profile."""
        if self.kind is RecordKind.DETAILED:
            return generate_detailed(
                self.count,
                DEFAULT_SEED if seed is None else seed,
                name=self.bundle_name,
                version=self.version,
                clock=clock,
            )
        return generate(self.count, name=self.bundle_name, version=self.version, clock=clock)


PROFILES: dict[str, FixtureProfile] = {
    "small": FixtureProfile("small", "small-test-skill", 10),
    "medium": FixtureProfile("medium", "medium-test-skill", 100, RecordKind.DETAILED),
    "large": FixtureProfile("large", "large-test-skill", 2500, RecordKind.DETAILED),
}


def get_profile(name: str) -> FixtureProfile:
    """
    Look up a registered profile by name (case-insensitive).

    Raises
    ------
        UnknownProfileError: If no profile is registered under that name

    """
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise UnknownProfileError(name) from None


def build_profile(name: str, clock: Clock | None = None, seed: int | None = None) -> Bundle:
    """Build a fresh bundle for the named profile."""
    return get_profile(name).build(clock=clock, seed=seed)


# Process-wide bundles keyed by profile, populated under _fixture_lock
_fixture_cache: dict[str, Bundle] = {}
_fixture_lock = threading.RLock()


def load_fixture(name: str = "small") -> Bundle:
    """
    Return the process-wide bundle for a profile.

    The bundle is built on first access and the same immutable instance is
    returned for the rest of the process lifetime.
    """
    key = get_profile(name).key
    bundle = _fixture_cache.get(key)
    if bundle is None:
        with _fixture_lock:
            bundle = _fixture_cache.get(key)
            if bundle is None:
                bundle = PROFILES[key].build()
                _fixture_cache[key] = bundle
    return bundle
