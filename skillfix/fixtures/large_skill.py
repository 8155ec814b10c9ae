"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""Large test skill: 2500 detailed records."""

from skillfix.profiles import load_fixture

bundle = load_fixture("large")

name = bundle.name
version = bundle.version
data = bundle.data

__all__ = ["bundle", "name", "version", "data"]
