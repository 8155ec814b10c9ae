"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Performance test package for SKILLFIX.

This package contains performance tests that hold each fixture profile to a
time budget for generation, serialization, writing and packing.
"""
