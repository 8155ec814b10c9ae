"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
SKILLFIX - Skill fixture bundles
Synthetic, predictably-sized data bundles for bundler and loader performance tests
"""

__version__ = "0.1.0"
