"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Importable fixture modules.

Each module exposes ``name``, ``version`` and ``data`` at module level, built
once when the module is first imported.
"""
