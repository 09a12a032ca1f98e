# SPDX-License-Identifier: MIT
"""Command-line interface for semantic version tooling.

Thin commands over :mod:`semver_core`: compare, sort, validate and bump.
"""

__version__ = "0.1.0"
