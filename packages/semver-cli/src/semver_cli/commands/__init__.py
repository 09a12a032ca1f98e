# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, sort, validate, bump

__all__ = ["compare", "sort", "validate", "bump"]
