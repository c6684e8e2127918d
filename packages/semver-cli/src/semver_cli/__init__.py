# SPDX-License-Identifier: MIT
"""Command line interface for semantic version parsing and comparison."""

__version__ = "0.1.0"
