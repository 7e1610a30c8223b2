#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/utils/__init__.py
"""Utility modules for the richmark package.

This package contains dependency checking helpers and decorators shared by
parsers and scopes.
"""

from richmark.utils.decorators import debug_timer, requires_dependencies
from richmark.utils.packages import check_version_requirement, get_package_version

__all__ = [
    "check_version_requirement",
    "debug_timer",
    "get_package_version",
    "requires_dependencies",
]
