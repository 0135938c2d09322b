"""
Errors raised while rendering documentation trees.
"""

from __future__ import annotations


class InvalidLevelError(ValueError):
    """Raised when a header is requested at a level less than 1."""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"header level cannot be less than 1 (got {level})")
