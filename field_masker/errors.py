"""
Masking exceptions and error handling.

This module defines custom exceptions for the field masker package.
"""

from typing import Optional


class FieldMaskerError(Exception):
    """Base exception for field masker errors."""

    def __init__(self, message: str):
        """
        Initialize field masker error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class MaskDepthExceededError(FieldMaskerError):
    """Raised when a value nests deeper than the configured depth limit."""

    def __init__(self, max_depth: int, message: Optional[str] = None):
        super().__init__(
            message or f"Value nesting exceeds the maximum masking depth of {max_depth}"
        )
        self.max_depth = max_depth


class ConfigurationError(FieldMaskerError):
    """Raised when configuration is invalid."""

    pass
