"""Configuration models for the field masker."""

from .config import DEFAULT_MAX_DEPTH, MaskerConfig

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MaskerConfig",
]
