"""Service layer for the field masker."""

from .masker import FieldMasker

__all__ = ["FieldMasker"]
