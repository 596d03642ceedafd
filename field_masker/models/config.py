"""
Configuration types for the field masker.

This module contains the Pydantic model that defines which fields are masked
and how deep the traversal may go.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_DEPTH = 100


class MaskerConfig(BaseModel):
    """Field masker configuration.

    Optional fields:
    - fields_to_mask: Extra field names to mask (userName and userEmail are always masked)
    - max_depth: Maximum nesting depth before masking is aborted (None disables the guard)
    - log_level: Logging level for the field_masker logger (debug, info, warn, error)
    """

    fields_to_mask: List[str] = Field(
        default_factory=list,
        description="Extra field names whose values are masked",
    )
    max_depth: Optional[int] = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Maximum nesting depth of dicts and lists",
    )
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info",
        description="Log level",
    )

    @field_validator("fields_to_mask")
    @classmethod
    def _strip_field_names(cls, value: List[str]) -> List[str]:
        return [name.strip() for name in value if name and name.strip()]
