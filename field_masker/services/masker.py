"""
Field masker service for logging and audit pipelines.

Binds a MaskerConfig to the masking operations so callers can configure the
masked field names and depth limit once and reuse them for every payload.
"""

import logging
from typing import Any, FrozenSet, Iterable, Optional

from ..models.config import MaskerConfig
from ..utils.data_masker import DataMasker, MaskInput

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class FieldMasker:
    """Configured masker for payloads about to be logged or persisted."""

    def __init__(self, config: Optional[MaskerConfig] = None):
        """
        Initialize field masker.

        Args:
            config: Masker configuration (defaults to MaskerConfig())
        """
        self.config = config or MaskerConfig()
        self.masking_enabled = True  # Default: mask configured fields
        self._field_names = DataMasker.build_field_set(self.config.fields_to_mask)

        logging.getLogger("field_masker").setLevel(_LOG_LEVELS[self.config.log_level])
        logger.debug(f"Field masker configured with {len(self._field_names)} field names")

    @property
    def field_names(self) -> FrozenSet[str]:
        """Get the configured field names, including userName and userEmail."""
        return self._field_names

    def set_masking(self, enabled: bool) -> None:
        """
        Enable or disable masking.

        Args:
            enabled: Whether to mask field values
        """
        self.masking_enabled = enabled

    def mask(self, value: MaskInput, extra_fields: Optional[Iterable[str]] = None) -> MaskInput:
        """
        Mask configured fields in value.

        Args:
            value: Payload to mask
            extra_fields: Field names to mask for this call only

        Returns:
            Masked copy of value, or value itself when masking is disabled

        Raises:
            MaskDepthExceededError: If value nests deeper than the configured max_depth
        """
        if not self.masking_enabled:
            return value

        field_names = self._field_names
        if extra_fields:
            field_names = field_names.union(DataMasker.build_field_set(extra_fields))

        return DataMasker.mask_sensitive_data(value, field_names, self.config.max_depth)

    def obscure(self, value: Any) -> Any:
        """Obscure a single value regardless of its field name."""
        return DataMasker.obscure_value(value)

    def contains_masked_fields(self, value: MaskInput) -> bool:
        """Check if value holds any configured field at any depth."""
        return DataMasker.contains_masked_fields(value, self._field_names)
