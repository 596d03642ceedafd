"""
Field masker - recursive masking of user identifiers in nested data.

This package masks the values of named fields (userName and userEmail by
default) in dicts, lists and JSON-encoded strings before they are logged,
sent as telemetry or written to audit trails.
"""

from .errors import ConfigurationError, FieldMaskerError, MaskDepthExceededError
from .models.config import DEFAULT_MAX_DEPTH, MaskerConfig
from .services.masker import FieldMasker
from .utils.config_loader import load_config
from .utils.data_masker import DataMasker, MaskInput, mask, obscure

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "mask",
    "obscure",
    "DataMasker",
    "MaskInput",
    "FieldMasker",
    "MaskerConfig",
    "DEFAULT_MAX_DEPTH",
    "load_config",
    "FieldMaskerError",
    "MaskDepthExceededError",
    "ConfigurationError",
]
