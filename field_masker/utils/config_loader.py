"""
Configuration loader utility.

Automatically loads environment variables with sensible defaults.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import DEFAULT_MAX_DEPTH, MaskerConfig


def _parse_max_depth(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return DEFAULT_MAX_DEPTH
    if raw.strip().lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"FIELD_MASKER_MAX_DEPTH must be an integer or 'none', got '{raw}'"
        )


def load_config() -> MaskerConfig:
    """
    Load configuration from environment variables with defaults.

    Optional environment variables:
    - FIELD_MASKER_FIELDS (comma-separated extra field names)
    - FIELD_MASKER_MAX_DEPTH (default: 100, 'none' disables the depth guard)
    - FIELD_MASKER_LOG_LEVEL (debug, info, warn, error)

    Returns:
        MaskerConfig instance

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    load_dotenv()

    fields = os.environ.get("FIELD_MASKER_FIELDS", "")
    fields_to_mask = [name for name in fields.split(",") if name.strip()]

    max_depth = _parse_max_depth(os.environ.get("FIELD_MASKER_MAX_DEPTH"))

    log_level = os.environ.get("FIELD_MASKER_LOG_LEVEL", "info")
    if log_level not in ["debug", "info", "warn", "error"]:
        log_level = "info"

    try:
        return MaskerConfig(
            fields_to_mask=fields_to_mask,
            max_depth=max_depth,
            log_level=log_level,
        )
    except ValidationError as error:
        raise ConfigurationError(f"Invalid field masker configuration: {error}") from error
