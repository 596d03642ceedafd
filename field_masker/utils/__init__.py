"""Utility modules for the field masker."""

from .config_loader import load_config
from .data_masker import DataMasker, MaskInput, mask, obscure, try_parse_json

__all__ = [
    "load_config",
    "DataMasker",
    "MaskInput",
    "mask",
    "obscure",
    "try_parse_json",
]
