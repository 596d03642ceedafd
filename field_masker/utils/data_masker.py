"""
Data masker utility for user identifier protection.

Masks the values of named fields in nested dicts, lists and JSON-encoded
strings so that payloads can be logged or audited without persisting
usernames and email addresses. Masked values keep their first and last
characters and their delimiters, which keeps them recognizable while debugging.
"""

import json
import logging
import re
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from ..errors import MaskDepthExceededError
from ..models.config import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

MaskInput = Union[None, str, int, float, bool, List[Any], Dict[str, Any]]

# Returned by try_parse_json when the text is not valid JSON
NOT_JSON = object()

# Shared by the segment split and the delimiter-preserving split
_DELIMITER_CLASS = "[@ .]"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def try_parse_json(value: str) -> Any:
    """
    Parse a string as JSON without raising.

    NaN and Infinity literals are rejected as they are not valid JSON.

    Args:
        value: Text to parse

    Returns:
        The parsed document, or NOT_JSON if the text does not parse
    """
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return NOT_JSON


class DataMasker:
    """Static class for masking user identifiers in nested data."""

    MASK_CHAR = "*"

    # Always masked, callers can only add to this set
    DEFAULT_FIELDS: FrozenSet[str] = frozenset({"userName", "userEmail"})

    DELIMITERS = ("@", " ", ".")

    _segment_pattern = re.compile(_DELIMITER_CLASS)
    _skeleton_pattern = re.compile(f"({_DELIMITER_CLASS})")

    @classmethod
    def build_field_set(cls, fields_to_mask: Optional[Iterable[str]] = None) -> FrozenSet[str]:
        """
        Merge caller field names with the default fields.

        Args:
            fields_to_mask: Extra field names (a single string counts as one name)

        Returns:
            Frozen set of field names to mask
        """
        if not fields_to_mask:
            return cls.DEFAULT_FIELDS
        if isinstance(fields_to_mask, str):
            fields_to_mask = [fields_to_mask]
        return cls.DEFAULT_FIELDS.union(fields_to_mask)

    @classmethod
    def mask_segment(cls, segment: str) -> str:
        """
        Obscure a single delimiter-free segment.

        Segments of two characters or fewer are kept. Segments of three or four
        characters keep their first two characters. Longer segments keep their
        first two and their last character.

        Args:
            segment: Segment text

        Returns:
            Obscured segment of the same length
        """
        length = len(segment)
        if length <= 2:
            return segment
        if length <= 4:
            return segment[:2] + cls.MASK_CHAR * (length - 2)
        return segment[:2] + cls.MASK_CHAR * (length - 3) + segment[-1]

    @classmethod
    def obscure_value(cls, value: Any) -> Any:
        """
        Obscure a string segment by segment, keeping its delimiters.

        Falsy and non-string values are returned unchanged.

        Args:
            value: Value stored under a masked field

        Returns:
            Obscured string, or the original value
        """
        if not value:
            return value

        if not isinstance(value, str):
            return value

        masked_segments = iter(
            [cls.mask_segment(segment) for segment in cls._segment_pattern.split(value)]
        )

        return "".join(
            part if part in cls.DELIMITERS else next(masked_segments, part)
            for part in cls._skeleton_pattern.split(value)
        )

    @classmethod
    def mask_sensitive_data(
        cls,
        data: MaskInput,
        fields_to_mask: Optional[Iterable[str]] = None,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ) -> MaskInput:
        """
        Mask field values in objects, arrays, or primitives.

        Returns a masked copy without modifying the original.
        Recursively processes nested dicts, lists and string values that
        contain JSON objects or arrays. JSON strings are returned as
        re-serialized JSON text.

        Args:
            data: Data to mask (dict, list, or primitive)
            fields_to_mask: Extra field names to mask besides userName and userEmail
            max_depth: Maximum nesting depth, or None for no limit

        Returns:
            Masked copy of the data

        Raises:
            MaskDepthExceededError: If data nests deeper than max_depth
        """
        field_set = cls.build_field_set(fields_to_mask)
        return cls._mask_with_fields(data, field_set, max_depth, 1)

    @classmethod
    def _mask_with_fields(
        cls,
        data: MaskInput,
        field_set: FrozenSet[str],
        max_depth: Optional[int],
        depth: int,
    ) -> MaskInput:
        # Handle None and primitives
        if data is None or not isinstance(data, (dict, list)):
            return data

        if max_depth is not None and depth > max_depth:
            logger.warning(f"Masking aborted: value nests deeper than {max_depth} levels")
            raise MaskDepthExceededError(max_depth)

        if isinstance(data, list):
            return [cls._mask_with_fields(item, field_set, max_depth, depth + 1) for item in data]

        return {
            key: cls._mask_field(key, value, field_set, max_depth, depth)
            for key, value in data.items()
        }

    @classmethod
    def _mask_field(
        cls,
        key: str,
        value: MaskInput,
        field_set: FrozenSet[str],
        max_depth: Optional[int],
        depth: int,
    ) -> MaskInput:
        if key in field_set:
            return cls.obscure_value(value)

        if isinstance(value, (dict, list)):
            return cls._mask_with_fields(value, field_set, max_depth, depth + 1)

        if isinstance(value, str) and value:
            parsed = try_parse_json(value)
            # JSON scalars are kept verbatim
            if isinstance(parsed, (dict, list)):
                logger.debug(f"Masking JSON-encoded value of field '{key}'")
                masked = cls._mask_with_fields(parsed, field_set, max_depth, depth + 1)
                return json.dumps(masked, separators=(",", ":"), ensure_ascii=False)

        return value

    @classmethod
    def contains_masked_fields(
        cls, data: MaskInput, fields_to_mask: Optional[Iterable[str]] = None
    ) -> bool:
        """
        Check if data contains any field that would be masked.

        Args:
            data: Data to check
            fields_to_mask: Extra field names besides userName and userEmail

        Returns:
            True if a dict at any depth has a masked key, False otherwise
        """
        return cls._contains_fields(data, cls.build_field_set(fields_to_mask))

    @classmethod
    def _contains_fields(cls, data: MaskInput, field_set: FrozenSet[str]) -> bool:
        if data is None or not isinstance(data, (dict, list)):
            return False

        if isinstance(data, list):
            return any(cls._contains_fields(item, field_set) for item in data)

        for key, value in data.items():
            if key in field_set:
                return True
            if isinstance(value, str) and value:
                value = try_parse_json(value)
            if isinstance(value, (dict, list)) and cls._contains_fields(value, field_set):
                return True

        return False


def mask(
    value: MaskInput,
    fields_to_mask: Optional[Iterable[str]] = None,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> MaskInput:
    """Mask userName, userEmail and any extra named fields in value."""
    return DataMasker.mask_sensitive_data(value, fields_to_mask, max_depth)


def obscure(value: Any) -> Any:
    """Obscure a single value the way masked fields are obscured."""
    return DataMasker.obscure_value(value)
