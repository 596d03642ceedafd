"""
Shared pytest fixtures for field masker tests.
"""

import json
import logging

import pytest

from field_masker import FieldMasker, MaskerConfig


@pytest.fixture
def config():
    """Test configuration with extra masked fields."""
    return MaskerConfig(
        fields_to_mask=["email", "phone"],
        max_depth=10,
        log_level="debug",
    )


@pytest.fixture
def field_masker(config):
    """Field masker bound to the test configuration."""
    return FieldMasker(config)


@pytest.fixture
def audit_payload():
    """Nested audit payload with identifiers at several depths."""
    return {
        "event": "login",
        "userName": "johndoe",
        "userEmail": "john.doe@example.com",
        "attempts": 3,
        "success": True,
        "metadata": {
            "ip": "10.0.0.1",
            "email": "jane@corp.io",
            "tags": ["auth", "web"],
        },
        "sessions": [
            {"id": 1, "userName": "alice"},
            {"id": 2, "userName": None},
        ],
        "body": json.dumps({"userEmail": "bob@site.org", "note": "hello"}),
        "raw": "{not json",
    }


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the field_masker logger level changed by FieldMasker."""
    package_logger = logging.getLogger("field_masker")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
