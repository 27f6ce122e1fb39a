"""
Tests for setting key validation.
"""

import pytest

from appsettings.core import InvalidKeyError
from appsettings.utils import validate_setting_key


def test_validate_setting_key_valid():
    """Test valid keys are accepted unchanged."""
    valid_keys = [
        "Theme",
        "RoamingEnabled",
        "font_size",
        "_private",
        "window.width",
        "last-opened",
        "Key2",
    ]

    for key in valid_keys:
        assert validate_setting_key(key) == key


def test_validate_setting_key_invalid():
    """Test invalid keys raise InvalidKeyError."""
    invalid_keys = [
        "",  # Empty
        "2fast",  # Starts with digit
        "has space",  # Contains space
        "ui/theme",  # QSettings group separator
        "ui\\theme",  # Backslash
        "-leading-hyphen",  # Starts with hyphen
        "emoji☃",  # Non-ASCII
    ]

    for key in invalid_keys:
        with pytest.raises(InvalidKeyError):
            validate_setting_key(key)


def test_validate_setting_key_not_string():
    """Test non-string keys are rejected."""
    for key in (None, 42, b"Theme"):
        with pytest.raises(InvalidKeyError):
            validate_setting_key(key)


def test_validate_setting_key_too_long():
    """Test that extremely long keys are rejected."""
    with pytest.raises(InvalidKeyError):
        validate_setting_key("a" * 256)

    assert validate_setting_key("a" * 255) == "a" * 255
