"""
Validation utilities for appsettings.
"""

import re

from ..config.defaults import MAX_KEY_LENGTH
from ..core.errors import InvalidKeyError

# Letters, digits, underscore, hyphen and dot; must not start with a digit.
# Slashes are excluded because QSettings treats them as group separators.
SETTING_KEY_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_.-]*$')


def validate_setting_key(key: str) -> str:
    """
    Validate a setting storage key.

    Args:
        key: Key to validate

    Returns:
        The key, unchanged

    Raises:
        InvalidKeyError: If the key is empty, too long, or has
            characters a settings store cannot hold in a flat namespace
    """
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(f"Setting key must be a non-empty string, got {key!r}")

    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyError(
            f"Setting key too long ({len(key)} > {MAX_KEY_LENGTH}): {key[:32]}..."
        )

    if not SETTING_KEY_PATTERN.match(key):
        raise InvalidKeyError(f"Invalid setting key: {key!r}")

    return key
