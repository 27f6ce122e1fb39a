"""
Exceptions raised by appsettings.

Store failures and type mismatches never reach callers of the read/write
accessors; these exceptions surface programming errors (bad or missing
declarations) and let store adapters report failures to the boundary.
"""


class SettingsError(Exception):
    """Base class for all appsettings errors."""
    pass


class InvalidKeyError(SettingsError):
    """Raised when a setting key is not a valid storage key."""
    pass


class DuplicateSettingError(SettingsError):
    """Raised when two settings on one configuration class share a key."""
    pass


class UnknownSettingError(SettingsError):
    """Raised when a key is used that the configuration class never declared."""
    pass


class StoreError(SettingsError):
    """Raised by a store adapter that could not complete an operation."""
    pass
