"""
Default values and reserved names for appsettings.
"""

# Reserved local-store key holding the global roaming toggle
ROAMING_ENABLED_KEY = "RoamingEnabled"
ROAMING_ENABLED_DEFAULT = True

# Used when neither the caller nor QCoreApplication names the application
DEFAULT_APP_NAME = "appsettings"

# File name of the INI file inside each settings directory
SETTINGS_FILE_NAME = "settings.ini"

# Environment overrides for the two settings directories
LOCAL_DIR_ENV = "APPSETTINGS_LOCAL_DIR"
ROAMING_DIR_ENV = "APPSETTINGS_ROAMING_DIR"

# Implicit defaults when a read supplies a type but no default value.
# Any type not listed here defaults to None.
TYPE_DEFAULTS = {
    bool: False,
    int: 0,
    float: 0.0,
}

MAX_KEY_LENGTH = 255
