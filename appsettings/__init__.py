"""
appsettings - typed local/roaming application settings.

Declare settings on an AppConfigBase subclass; each one is routed to a
device-local or a roaming store, with default values and change
notification.
"""

__version__ = "1.0.0"

from .config import AppConfigBase
from .core import (
    ApplicationData,
    MemoryStore,
    QSettingsStore,
    Routing,
    Setting,
    SettingsError,
    UnknownSettingError,
    current_application_data,
    set_application_data,
)

__all__ = [
    "__version__",
    "AppConfigBase",
    "ApplicationData",
    "MemoryStore",
    "QSettingsStore",
    "Routing",
    "Setting",
    "SettingsError",
    "UnknownSettingError",
    "current_application_data",
    "set_application_data",
]
