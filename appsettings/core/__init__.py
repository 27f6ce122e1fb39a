"""
Core functionality for appsettings.

This module provides the pieces the configuration accessor is built on:
- Setting declarations and store routing
- Backing stores (in-memory and QSettings INI files)
- Binding of the local and roaming stores
"""

from .errors import (
    SettingsError,
    InvalidKeyError,
    DuplicateSettingError,
    UnknownSettingError,
    StoreError,
)
from .routing import Routing, Setting, collect_settings, build_routing_table
from .stores import (
    SettingsStore,
    MemoryStore,
    QSettingsStore,
    ReadResult,
    read_value,
    write_value,
)
from .application_data import (
    ApplicationData,
    current_application_data,
    set_application_data,
    get_local_settings_dir,
    get_roaming_settings_dir,
)

__all__ = [
    "SettingsError",
    "InvalidKeyError",
    "DuplicateSettingError",
    "UnknownSettingError",
    "StoreError",
    "Routing",
    "Setting",
    "collect_settings",
    "build_routing_table",
    "SettingsStore",
    "MemoryStore",
    "QSettingsStore",
    "ReadResult",
    "read_value",
    "write_value",
    "ApplicationData",
    "current_application_data",
    "set_application_data",
    "get_local_settings_dir",
    "get_roaming_settings_dir",
]
