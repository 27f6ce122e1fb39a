"""
Binding of the local and roaming stores.

ApplicationData pairs the two stores a configuration object reads from and
writes to. A process-wide current binding is created on first use from the
platform's per-user directories:

    Local:   Windows %LOCALAPPDATA%\\<app>   Linux/macOS ~/.local/state/<app>
    Roaming: Windows %APPDATA%\\<app>        Linux/macOS ~/.config/<app>

Both can be overridden with APPSETTINGS_LOCAL_DIR / APPSETTINGS_ROAMING_DIR.
Keeping the roaming directory in sync between devices is left to whatever
synchronizes it (Windows roaming profiles, a dotfiles sync, etc.).
"""

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QCoreApplication

from ..config.defaults import (
    DEFAULT_APP_NAME,
    LOCAL_DIR_ENV,
    ROAMING_DIR_ENV,
    SETTINGS_FILE_NAME,
)
from .stores import MemoryStore, QSettingsStore, SettingsStore

logger = logging.getLogger(__name__)


def _application_name(app_name: Optional[str] = None) -> str:
    return app_name or QCoreApplication.applicationName() or DEFAULT_APP_NAME


def get_local_settings_dir(app_name: Optional[str] = None) -> Path:
    """
    Get the device-local settings directory.

    Args:
        app_name: Application name (defaults to the Qt application name)

    Returns:
        Path to directory (not created)
    """
    override = os.environ.get(LOCAL_DIR_ENV)
    if override:
        return Path(override).expanduser()

    name = _application_name(app_name)
    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_STATE_HOME', os.path.expanduser('~/.local/state'))
    return Path(base) / name


def get_roaming_settings_dir(app_name: Optional[str] = None) -> Path:
    """
    Get the roaming settings directory.

    Args:
        app_name: Application name (defaults to the Qt application name)

    Returns:
        Path to directory (not created)
    """
    override = os.environ.get(ROAMING_DIR_ENV)
    if override:
        return Path(override).expanduser()

    name = _application_name(app_name)
    if os.name == 'nt':  # Windows
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
    return Path(base) / name


@dataclass
class ApplicationData:
    """The pair of stores backing a configuration object."""
    local: SettingsStore
    roaming: SettingsStore

    @classmethod
    def in_memory(cls) -> "ApplicationData":
        """Two empty MemoryStores. Nothing is persisted."""
        return cls(local=MemoryStore(), roaming=MemoryStore())

    @classmethod
    def from_directories(
        cls,
        local_dir: Union[str, Path],
        roaming_dir: Union[str, Path],
    ) -> "ApplicationData":
        """
        QSettings INI stores inside the given directories.

        Creates the directories if they don't exist.
        """
        local_dir = Path(local_dir)
        roaming_dir = Path(roaming_dir)
        local_dir.mkdir(parents=True, exist_ok=True)
        roaming_dir.mkdir(parents=True, exist_ok=True)

        local = QSettingsStore(local_dir / SETTINGS_FILE_NAME)
        roaming = QSettingsStore(roaming_dir / SETTINGS_FILE_NAME)
        logger.info(f"Local settings: {local.path}")
        logger.info(f"Roaming settings: {roaming.path}")
        return cls(local=local, roaming=roaming)

    @classmethod
    def default(cls, app_name: Optional[str] = None) -> "ApplicationData":
        """Stores in the platform's per-user directories for ``app_name``."""
        return cls.from_directories(
            get_local_settings_dir(app_name),
            get_roaming_settings_dir(app_name),
        )


_current: Optional[ApplicationData] = None
_current_lock = threading.Lock()


def current_application_data() -> ApplicationData:
    """
    Get the process-wide store binding.

    Created with ApplicationData.default() on first call unless
    set_application_data() installed one first.
    """
    global _current
    data = _current
    if data is None:
        with _current_lock:
            if _current is None:
                _current = ApplicationData.default()
            data = _current
    return data


def set_application_data(data: Optional[ApplicationData]) -> None:
    """
    Install the process-wide store binding.

    Configuration objects bind their stores when constructed, so this
    should happen before the first instance() call. Passing None clears
    the binding; the next current_application_data() call recreates it.
    """
    global _current
    with _current_lock:
        _current = data
