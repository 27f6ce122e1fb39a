"""
Settings accessor for appsettings.

Routes reads and writes of declared settings between a local store and a
roaming store, substitutes defaults, and notifies listeners of changes.
"""

import logging
import threading
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from ..core.application_data import ApplicationData, current_application_data
from ..core.errors import UnknownSettingError
from ..core.routing import Routing, Setting, build_routing_table, collect_settings
from ..core.stores import NOT_FOUND, ReadResult, read_value, write_value
from .defaults import ROAMING_ENABLED_DEFAULT, ROAMING_ENABLED_KEY, TYPE_DEFAULTS

logger = logging.getLogger(__name__)

# Marks an omitted default in get_value()
_NO_DEFAULT = object()

_instances: Dict[type, "AppConfigBase"] = {}
_instances_lock = threading.Lock()


class _ChangeNotifier(QObject):
    """Carries the change signal for an AppConfigBase."""

    property_changed = Signal(str)


class AppConfigBase:
    """
    Base class for typed, two-tier application configuration.

    Subclasses declare settings as class attributes:

        class AppConfig(AppConfigBase):
            theme = Setting("light")                         # roaming
            device_id = Setting(value_type=str, local=True)  # local only

        config = AppConfig.instance()
        config.theme = "dark"

    Reads of roaming settings look in the roaming store while roaming is
    enabled. With roaming disabled they look in the local store first and
    fall back to the roaming store. Local settings always live in the local
    store. Writes ignore the roaming toggle: roaming settings are always
    written to the roaming store.

    Reads and writes never raise because of the stores. A failed or
    mistyped read returns the default; a failed write is logged and
    dropped without a change notification.
    """

    roaming_enabled = Setting(ROAMING_ENABLED_DEFAULT, key=ROAMING_ENABLED_KEY, local=True)

    # Filled per class by __init_subclass__
    _settings: Dict[str, Setting] = {}
    _routing_table: Dict[str, Routing] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._settings = collect_settings(cls)
        cls._routing_table = build_routing_table(cls._settings)

    def __init__(self, application_data: Optional[ApplicationData] = None):
        data = application_data or current_application_data()
        self._local = data.local
        self._roaming = data.roaming
        self._routing_cache: Dict[str, Routing] = {}
        self._notifier = _ChangeNotifier()

    # ------------------------------------------------------------------
    # Singleton per concrete class
    # ------------------------------------------------------------------

    @classmethod
    def instance(cls):
        """
        Get the shared instance of this configuration class.

        Created on first call with the current process-wide stores.
        Each subclass has its own instance.
        """
        inst = _instances.get(cls)
        if inst is None:
            with _instances_lock:
                inst = _instances.get(cls)
                if inst is None:
                    inst = cls()
                    _instances[cls] = inst
                    logger.debug(f"Created {cls.__name__} instance")
        return inst

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance; the next instance() call creates a new one."""
        with _instances_lock:
            _instances.pop(cls, None)

    # ------------------------------------------------------------------
    # Declarations and routing
    # ------------------------------------------------------------------

    @classmethod
    def declared_settings(cls) -> Dict[str, Setting]:
        """Settings declared on this class and its bases, by storage key."""
        return dict(cls._settings)

    @classmethod
    def _lookup_declaration(cls, key: str) -> Routing:
        try:
            return cls._routing_table[key]
        except KeyError:
            raise UnknownSettingError(
                f"{cls.__name__} has no setting with key {key!r}"
            ) from None

    def resolve_routing(self, key: str) -> Routing:
        """
        Get the routing for ``key``.

        Resolved from the class declarations on first use and cached for
        the lifetime of this instance.

        Raises:
            UnknownSettingError: If ``key`` was never declared
        """
        routing = self._routing_cache.get(key)
        if routing is None:
            routing = self._lookup_declaration(key)
            self._routing_cache[key] = routing
        return routing

    def is_local_pinned(self, key: str) -> bool:
        return self.resolve_routing(key) is Routing.LOCAL_PINNED

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _is_roaming_enabled(self) -> bool:
        result = read_value(self._local, ROAMING_ENABLED_KEY, bool)
        return self._resolve(ROAMING_ENABLED_KEY, result, ROAMING_ENABLED_DEFAULT)

    def _read_roaming(self, key: str, value_type: Optional[type]) -> ReadResult:
        return read_value(self._roaming, key, value_type)

    def _read_local(self, key: str, value_type: Optional[type],
                    fallback_to_roaming: bool) -> ReadResult:
        result = read_value(self._local, key, value_type)
        if result.found or result.failed:
            return result
        if fallback_to_roaming:
            return read_value(self._roaming, key, value_type)
        return NOT_FOUND

    @staticmethod
    def _resolve(key: str, result: ReadResult, default: Any) -> Any:
        if result.found:
            return result.value
        if result.failed:
            logger.debug(f"Reading setting {key!r} failed, using default: {result.error}")
        return default

    def get_value(self, key: str, default: Any = _NO_DEFAULT,
                  value_type: Optional[type] = None) -> Any:
        """
        Read a setting.

        Args:
            key: Declared storage key
            default: Returned when the value is absent, unreadable or of the
                wrong type. If omitted, the implicit default for
                ``value_type`` (False, 0, 0.0 or None)
            value_type: Expected type of the stored value (no check if None)

        Returns:
            Stored value or default

        Raises:
            UnknownSettingError: If ``key`` was never declared
        """
        if default is _NO_DEFAULT:
            default = TYPE_DEFAULTS.get(value_type)

        local_pinned = self.is_local_pinned(key)
        roaming_enabled = self._is_roaming_enabled()

        if roaming_enabled and not local_pinned:
            result = self._read_roaming(key, value_type)
        else:
            result = self._read_local(key, value_type, fallback_to_roaming=not roaming_enabled)

        return self._resolve(key, result, default)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_value(self, key: str, value: Any) -> bool:
        """
        Write a setting and notify listeners.

        Local settings go to the local store, all others to the roaming
        store, whatever the roaming toggle says.

        Args:
            key: Declared storage key
            value: Value to store

        Returns:
            True if the value was stored (and property_changed emitted)

        Raises:
            UnknownSettingError: If ``key`` was never declared
        """
        local_pinned = self.is_local_pinned(key)
        store = self._local if local_pinned else self._roaming

        error = write_value(store, key, value)
        if error is not None:
            tier = "local" if local_pinned else "roaming"
            logger.warning(f"Failed to write setting {key!r} to {tier} store: {error}")
            return False

        self._on_property_changed(key)
        return True

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    @property
    def property_changed(self):
        """
        Signal(str) emitted with the key after each successful write.

        Connected callables run synchronously, in connection order, before
        set_value() returns.
        """
        return self._notifier.property_changed

    def _on_property_changed(self, key: str) -> None:
        self._notifier.property_changed.emit(key)


AppConfigBase._settings = collect_settings(AppConfigBase)
AppConfigBase._routing_table = build_routing_table(AppConfigBase._settings)
