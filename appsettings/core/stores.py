"""
Backing stores for settings.

A store is a flat mapping from string key to value. Two implementations
are provided: an in-memory store and a QSettings-backed INI file.

read_value() and write_value() are the only places where store exceptions
are caught; they turn every outcome into an explicit result that the
accessor applies its default/no-op policy to.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Protocol, Union

from PySide6.QtCore import QSettings

from ..config.defaults import TYPE_DEFAULTS
from .errors import StoreError

logger = logging.getLogger(__name__)

# INI spellings of booleans written by QSettings
_INI_BOOLEANS = {"true": True, "false": False}

_ABSENT = object()


class SettingsStore(Protocol):
    """Capabilities the accessor needs from a backing store."""

    def contains_key(self, key: str) -> bool:
        ...

    def get(self, key: str, value_type: Optional[type] = None) -> Any:
        """Return the stored value. Undefined if the key is absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Insert or update ``key``."""
        ...


class MemoryStore:
    """Dict-backed store. Nothing is persisted."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = dict(initial or {})

    def contains_key(self, key: str) -> bool:
        return key in self.values

    def get(self, key: str, value_type: Optional[type] = None) -> Any:
        return self.values[key]

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def remove(self, key: str) -> bool:
        """Remove ``key``. Returns True if it was present."""
        return self.values.pop(key, _ABSENT) is not _ABSENT

    def __contains__(self, key) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self):
        return f"MemoryStore({self.values!r})"


class QSettingsStore:
    """
    Store backed by a QSettings INI file.

    Each write is synced to disk immediately so that a failure can be
    reported to the caller of set() instead of being lost at shutdown.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._settings = QSettings(str(self._path), QSettings.Format.IniFormat)
        logger.debug(f"Opened settings file {self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def contains_key(self, key: str) -> bool:
        return self._settings.contains(key)

    def get(self, key: str, value_type: Optional[type] = None) -> Any:
        return _from_ini(key, self._settings.value(key), value_type)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StoreError(f"Failed to write {key!r} to {self._path}: {status.name}")

    def __repr__(self):
        return f"QSettingsStore({str(self._path)!r})"


@dataclass(frozen=True)
class ReadResult:
    """Outcome of looking a key up in one store."""
    found: bool
    value: Any = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


NOT_FOUND = ReadResult(found=False)


def value_matches_type(value: Any, value_type: Optional[type]) -> bool:
    """
    Check a stored value against the type a reader asked for.

    None matches any type that has no implicit non-None default (str,
    list, custom classes); it never matches bool, int or float. A bool is
    never a number, and an int is accepted where a float is expected.
    """
    if value_type is None:
        return True
    if value is None:
        return value_type not in TYPE_DEFAULTS
    if isinstance(value, bool) and value_type in (int, float):
        return False
    if value_type is float and isinstance(value, int):
        return True
    return isinstance(value, value_type)


def read_value(store: SettingsStore, key: str, value_type: Optional[type] = None) -> ReadResult:
    """
    Look ``key`` up in ``store``.

    Returns:
        ReadResult with found=True and the value, found=False when the
        key is absent, or an error when the store raised or the stored
        value has the wrong type
    """
    try:
        if not store.contains_key(key):
            return NOT_FOUND
        value = store.get(key, value_type)
    except Exception as e:
        return ReadResult(found=False, error=e)

    if not value_matches_type(value, value_type):
        return ReadResult(
            found=False,
            error=TypeError(
                f"Stored value for {key!r} is {type(value).__name__}, "
                f"expected {value_type.__name__}"
            ),
        )
    return ReadResult(found=True, value=value)


def write_value(store: SettingsStore, key: str, value: Any) -> Optional[Exception]:
    """
    Insert or update ``key`` in ``store``.

    Returns:
        None on success, otherwise the exception the store raised
    """
    try:
        store.set(key, value)
    except Exception as e:
        return e
    return None


def _from_ini(key: str, raw: Any, value_type: Optional[type]) -> Any:
    """
    Convert a raw QSettings value back to ``value_type``.

    Values written in this process come back with their Python type; values
    loaded from an INI file come back as text. Text that doesn't parse as
    the requested type raises TypeError instead of being coerced.
    """
    if not isinstance(raw, str) or value_type is None or value_type is str:
        return raw

    if value_type is bool:
        parsed = _INI_BOOLEANS.get(raw.strip().lower())
        if parsed is None:
            raise TypeError(f"Stored value for {key!r} is not a boolean: {raw!r}")
        return parsed

    if value_type in (int, float):
        try:
            return value_type(raw)
        except ValueError:
            raise TypeError(
                f"Stored value for {key!r} is not {value_type.__name__}: {raw!r}"
            ) from None

    return raw
