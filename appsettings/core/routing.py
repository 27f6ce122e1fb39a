"""
Setting declarations and store routing.

A configuration class declares its settings as ``Setting`` class attributes.
When the class is created, every declaration is collected into a table
mapping storage key to ``Routing``; the accessor consults that table (never
the stores) to decide which tier a key belongs to.
"""

from enum import Enum
from typing import Any, Dict, Optional

from ..config.defaults import TYPE_DEFAULTS
from ..utils.validators import validate_setting_key
from .errors import DuplicateSettingError


class Routing(Enum):
    """Which backing store a setting belongs to."""

    # Always read from and written to the local store
    LOCAL_PINNED = "local"
    # Written to the roaming store; read location depends on the roaming toggle
    ROAMING_ELIGIBLE = "roaming"


class Setting:
    """
    Declares a named, typed setting on a configuration class.

    Reading the attribute on an instance calls ``get_value`` on it, assigning
    calls ``set_value``. On the class itself the descriptor is returned.

    Example:
        class AppConfig(AppConfigBase):
            theme = Setting("light")
            device_id = Setting(value_type=str, local=True)
            font_size = Setting(10, key="FontSize")
    """

    def __init__(
        self,
        default: Any = None,
        *,
        key: Optional[str] = None,
        local: bool = False,
        value_type: Optional[type] = None,
    ):
        if default is None and value_type in TYPE_DEFAULTS:
            default = TYPE_DEFAULTS[value_type]
        self.default = default
        self.key = key
        self.routing = Routing.LOCAL_PINNED if local else Routing.ROAMING_ELIGIBLE
        if value_type is None and default is not None:
            value_type = type(default)
        self.value_type = value_type
        self.attr_name: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.routing is Routing.LOCAL_PINNED

    def __set_name__(self, owner, name):
        self.attr_name = name
        if self.key is None:
            self.key = name
        validate_setting_key(self.key)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.get_value(self.key, self.default, self.value_type)

    def __set__(self, instance, value):
        instance.set_value(self.key, value)

    def __repr__(self):
        type_name = self.value_type.__name__ if self.value_type else None
        return (
            f"Setting(key={self.key!r}, default={self.default!r}, "
            f"type={type_name}, routing={self.routing.value})"
        )


def collect_settings(cls) -> Dict[str, Setting]:
    """
    Collect the Setting declarations of a class and its bases.

    Base-class settings come first, then the class's own, each in
    declaration order. A subclass may redeclare an attribute it inherited
    (the subclass wins), but two different attributes may not share a key.

    Returns:
        Settings by storage key

    Raises:
        DuplicateSettingError: If two attributes resolve to the same key
    """
    by_attr: Dict[str, Setting] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, Setting):
                by_attr.pop(attr, None)
                by_attr[attr] = value

    by_key: Dict[str, Setting] = {}
    for attr, setting in by_attr.items():
        existing = by_key.get(setting.key)
        if existing is not None:
            raise DuplicateSettingError(
                f"{cls.__name__}: '{attr}' and '{existing.attr_name}' "
                f"both use key {setting.key!r}"
            )
        by_key[setting.key] = setting

    return by_key


def build_routing_table(settings: Dict[str, Setting]) -> Dict[str, Routing]:
    """Map each storage key to the routing its declaration asks for."""
    return {key: setting.routing for key, setting in settings.items()}
