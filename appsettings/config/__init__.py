"""
Configuration management for appsettings.

This module provides the settings accessor base class and its defaults.
"""

from .defaults import ROAMING_ENABLED_KEY, ROAMING_ENABLED_DEFAULT
from .settings import AppConfigBase

__all__ = ["AppConfigBase", "ROAMING_ENABLED_KEY", "ROAMING_ENABLED_DEFAULT"]
