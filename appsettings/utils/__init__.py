"""
Utility functions for appsettings.
"""

from .logger import setup_logging, get_log_dir
from .validators import validate_setting_key

__all__ = ["setup_logging", "get_log_dir", "validate_setting_key"]
