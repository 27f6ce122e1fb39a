"""
Console demo for appsettings.

Shows a small configuration class, where each of its settings is stored,
and lets you change values and the roaming toggle from the command line:

    appsettings-demo
    appsettings-demo --set theme=dark --set font_size=12
    appsettings-demo --roaming off
    appsettings-demo --memory
"""

import argparse
import logging
import sys
from typing import Any, List, Optional, Tuple

from PySide6.QtCore import QCoreApplication

from . import __version__
from .config import AppConfigBase
from .core import ApplicationData, Setting, set_application_data
from .utils import setup_logging

logger = logging.getLogger(__name__)


class DemoConfig(AppConfigBase):
    """Settings used by the demo."""

    theme = Setting("light")
    font_size = Setting(10, key="FontSize")
    device_id = Setting(value_type=str, local=True, key="DeviceId")
    show_tips = Setting(True, local=True)


def parse_assignment(config: AppConfigBase, text: str) -> Tuple[str, Any]:
    """
    Parse ``name=value`` into a storage key and a typed value.

    ``name`` may be the attribute name or the storage key. Values are
    converted to the declared type of the setting.

    Raises:
        ValueError: If the text is malformed, the setting is unknown, or
            the value can't be converted
    """
    name, sep, raw = text.partition("=")
    if not sep or not name:
        raise ValueError(f"Expected NAME=VALUE, got {text!r}")

    setting = None
    for candidate in config.declared_settings().values():
        if name in (candidate.key, candidate.attr_name):
            setting = candidate
            break
    if setting is None:
        raise ValueError(f"Unknown setting: {name}")

    return setting.key, _convert(raw, setting.value_type)


def _convert(raw: str, value_type: Optional[type]) -> Any:
    if value_type is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "on", "yes", "1"):
            return True
        if lowered in ("false", "off", "no", "0"):
            return False
        raise ValueError(f"Not a boolean: {raw!r}")
    if value_type in (int, float):
        return value_type(raw)
    return raw


def format_settings(config: AppConfigBase) -> List[str]:
    """One line per declared setting: key, tier and current value."""
    lines = []
    for key, setting in config.declared_settings().items():
        tier = "local" if setting.is_local else "roaming"
        value = config.get_value(key, setting.default, setting.value_type)
        lines.append(f"{key:<16} {tier:<8} {value!r}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appsettings-demo",
        description="Show and change settings stored in local/roaming stores.",
    )
    parser.add_argument(
        "--set", dest="assignments", action="append", default=[],
        metavar="NAME=VALUE", help="Change a setting (repeatable)",
    )
    parser.add_argument(
        "--roaming", choices=("on", "off"),
        help="Turn the roaming toggle on or off",
    )
    parser.add_argument(
        "--memory", action="store_true",
        help="Use in-memory stores instead of the settings files",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the appsettings demo."""
    args = build_parser().parse_args(argv)

    setup_logging(
        log_level="DEBUG" if args.debug else "INFO",
        log_file=False,
        console_level="DEBUG" if args.debug else "WARNING",
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("appsettings-demo")
    app.setOrganizationName("appsettings")

    if args.memory:
        set_application_data(ApplicationData.in_memory())
    DemoConfig.reset_instance()
    config = DemoConfig.instance()
    config.property_changed.connect(lambda key: logger.info(f"Setting changed: {key}"))

    if args.roaming:
        config.roaming_enabled = args.roaming == "on"

    for text in args.assignments:
        try:
            key, value = parse_assignment(config, text)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        if not config.set_value(key, value):
            print(f"Error: could not store {key}", file=sys.stderr)
            return 1

    for line in format_settings(config):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
