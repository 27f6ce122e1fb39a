"""Shared test setup."""

import os

# Lets pytest-qt create its QApplication on machines without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
