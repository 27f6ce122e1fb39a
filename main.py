#!/usr/bin/env python3
"""
appsettings - demo entry point.

Runs the console demo without installing the package.
"""

import sys

from appsettings.demo import main


if __name__ == "__main__":
    sys.exit(main())
