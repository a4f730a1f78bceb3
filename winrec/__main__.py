#!/usr/bin/env python3
"""Entry point for running winrec as a module.

This allows the package to be invoked with:
    python -m winrec [ffmpeg arguments]
"""

import sys

from winrec.cli import main

if __name__ == "__main__":
    sys.exit(main())
