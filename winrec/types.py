#!/usr/bin/env python3
"""Shared types and constants for the winrec package.

Type Definitions:
    Rectangle: Absolute position and size of the selected window

Constants:
    __version__: Package version string
    FIELD_X, FIELD_Y, FIELD_WIDTH, FIELD_HEIGHT: xwininfo labels
    FIELDS: The labels in the order they are checked
    DEFAULT_PROBER, DEFAULT_RECORDER: External executables
    EXIT_*: Process exit codes for each error kind
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

# ============================================================================
# VERSION AND METADATA
# ============================================================================

__version__ = "1.0.0"

# ============================================================================
# XWININFO OUTPUT LABELS
# ============================================================================

FIELD_X: str = "Absolute upper-left X:"
FIELD_Y: str = "Absolute upper-left Y:"
FIELD_WIDTH: str = "Width:"
FIELD_HEIGHT: str = "Height:"

# Lines are matched and missing fields reported in this order.
FIELDS: Tuple[str, ...] = (FIELD_X, FIELD_Y, FIELD_WIDTH, FIELD_HEIGHT)

# ============================================================================
# EXTERNAL PROGRAMS
# ============================================================================

DEFAULT_PROBER: str = "xwininfo"
DEFAULT_RECORDER: str = "ffmpeg"

CAPTURE_FORMAT: str = "x11grab"
CAPTURE_DISPLAY: str = ":0.0"  # display 0, screen 0

# Environment variables read by the CLI
ENV_PROBER: str = "WINREC_XWININFO"
ENV_RECORDER: str = "WINREC_FFMPEG"
ENV_VERBOSE: str = "WINREC_VERBOSE"

# ============================================================================
# EXIT CODES
# ============================================================================

EXIT_LAUNCH_ERROR: int = 127  # same as a shell's "command not found"
EXIT_ENCODING_ERROR: int = 3
EXIT_NUMBER_FORMAT_ERROR: int = 4
EXIT_MISSING_FIELD_ERROR: int = 5
EXIT_INTERRUPTED: int = 130

# ============================================================================
# TYPE DEFINITIONS
# ============================================================================


class Rectangle(NamedTuple):
    """Absolute screen geometry of a window.

    x and y may be negative on multi-monitor setups. Width and height are
    taken as reported; nothing here checks they are positive.
    """

    x: int
    y: int
    width: int
    height: int
