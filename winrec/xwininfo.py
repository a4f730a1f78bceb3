#!/usr/bin/env python3
"""Window geometry from xwininfo.

xwininfo blocks until the user clicks a window, then prints a report
like the following (abridged):

    xwininfo: Window id: 0xe00021 "Firefox Developer Edition"

      Absolute upper-left X:  3841
      Absolute upper-left Y:  21
      Relative upper-left X:  0
      Relative upper-left Y:  0
      Width: 958
      Height: 1178
      Depth: 24
      Border width: 0
      Corners:  +3841+21  -961+21  -961-961  +3841-961
      -geometry 958x1178+3840+20

Only the absolute position and the size are used.
"""

from __future__ import annotations

import re
import subprocess
import sys
from typing import Dict, Optional

from winrec.errors import EncodingError, LaunchError, MissingFieldError, NumberFormatError
from winrec.types import (
    DEFAULT_PROBER,
    FIELDS,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FIELD_X,
    FIELD_Y,
    Rectangle,
)

# int() alone would also accept "1_000" and non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(field: str, value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise NumberFormatError(field, value)
    return int(value)


def parse(text: str) -> Rectangle:
    """Parse window geometry from xwininfo output.

    Every line is stripped and compared against the labels in FIELDS order;
    the first label the line starts with wins. If a label appears on more
    than one line, the last occurrence is used.

    Args:
        text: Full standard output of xwininfo.

    Returns:
        The window's absolute position and size.

    Raises:
        NumberFormatError: A matched line's value is not a base-10 integer.
            Raised as soon as the line is seen.
        MissingFieldError: A label never matched. Fields are checked in
            FIELDS order and only the first missing one is reported.
    """
    values: Dict[str, Optional[int]] = {field: None for field in FIELDS}

    for line in text.splitlines():
        line = line.strip()
        for field in FIELDS:
            if line.startswith(field):
                values[field] = _parse_int(field, line[len(field):].strip())
                break

    for field in FIELDS:
        if values[field] is None:
            raise MissingFieldError(field)

    return Rectangle(
        x=values[FIELD_X],
        y=values[FIELD_Y],
        width=values[FIELD_WIDTH],
        height=values[FIELD_HEIGHT],
    )


def probe(program: str = DEFAULT_PROBER, verbose: bool = False) -> Rectangle:
    """Let the user click a window and return its geometry.

    Runs the window-info utility with no arguments and waits, without a
    timeout, for it to exit. Its stderr is left attached to the terminal.

    Args:
        program: Window-info executable (default: xwininfo).
        verbose: Whether to print progress messages.

    Returns:
        Geometry of the selected window.

    Raises:
        LaunchError: The utility could not be started.
        EncodingError: Its output is not valid UTF-8.
        NumberFormatError, MissingFieldError: See parse().
    """
    if verbose:
        print("Click on the window you want to record...", file=sys.stderr)

    try:
        result = subprocess.run([program], stdout=subprocess.PIPE)
    except OSError as e:
        raise LaunchError(program, e) from e

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(program, e) from e

    rect = parse(text)
    if verbose:
        print(f"Selected: {rect.width}x{rect.height} at ({rect.x}, {rect.y})",
              file=sys.stderr)
    return rect
