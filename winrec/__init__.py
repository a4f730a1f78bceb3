#!/usr/bin/env python3
"""winrec - record a clicked X11 window with ffmpeg.

xwininfo asks the user to click a window and reports its geometry; ffmpeg
is then started with x11grab on exactly that rectangle.

Public API:
    probe(program, verbose) -> Rectangle
    parse(text) -> Rectangle
    build_args(rect, passthrough) -> List[str]
    launch(rect, passthrough, program, verbose) -> int
    main(argv) -> int

Usage as a library:
    ```python
    from winrec import probe, launch

    rect = probe()
    status = launch(rect, ["-t", "10", "out.mp4"])
    ```

Usage as CLI:
    ```bash
    winrec -t 10 out.mp4
    python -m winrec -t 10 out.mp4
    ```
"""

from __future__ import annotations

from winrec.types import (
    __version__,
    FIELDS,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FIELD_X,
    FIELD_Y,
    Rectangle,
)
from winrec.errors import (
    EncodingError,
    LaunchError,
    MissingFieldError,
    NumberFormatError,
    WinrecError,
)
from winrec.xwininfo import parse, probe
from winrec.launcher import build_args, launch
from winrec.cli import Config, load_config, main

__all__ = [
    "__version__",
    "FIELDS",
    "FIELD_HEIGHT",
    "FIELD_WIDTH",
    "FIELD_X",
    "FIELD_Y",
    "Rectangle",
    "EncodingError",
    "LaunchError",
    "MissingFieldError",
    "NumberFormatError",
    "WinrecError",
    "parse",
    "probe",
    "build_args",
    "launch",
    "Config",
    "load_config",
    "main",
]
