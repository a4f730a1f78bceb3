#!/usr/bin/env python3
"""Start ffmpeg capturing a screen rectangle through x11grab."""

from __future__ import annotations

import subprocess
import sys
from typing import List, Sequence

from winrec.errors import LaunchError
from winrec.types import CAPTURE_DISPLAY, CAPTURE_FORMAT, DEFAULT_RECORDER, Rectangle


def build_args(rect: Rectangle, passthrough: Sequence[str] = ()) -> List[str]:
    """Build recorder arguments for capturing rect.

    Returns:
        ["-video_size", "WxH", "-f", "x11grab", "-i", ":0.0+X,Y"] followed
        by passthrough unchanged.
    """
    return [
        "-video_size", f"{rect.width}x{rect.height}",
        "-f", CAPTURE_FORMAT,
        "-i", f"{CAPTURE_DISPLAY}+{rect.x},{rect.y}",
        *passthrough,
    ]


def launch(rect: Rectangle, passthrough: Sequence[str] = (),
           program: str = DEFAULT_RECORDER, verbose: bool = False) -> int:
    """Run the recorder on rect and wait for it to finish.

    Standard streams are inherited so the recorder's console (e.g. 'q' to
    stop) works as usual.

    Args:
        rect: Region to capture.
        passthrough: Extra recorder arguments, appended in order.
        program: Recorder executable (default: ffmpeg).
        verbose: Whether to print the command before running it.

    Returns:
        The recorder's return code, uninterpreted. Negative if it was
        killed by a signal.

    Raises:
        LaunchError: The recorder could not be started.
    """
    cmd = [program, *build_args(rect, passthrough)]

    if verbose:
        print(f"Starting: {' '.join(cmd)}", file=sys.stderr)

    try:
        proc = subprocess.Popen(cmd)
    except OSError as e:
        raise LaunchError(program, e) from e

    # subprocess.call() would kill the child on Ctrl-C. The terminal sends
    # the same SIGINT to ffmpeg, which then finalizes the output file.
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            if verbose:
                print("\nWaiting for recorder to finish...", file=sys.stderr)
