#!/usr/bin/env python3
"""Command-line interface for winrec.

Usage:
    winrec [ffmpeg arguments...]

Click a window and record it with ffmpeg. winrec interprets no flags; every
argument is appended to the ffmpeg command after the capture options, e.g.

    winrec -framerate 30 -t 10 out.mp4

runs

    ffmpeg -video_size WxH -f x11grab -i :0.0+X,Y -framerate 30 -t 10 out.mp4

Environment:
    WINREC_XWININFO  window-info executable (default: xwininfo)
    WINREC_FFMPEG    recorder executable (default: ffmpeg)
    WINREC_VERBOSE   set to 1/true/yes/on to show progress on stderr
"""

from __future__ import annotations

import os
import sys
from typing import List, Mapping, NamedTuple, Optional

from winrec.errors import WinrecError
from winrec.launcher import launch
from winrec.types import (
    DEFAULT_PROBER,
    DEFAULT_RECORDER,
    ENV_PROBER,
    ENV_RECORDER,
    ENV_VERBOSE,
    EXIT_INTERRUPTED,
)
from winrec.xwininfo import probe

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(NamedTuple):
    """Settings read from the environment."""

    prober: str = DEFAULT_PROBER
    recorder: str = DEFAULT_RECORDER
    verbose: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from environment variables; empty values use defaults."""
    if environ is None:
        environ = os.environ
    return Config(
        prober=environ.get(ENV_PROBER) or DEFAULT_PROBER,
        recorder=environ.get(ENV_RECORDER) or DEFAULT_RECORDER,
        verbose=environ.get(ENV_VERBOSE, "").strip().lower() in _TRUE_VALUES,
    )


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status."""
    if returncode < 0:
        return 128 - returncode  # killed by signal -returncode
    return returncode


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments to forward to the recorder (default: sys.argv[1:]).

    Returns:
        The recorder's exit status, or the exit code of the error that
        stopped the run.
    """
    if argv is None:
        argv = sys.argv[1:]
    config = load_config()

    try:
        rect = probe(config.prober, config.verbose)
        returncode = launch(rect, argv, config.recorder, config.verbose)
    except WinrecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    if config.verbose:
        print(f"Recorder exited with status {returncode}", file=sys.stderr)
    return exit_status(returncode)


if __name__ == "__main__":
    sys.exit(main())
