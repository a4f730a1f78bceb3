#!/usr/bin/env python3
"""Error types raised while probing window geometry or launching the recorder.

Each class maps to one failure kind and carries the context needed to print
a precise message, plus the exit code the CLI terminates with.
"""

from __future__ import annotations

from winrec.types import (
    EXIT_ENCODING_ERROR,
    EXIT_LAUNCH_ERROR,
    EXIT_MISSING_FIELD_ERROR,
    EXIT_NUMBER_FORMAT_ERROR,
)


class WinrecError(Exception):
    """Base class for all winrec failures."""

    exit_code: int = 1


class LaunchError(WinrecError):
    """An external program could not be started."""

    exit_code = EXIT_LAUNCH_ERROR

    def __init__(self, program: str, error: OSError) -> None:
        self.program = program
        self.error = error
        reason = error.strerror or str(error) or type(error).__name__
        super().__init__(f"Could not start {program}: {reason}")


class EncodingError(WinrecError, ValueError):
    """Output of the window-info utility was not valid UTF-8 text."""

    exit_code = EXIT_ENCODING_ERROR

    def __init__(self, program: str, error: UnicodeDecodeError) -> None:
        self.program = program
        self.error = error
        super().__init__(f"Output of {program} is not valid UTF-8: {error}")


class NumberFormatError(WinrecError, ValueError):
    """A matched geometry field did not hold a base-10 integer."""

    exit_code = EXIT_NUMBER_FORMAT_ERROR

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid integer for `{field}' field: {value!r}")


class MissingFieldError(WinrecError, ValueError):
    """A required geometry field never appeared in the output."""

    exit_code = EXIT_MISSING_FIELD_ERROR

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Lack of `{field}' field")
