"""Shared pytest fixtures for winrec tests."""

import pytest

# Captured from a real xwininfo run
XWININFO_OUTPUT = """
xwininfo: Please select the window about which you
          would like information by clicking the
          mouse in that window.

xwininfo: Window id: 0xe00021 "Firefox Developer Edition"

  Absolute upper-left X:  3841
  Absolute upper-left Y:  21
  Relative upper-left X:  0
  Relative upper-left Y:  0
  Width: 958
  Height: 1178
  Depth: 24
  Visual: 0x2b
  Visual Class: TrueColor
  Border width: 0
  Class: InputOutput
  Colormap: 0xe00002 (not installed)
  Bit Gravity State: NorthWestGravity
  Window Gravity State: NorthWestGravity
  Backing Store State: NotUseful
  Save Under State: no
  Map State: IsViewable
  Override Redirect State: no
  Corners:  +3841+21  -961+21  -961-961  +3841-961
  -geometry 958x1178+3840+20
"""


@pytest.fixture
def xwininfo_output() -> str:
    """Complete xwininfo report for a 958x1178 window at (3841, 21)."""
    return XWININFO_OUTPUT


@pytest.fixture
def xwininfo_without_position() -> str:
    """xwininfo report with the absolute position lines removed."""
    return "\n".join(
        line for line in XWININFO_OUTPUT.splitlines()
        if "Absolute upper-left" not in line
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove winrec settings from the environment."""
    for name in ("WINREC_XWININFO", "WINREC_FFMPEG", "WINREC_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
