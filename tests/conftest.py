import os
import shutil
import subprocess

import numpy as np
import pytest

from asciiramp.model import PixelBuffer

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    if shutil.which("fc-match"):
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()


def _solid(width, height, colour, channels=None):
    """PixelBuffer filled with one colour; channels defaults to len(colour)."""
    channels = channels or len(colour)
    arr = np.empty((height, width, channels), dtype=np.uint8)
    arr[:, :] = colour[:channels]
    return PixelBuffer.from_array(arr)


@pytest.fixture
def font_path():
    if FONT_PATH is None:
        pytest.skip("No monospace font found on system")
    return FONT_PATH


@pytest.fixture
def make_buffer():
    return _solid
