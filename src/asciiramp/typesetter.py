import logging
import math
import os
import shutil
import subprocess
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from asciiramp.config import BACKGROUND_COLOUR, FALLBACK_FONT_FAMILY, FONT_NAME, FONT_SIZE, TEXT_COLOUR
from asciiramp.engine import TextShaper
from asciiramp.errors import RenderFailure
from asciiramp.model import AsciiGrid, PixelBuffer

logger = logging.getLogger(__name__)


def _match_font(pattern: str) -> str | None:
    """Ask fontconfig for the file of the best font matching a pattern."""
    if shutil.which("fc-match") is None:
        return None
    result = subprocess.run(["fc-match", "-f", "%{file}", pattern], capture_output=True, text=True)
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


def _candidate_paths(name: str):
    if os.path.exists(name):
        yield name
    for pattern in (name, FALLBACK_FONT_FAMILY):
        path = _match_font(pattern)
        if path is not None:
            yield path


def load_font(name: str = FONT_NAME, size: int = FONT_SIZE) -> ImageFont.FreeTypeFont:
    """Load a monospace font by path or fontconfig name.

    Falls back to the generic monospace family, then to Pillow's built-in
    font at the same size.

    Raises:
        RenderFailure: size is not positive
    """
    if size <= 0:
        raise RenderFailure(f"Font size must be positive, got {size}")
    for path in _candidate_paths(name):
        try:
            font = ImageFont.truetype(path, size)
        except OSError:
            logger.debug("could not load font file %s", path)
            continue
        logger.debug("using font %s at size %d", path, size)
        return font
    logger.debug("no font found for %r, using Pillow's default", name)
    return ImageFont.load_default(size=size)


class PillowShaper:
    """Lays out one grid row per line at the font's natural line height."""

    def line_height(self, font: ImageFont.FreeTypeFont) -> int:
        ascent, descent = font.getmetrics()
        return ascent + descent

    def measure(self, lines: Sequence[str], font: ImageFont.FreeTypeFont) -> tuple[float, float]:
        width = max((font.getlength(line) for line in lines), default=0.0)
        return width, float(len(lines) * self.line_height(font))

    def draw(self, lines: Sequence[str], font: ImageFont.FreeTypeFont, canvas: Image.Image) -> None:
        draw = ImageDraw.Draw(canvas)
        step = self.line_height(font)
        for i, line in enumerate(lines):
            draw.text((0, i * step), line, fill=TEXT_COLOUR, font=font)


def render_text(
    grid: AsciiGrid,
    font: ImageFont.FreeTypeFont | None = None,
    shaper: TextShaper | None = None,
) -> PixelBuffer:
    """Rasterize a grid as white text on a black canvas sized to fit it exactly.

    Raises:
        RenderFailure: the text has no area, or the canvas cannot be allocated
    """
    if font is None:
        font = load_font()
    if shaper is None:
        shaper = PillowShaper()

    lines = list(grid.rows)
    width, height = shaper.measure(lines, font)
    size = (math.ceil(width), math.ceil(height))
    if size[0] <= 0 or size[1] <= 0:
        raise RenderFailure(f"Text bounding box is degenerate: {width}x{height}")

    try:
        canvas = Image.new("RGB", size, BACKGROUND_COLOUR)
    except (ValueError, MemoryError, OverflowError) as exc:
        raise RenderFailure(f"Could not allocate a {size[0]}x{size[1]} canvas") from exc

    shaper.draw(lines, font, canvas)
    logger.debug("rendered %dx%d grid to %dx%d image", grid.width, grid.height, *size)
    return PixelBuffer(width=size[0], height=size[1], channels=3, data=canvas.tobytes())
