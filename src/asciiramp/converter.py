import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from asciiramp.codec import PillowCodec, from_image
from asciiramp.config import TARGET_WIDTH, ConversionOptions
from asciiramp.engine import ImageCodec, TextShaper
from asciiramp.model import REFERENCE_RAMP, AsciiGrid, GlyphRamp, PixelBuffer
from asciiramp.sampling import downsample, luminance, quantize
from asciiramp.typesetter import load_font, render_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    grid: AsciiGrid
    png: bytes


def to_ascii_grid(buffer: PixelBuffer, ramp: GlyphRamp = REFERENCE_RAMP) -> AsciiGrid:
    """Map each pixel to one ramp character by its luminance.

    Row 0 of the buffer becomes the first row of the grid.
    """
    indices = quantize(luminance(buffer.as_array()), len(ramp))
    return AsciiGrid(rows=tuple("".join(ramp.char_at(i) for i in row) for row in indices.tolist()))


def _load_buffer(image: Image.Image | PixelBuffer | bytes | str | Path, codec: ImageCodec) -> PixelBuffer:
    if isinstance(image, PixelBuffer):
        return image
    if isinstance(image, bytes):
        return codec.decode(image)
    if isinstance(image, Image.Image):
        return from_image(image)
    return codec.decode(Path(image).read_bytes())


def image_to_ascii(
    image: Image.Image | PixelBuffer | bytes | str | Path,
    width: int = TARGET_WIDTH,
    ramp: GlyphRamp = REFERENCE_RAMP,
) -> str:
    buffer = _load_buffer(image, PillowCodec())
    return to_ascii_grid(downsample(buffer, width), ramp).text


def convert(
    data: bytes,
    options: ConversionOptions | None = None,
    codec: ImageCodec | None = None,
    shaper: TextShaper | None = None,
) -> ConversionResult:
    """Run a full request: decode, downsample, map to glyphs, render and encode.

    Any InvalidImage or RenderFailure from a stage propagates as is; no
    partial result is returned.
    """
    options = options or ConversionOptions()
    codec = codec or PillowCodec()

    source = codec.decode(data)
    grid = to_ascii_grid(downsample(source, options.width), GlyphRamp(options.ramp))
    logger.debug("built %dx%d ascii grid", grid.width, grid.height)

    font = load_font(options.font_name, options.font_size)
    rendered = render_text(grid, font=font, shaper=shaper)
    return ConversionResult(grid=grid, png=codec.encode(rendered))


def render_ascii_art(
    data: bytes,
    options: ConversionOptions | None = None,
    codec: ImageCodec | None = None,
    shaper: TextShaper | None = None,
) -> bytes:
    """Encoded image bytes in, PNG of the rendered ASCII art out."""
    return convert(data, options=options, codec=codec, shaper=shaper).png
