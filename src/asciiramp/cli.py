import argparse
import logging
import sys
from pathlib import Path

from asciiramp.charsets import RAMPS
from asciiramp.codec import PillowCodec
from asciiramp.config import FONT_NAME, FONT_SIZE, OUTPUT_FILENAME, TARGET_WIDTH
from asciiramp.converter import to_ascii_grid
from asciiramp.errors import ConversionError
from asciiramp.model import GlyphRamp
from asciiramp.sampling import downsample
from asciiramp.typesetter import load_font, render_text


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=int, default=TARGET_WIDTH, help=f"Output width in columns (default: {TARGET_WIDTH})"
    )
    parser.add_argument(
        "-r", "--ramp", default="reference", choices=sorted(RAMPS), help="Glyph ramp to use (default: reference)"
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const=OUTPUT_FILENAME,
        default=None,
        help=f"Also render the art to a PNG file (default name: {OUTPUT_FILENAME})",
    )
    parser.add_argument("--font", default=FONT_NAME, help=f"Font name or path for PNG output (default: {FONT_NAME})")
    parser.add_argument(
        "--font-size", type=int, default=FONT_SIZE, help=f"Font size for PNG output (default: {FONT_SIZE})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log each conversion stage")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    codec = PillowCodec()
    try:
        source = codec.decode(image_path.read_bytes())
        grid = to_ascii_grid(downsample(source, args.size), GlyphRamp(RAMPS[args.ramp]))
        if args.output is not None:
            rendered = render_text(grid, font=load_font(args.font, args.font_size))
            Path(args.output).write_bytes(codec.encode(rendered))
    except (ConversionError, OSError) as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(grid.text)
