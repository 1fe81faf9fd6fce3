from __future__ import annotations

from typing import Protocol, Sequence

from PIL import Image, ImageFont

from asciiramp.model import PixelBuffer


class ImageCodec(Protocol):
    def decode(self, data: bytes) -> PixelBuffer:
        """Decode encoded image bytes into pixels."""
        ...

    def encode(self, buffer: PixelBuffer) -> bytes:
        """Encode pixels into image bytes."""
        ...


class TextShaper(Protocol):
    def measure(self, lines: Sequence[str], font: ImageFont.FreeTypeFont) -> tuple[float, float]:
        """Return the (width, height) bounding box of the text block."""
        ...

    def draw(self, lines: Sequence[str], font: ImageFont.FreeTypeFont, canvas: Image.Image) -> None:
        """Draw the text block onto the canvas, top-left aligned."""
        ...
