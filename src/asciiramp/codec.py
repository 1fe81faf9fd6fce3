import io
import logging

from PIL import Image, UnidentifiedImageError

from asciiramp.errors import InvalidImage
from asciiramp.model import PixelBuffer

logger = logging.getLogger(__name__)

_MODES = {3: "RGB", 4: "RGBA"}


def from_image(image: Image.Image) -> PixelBuffer:
    """Copy a PIL image into a PixelBuffer, converting to RGB or RGBA."""
    has_alpha = image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info)
    image = image.convert("RGBA" if has_alpha else "RGB")
    return PixelBuffer(
        width=image.width,
        height=image.height,
        channels=len(image.getbands()),
        data=image.tobytes(),
    )


def to_image(buffer: PixelBuffer) -> Image.Image:
    return Image.frombytes(_MODES[buffer.channels], (buffer.width, buffer.height), buffer.data)


class PillowCodec:
    """Decodes anything Pillow can open; encodes PNG."""

    format = "PNG"

    def decode(self, data: bytes) -> PixelBuffer:
        if not data:
            raise InvalidImage()
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                buffer = from_image(image)
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise InvalidImage() from exc
        logger.debug("decoded %dx%d image with %d channels", buffer.width, buffer.height, buffer.channels)
        return buffer

    def encode(self, buffer: PixelBuffer) -> bytes:
        output = io.BytesIO()
        to_image(buffer).save(output, format=self.format)
        return output.getvalue()
