from dataclasses import dataclass

from asciiramp.charsets import REFERENCE

TARGET_WIDTH = 100

# ITU-R BT.601 luma weights for R, G, B
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Not 255: white only reaches the last ramp entry when the ramp is long enough
QUANTIZATION_DIVISOR = 256.0

FONT_NAME = "Menlo-Regular"
FALLBACK_FONT_FAMILY = "monospace"
FONT_SIZE = 10

TEXT_COLOUR = (255, 255, 255)
BACKGROUND_COLOUR = (0, 0, 0)

OUTPUT_FILENAME = "ascii_art.png"


@dataclass(frozen=True)
class ConversionOptions:
    width: int = TARGET_WIDTH
    ramp: str = REFERENCE
    font_name: str = FONT_NAME
    font_size: int = FONT_SIZE
