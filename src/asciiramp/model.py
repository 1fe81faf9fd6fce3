from dataclasses import dataclass

import numpy as np

from asciiramp.charsets import REFERENCE
from asciiramp.errors import InvalidImage

CHANNEL_LAYOUTS = (3, 4)


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major, top-to-bottom pixels with R,G,B[,A] byte order."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self):
        if self.channels not in CHANNEL_LAYOUTS:
            raise InvalidImage(f"Unsupported channel count: {self.channels}")
        if self.width < 0 or self.height < 0:
            raise InvalidImage(f"Negative dimensions: {self.width}x{self.height}")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise InvalidImage(f"Expected {expected} bytes of pixel data, got {len(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def bytes_per_pixel(self) -> int:
        return self.channels

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, channels) uint8 view of the pixel data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, self.channels)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelBuffer":
        if arr.ndim != 3:
            raise InvalidImage(f"Expected a (height, width, channels) array, got shape {arr.shape}")
        height, width, channels = arr.shape
        data = np.ascontiguousarray(arr, dtype=np.uint8).tobytes()
        return cls(width=width, height=height, channels=channels, data=data)


@dataclass(frozen=True)
class GlyphRamp:
    """Characters ordered from darkest-looking to lightest-looking."""

    chars: str

    def __post_init__(self):
        if not self.chars:
            raise ValueError("Glyph ramp must contain at least one character")

    def __len__(self) -> int:
        return len(self.chars)

    def char_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"Negative ramp index: {index}")
        return self.chars[min(index, len(self.chars) - 1)]


@dataclass(frozen=True)
class AsciiGrid:
    rows: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise ValueError(f"Rows have differing lengths: {sorted(widths)}")
        if any("\n" in row for row in self.rows):
            raise ValueError("Rows must not contain line breaks")

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def text(self) -> str:
        """Every row followed by a line break."""
        return "".join(row + "\n" for row in self.rows)

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_text(cls, text: str) -> "AsciiGrid":
        if text.endswith("\n"):
            text = text[:-1]
        return cls(rows=tuple(text.split("\n")) if text else ())


REFERENCE_RAMP = GlyphRamp(REFERENCE)
