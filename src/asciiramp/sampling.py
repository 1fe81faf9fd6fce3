import logging

import numpy as np

from asciiramp.config import LUMA_WEIGHTS, QUANTIZATION_DIVISOR
from asciiramp.errors import InvalidImage, RenderFailure
from asciiramp.model import PixelBuffer

logger = logging.getLogger(__name__)


def target_height(width: int, height: int, target_width: int) -> int:
    """Aspect-correct height for target_width, truncated rather than rounded."""
    return int(float(height) * float(target_width) / float(width))


def _nearest_indices(source_size: int, target_size: int) -> np.ndarray:
    """Source index sampled by each output index under uniform scaling."""
    centres = (np.arange(target_size, dtype=np.float64) + 0.5) * source_size / target_size
    return np.minimum(centres.astype(np.intp), source_size - 1)


def _premultiplied_rgba(arr: np.ndarray) -> np.ndarray:
    if arr.shape[2] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        return np.concatenate([arr, alpha], axis=2)
    alpha = arr[:, :, 3:].astype(np.uint32)
    rgb = (arr[:, :, :3].astype(np.uint32) * alpha + 127) // 255
    return np.concatenate([rgb.astype(np.uint8), arr[:, :, 3:]], axis=2)


def downsample(source: PixelBuffer, target_width: int) -> PixelBuffer:
    """Nearest-neighbour resample to target_width columns.

    The result is always 4-channel RGBA with premultiplied alpha, whatever
    the source layout. No averaging of neighbouring source pixels happens.

    Raises:
        InvalidImage: the source has no pixels, or target_width is not positive
        RenderFailure: the scaled image would have no rows
    """
    if source.is_empty or not source.data:
        raise InvalidImage(f"Cannot downsample a {source.width}x{source.height} image")
    if target_width <= 0:
        raise InvalidImage(f"Target width must be positive, got {target_width}")

    new_height = target_height(source.width, source.height, target_width)
    if new_height <= 0:
        raise RenderFailure(f"Scaling {source.width}x{source.height} to width {target_width} leaves no rows")

    arr = source.as_array()
    rows = _nearest_indices(source.height, new_height)
    cols = _nearest_indices(source.width, target_width)
    scaled = arr[rows[:, None], cols[None, :]]

    logger.debug("downsampled %dx%d to %dx%d", source.width, source.height, target_width, new_height)
    return PixelBuffer.from_array(_premultiplied_rgba(scaled))


def luminance(arr: np.ndarray) -> np.ndarray:
    """BT.601 luma of each pixel from its first three channels. Alpha is ignored."""
    rgb = arr[..., :3].astype(np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]


def quantize(gray: np.ndarray, levels: int) -> np.ndarray:
    """Map gray values to ramp indices, clamping to the last index."""
    indices = (gray * levels / QUANTIZATION_DIVISOR).astype(np.intp)
    return np.minimum(indices, levels - 1)
