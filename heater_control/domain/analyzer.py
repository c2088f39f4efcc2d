from __future__ import annotations

import numpy as np

from .errors import CalibrationError, DecodeFailure
from .models import Region, Threshold

CHANNELS = 3


def decode_frame(raw: bytes, width: int, height: int) -> np.ndarray:
    """Interpret packed 8-bit RGB bytes as a (height, width, 3) array."""
    expected = width * height * CHANNELS
    try:
        buf = np.frombuffer(raw, dtype=np.uint8)
    except (TypeError, ValueError) as e:
        raise DecodeFailure(f"Malformed frame buffer: {e}") from e
    if buf.size != expected:
        raise DecodeFailure(
            f"Frame size mismatch: got {buf.size} bytes, expected {expected} "
            f"({width}x{height} rgb)"
        )
    return buf.reshape((height, width, CHANNELS))


def validate_region(region: Region, width: int, height: int, name: str = "region") -> None:
    if region.width <= 0 or region.height <= 0:
        raise CalibrationError(f"{name}: zero-area region {region}")
    if region.x < 0 or region.y < 0:
        raise CalibrationError(f"{name}: negative origin {region}")
    if region.x + region.width > width or region.y + region.height > height:
        raise CalibrationError(f"{name}: {region} outside {width}x{height} image")


def region_mean(image: np.ndarray, region: Region) -> tuple[int, int, int]:
    """Integer (floor) mean of each channel across the region."""
    view = image[region.y:region.y + region.height, region.x:region.x + region.width]
    pixels = view.reshape(-1, CHANNELS)
    sums = pixels.sum(axis=0, dtype=np.uint64)
    count = pixels.shape[0]
    r, g, b = (int(s) // count for s in sums)
    return r, g, b


def exceeds(mean: tuple[int, int, int], threshold: Threshold) -> bool:
    # every channel must be strictly above its minimum
    return all(m > t for m, t in zip(mean, threshold.as_tuple()))


def region_is_on(image: np.ndarray, region: Region, threshold: Threshold) -> bool:
    return exceeds(region_mean(image, region), threshold)
