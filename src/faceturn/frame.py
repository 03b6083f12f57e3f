"""Frame buffer normalization.

Callers hand over either a raw RGB/RGBA byte buffer with its dimensions
or an ``(H, W, C)`` uint8 array. Both are turned into an array view
without copying pixel data.
"""

from typing import Optional, Union

import numpy as np

FrameBuffer = Union[bytes, bytearray, memoryview, np.ndarray]

_CHANNELS = (3, 4)


class FrameFormatError(ValueError):
    """Buffer length or shape does not match the declared frame dimensions."""


def as_rgb_array(
    frame: FrameBuffer,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> np.ndarray:
    """Return an ``(H, W, C)`` uint8 view of ``frame``.

    Args:
        frame: Raw RGB(A) buffer or an (H, W, 3|4) array.
        width: Frame width. Required for raw buffers.
        height: Frame height. Required for raw buffers.

    Raises:
        FrameFormatError: Dimensions are negative, missing, or disagree
            with the buffer, or array pixels are not uint8.
    """
    if isinstance(frame, np.ndarray):
        return _check_array(frame, width, height)

    if width is None or height is None:
        raise FrameFormatError("width and height are required for raw buffers")
    if width < 0 or height < 0:
        raise FrameFormatError(f"negative frame size {width}x{height}")

    flat = np.frombuffer(frame, dtype=np.uint8)
    n_pixels = width * height
    if n_pixels == 0:
        if flat.size:
            raise FrameFormatError(
                f"buffer of {flat.size} bytes for an empty {width}x{height} frame"
            )
        return flat.reshape(height, width, 3)

    for channels in _CHANNELS:
        if flat.size == n_pixels * channels:
            return flat.reshape(height, width, channels)

    raise FrameFormatError(
        f"buffer of {flat.size} bytes does not match {width}x{height} "
        f"RGB ({n_pixels * 3}) or RGBA ({n_pixels * 4})"
    )


def _check_array(
    frame: np.ndarray,
    width: Optional[int],
    height: Optional[int],
) -> np.ndarray:
    if frame.ndim != 3 or frame.shape[2] not in _CHANNELS:
        raise FrameFormatError(f"expected (H, W, 3|4) array, got shape {frame.shape}")
    h, w = frame.shape[:2]
    if (width is not None and width != w) or (height is not None and height != h):
        raise FrameFormatError(
            f"array shape {w}x{h} does not match declared {width}x{height}"
        )
    if frame.dtype != np.uint8:
        raise FrameFormatError(f"expected uint8 pixels, got {frame.dtype}")
    return frame


__all__ = ["FrameBuffer", "FrameFormatError", "as_rgb_array"]
