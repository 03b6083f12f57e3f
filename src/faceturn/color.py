"""Skin-color scoring from three color-space heuristics.

A pixel's skin score is the maximum over independent RGB, YCbCr and HSV
rules, so any single model firing is enough. Scores are fixed per rule:

    RGB   -> 0.8
    YCbCr -> 0.9
    HSV   -> 0.7

Example:
    >>> skin_score(200, 150, 120)
    0.9
    >>> scores = skin_scores(frame[::2, ::2, :3])
"""

import numpy as np

RGB_SCORE = 0.8
YCBCR_SCORE = 0.9
HSV_SCORE = 0.7


def _rgb_rule(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    return (
        (r > 95) & (g > 40) & (b > 20)
        & ((mx - mn) > 15)
        & (np.abs(r - g) > 15)
        & (r > g) & (r > b)
    )


def _ycbcr_rule(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    y = 0.299 * r + 0.587 * g + 0.114 * b
    cb = -0.169 * r - 0.331 * g + 0.5 * b + 128
    cr = 0.5 * r - 0.419 * g - 0.081 * b + 128
    return (y > 80) & (cb >= 77) & (cb <= 127) & (cr >= 133) & (cr <= 173)


def rgb_to_hsv(r: np.ndarray, g: np.ndarray, b: np.ndarray):
    """Convert RGB (0-255) to hue in degrees [0, 360), saturation and value in [0, 1]."""
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    safe_delta = np.where(delta > 0, delta, 1.0)

    hue = np.select(
        [delta == 0, mx == r, mx == g],
        [
            0.0,
            60.0 * np.mod((g - b) / safe_delta, 6.0),
            60.0 * ((b - r) / safe_delta + 2.0),
        ],
        default=60.0 * ((r - g) / safe_delta + 4.0),
    )
    sat = np.where(mx > 0, delta / np.where(mx > 0, mx, 1.0), 0.0)
    val = mx / 255.0
    return hue, sat, val


def _hsv_rule(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    h, s, v = rgb_to_hsv(r, g, b)
    return (
        (h >= 0) & (h <= 50)
        & (s >= 0.23) & (s <= 0.68)
        & (v >= 0.35) & (v <= 0.95)
    )


def skin_scores(pixels: np.ndarray) -> np.ndarray:
    """Score every pixel of an ``(..., 3)`` RGB array.

    Args:
        pixels: Array whose last axis is (r, g, b) in 0-255.

    Returns:
        float64 array of shape ``pixels.shape[:-1]`` with values in
        {0.0, 0.7, 0.8, 0.9}.
    """
    rgb = np.asarray(pixels, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    scores = np.zeros(rgb.shape[:-1], dtype=np.float64)
    scores = np.where(_rgb_rule(r, g, b), np.maximum(scores, RGB_SCORE), scores)
    scores = np.where(_ycbcr_rule(r, g, b), np.maximum(scores, YCBCR_SCORE), scores)
    scores = np.where(_hsv_rule(r, g, b), np.maximum(scores, HSV_SCORE), scores)
    return scores


def skin_score(r: int, g: int, b: int) -> float:
    """Skin-color confidence in [0, 1] for a single pixel."""
    return float(skin_scores(np.array([r, g, b], dtype=np.float64)))


__all__ = ["skin_score", "skin_scores", "rgb_to_hsv"]
