"""Shared fixtures for faceturn tests.

All frames are synthetic RGB arrays - NO camera needed.
"""

import numpy as np
import pytest

SKIN_RGB = (200, 150, 120)
BACKGROUND_RGB = (30, 30, 30)


@pytest.fixture
def make_frame():
    """Factory fixture: background frame with skin-colored rectangles.

    ``blocks`` are ``(x, y, w, h)`` rectangles in pixels.
    """
    def _make(width=100, height=100, blocks=(), color=SKIN_RGB, background=BACKGROUND_RGB):
        frame = np.empty((height, width, 3), dtype=np.uint8)
        frame[:] = background
        for x, y, w, h in blocks:
            frame[y:y + h, x:x + w] = color
        return frame
    return _make


@pytest.fixture
def centered_face(make_frame):
    """40x40 skin block in the middle of a 100x100 frame."""
    return make_frame(blocks=[(30, 30, 40, 40)])


@pytest.fixture
def left_face(make_frame):
    """40x40 skin block left of center (x 10..49, y 30..69)."""
    return make_frame(blocks=[(10, 30, 40, 40)])


@pytest.fixture
def lopsided_face(make_frame):
    """Skin mass lopsided about its own centroid.

    A dense 20x40 block on the far left plus a thin 2x80 strip on the
    far right of a 200x100 frame. Stride-2 sampling gives 200 left
    samples and 40 right samples around a centroid at x~39.
    """
    return make_frame(width=200, height=100, blocks=[(0, 20, 20, 40), (190, 10, 2, 80)])
