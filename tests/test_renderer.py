"""Tests for marks and render_marks()."""

import numpy as np
import pytest

from faceturn.marks import ORIENTATION_COLORS, BarMark, BBoxMark, DrawStyle, LabelMark
from faceturn.renderer import render_marks


@pytest.fixture
def blank_frame():
    """640x480 black frame."""
    return np.zeros((480, 640, 3), dtype=np.uint8)


class TestMarkTypes:
    def test_bbox_mark_frozen(self):
        mark = BBoxMark(x=0.1, y=0.2, w=0.3, h=0.4)
        with pytest.raises(AttributeError):
            mark.x = 0.5  # type: ignore[misc]

    def test_defaults(self):
        assert BBoxMark(x=0, y=0, w=1, h=1).confidence == 1.0
        assert BarMark(x=0, y=0, w=1, value=0.5).height_px == 6
        assert LabelMark(text="a", x=0, y=0).background is None

    def test_orientation_colors_cover_all_labels(self):
        assert set(ORIENTATION_COLORS) == {"straight", "left", "right", "none"}
        assert ORIENTATION_COLORS["left"] == ORIENTATION_COLORS["right"]


class TestRenderMarks:
    def test_empty_marks_returns_same_frame(self, blank_frame):
        assert render_marks(blank_frame, []) is blank_frame

    def test_does_not_modify_input(self, blank_frame):
        render_marks(blank_frame, [BBoxMark(x=0.1, y=0.1, w=0.3, h=0.3, color=(0, 255, 0))])
        assert np.all(blank_frame == 0)

    def test_bbox_with_label(self, blank_frame):
        marks = [BBoxMark(x=0.1, y=0.1, w=0.3, h=0.3, label="left", confidence=0.7)]
        result = render_marks(blank_frame, marks)
        assert not np.array_equal(result, blank_frame)

    def test_bar_fill(self, blank_frame):
        marks = [BarMark(x=0.1, y=0.5, w=0.3, value=0.7, color=(0, 255, 255))]
        result = render_marks(blank_frame, marks)
        assert result[int(0.5 * 480) + 2, int(0.1 * 640) + 5].tolist() == [0, 255, 255]

    def test_label_with_background(self, blank_frame):
        marks = [LabelMark(text="No Face", x=0.1, y=0.1, background=(160, 160, 160))]
        result = render_marks(blank_frame, marks)
        assert not np.array_equal(result, blank_frame)

    def test_style_color_override(self, blank_frame):
        marks = [BarMark(x=0.1, y=0.5, w=0.3, value=1.0, color=(0, 255, 255))]
        result = render_marks(blank_frame, marks, style=DrawStyle(color=(255, 0, 0)))
        assert result[int(0.5 * 480) + 2, int(0.1 * 640) + 5].tolist() == [255, 0, 0]
