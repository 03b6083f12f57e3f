"""Mark renderer: draws overlay marks onto BGR frames using cv2.

All rendering is done on a copy of the input frame.

Example:
    >>> from faceturn.renderer import render_marks
    >>> output = render_marks(frame_bgr, analyzer.annotate(result))
"""

from __future__ import annotations

import cv2
import numpy as np

from faceturn.marks import BarMark, BBoxMark, DrawStyle, LabelMark, Mark

FONT = cv2.FONT_HERSHEY_SIMPLEX


def render_marks(
    frame: np.ndarray,
    marks: list[Mark],
    style: DrawStyle | None = None,
) -> np.ndarray:
    """Render a list of marks onto a frame.

    Args:
        frame: BGR image (H, W, 3). A copy is made internally.
        marks: Mark objects from FrameAnalyzer.annotate().
        style: Optional style overrides.

    Returns:
        Annotated frame (copy), or ``frame`` itself when there are no marks.
    """
    if not marks:
        return frame

    output = frame.copy()
    h, w = output.shape[:2]

    for mark in marks:
        if isinstance(mark, BBoxMark):
            _render_bbox(output, mark, w, h, style)
        elif isinstance(mark, BarMark):
            _render_bar(output, mark, w, h, style)
        elif isinstance(mark, LabelMark):
            _render_label(output, mark, w, h, style)

    return output


def _resolve_color(
    mark_color: tuple[int, int, int] | None,
    style: DrawStyle | None,
    default: tuple[int, int, int] = (255, 255, 255),
) -> tuple[int, int, int]:
    """Resolve color: style override > mark color > default."""
    if style and style.color is not None:
        return style.color
    if mark_color is not None:
        return mark_color
    return default


def _render_bbox(
    image: np.ndarray,
    mark: BBoxMark,
    w: int,
    h: int,
    style: DrawStyle | None,
) -> None:
    x1 = int(mark.x * w)
    y1 = int(mark.y * h)
    x2 = int((mark.x + mark.w) * w)
    y2 = int((mark.y + mark.h) * h)

    color = _resolve_color(mark.color, style, (0, 255, 0))
    thickness = style.thickness if style and style.thickness is not None else mark.thickness
    cv2.rectangle(image, (x1, y1), (x2, y2), color, thickness)

    show_labels = style.show_labels if style else True
    if not (mark.label and show_labels):
        return

    font_scale = style.font_scale if style and style.font_scale is not None else 0.45
    label = mark.label
    show_conf = style.show_confidence if style else True
    if show_conf and mark.confidence < 1.0:
        label = f"{label} {mark.confidence:.0%}"

    label_size = cv2.getTextSize(label, FONT, font_scale, 1)[0]
    label_y = y1 - 5 if y1 > 25 else y2 + 15
    cv2.rectangle(
        image,
        (x1, label_y - label_size[1] - 4),
        (x1 + label_size[0] + 4, label_y + 2),
        color,
        -1,
    )
    cv2.putText(image, label, (x1 + 2, label_y - 2), FONT, font_scale, (20, 20, 20), 1)


def _render_bar(
    image: np.ndarray,
    mark: BarMark,
    w: int,
    h: int,
    style: DrawStyle | None,
) -> None:
    x = int(mark.x * w)
    y = int(mark.y * h)
    bar_w = int(mark.w * w)
    color = _resolve_color(mark.color, style, (0, 255, 255))
    fill = min(1.0, max(0.0, mark.value))

    cv2.rectangle(image, (x, y), (x + bar_w, y + mark.height_px), (20, 20, 20), -1)
    if fill > 0:
        cv2.rectangle(image, (x, y), (x + int(bar_w * fill), y + mark.height_px), color, -1)


def _render_label(
    image: np.ndarray,
    mark: LabelMark,
    w: int,
    h: int,
    style: DrawStyle | None,
) -> None:
    x = int(mark.x * w)
    y = int(mark.y * h)
    font_scale = style.font_scale if style and style.font_scale is not None else mark.font_scale
    color = _resolve_color(mark.color, style, (255, 255, 255))

    if mark.background is not None:
        label_size = cv2.getTextSize(mark.text, FONT, font_scale, 1)[0]
        cv2.rectangle(
            image,
            (x - 2, y - label_size[1] - 4),
            (x + label_size[0] + 4, y + 4),
            mark.background,
            -1,
        )

    cv2.putText(image, mark.text, (x, y), FONT, font_scale, color, 1)


__all__ = ["render_marks"]
