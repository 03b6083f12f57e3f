"""Declarative overlay mark types.

Marks describe *what* to draw, not *how*. The renderer interprets marks
and produces pixels; a web or GUI front-end can consume them instead.

All Mark types are frozen dataclasses, comparable with ``==``.
Positions are normalized [0, 1]; colors are BGR.

Example:
    >>> marks = [
    ...     BBoxMark(x=0.3, y=0.2, w=0.2, h=0.3, label="straight", color=ORIENTATION_COLORS["straight"]),
    ...     BarMark(x=0.3, y=0.55, w=0.2, value=0.87),
    ... ]
"""

from dataclasses import dataclass

# Green for straight, blue for a turn, gray when no face.
ORIENTATION_COLORS: dict[str, tuple[int, int, int]] = {
    "straight": (129, 185, 16),
    "left": (246, 130, 59),
    "right": (246, 130, 59),
    "none": (160, 160, 160),
}


@dataclass(frozen=True)
class DrawStyle:
    """Caller-level overrides applied by the renderer."""

    color: tuple[int, int, int] | None = None
    thickness: int | None = None
    font_scale: float | None = None
    show_labels: bool = True
    show_confidence: bool = True


@dataclass(frozen=True)
class BBoxMark:
    """Bounding box."""

    x: float
    y: float
    w: float
    h: float
    label: str = ""
    color: tuple[int, int, int] | None = None
    thickness: int = 3
    confidence: float = 1.0


@dataclass(frozen=True)
class BarMark:
    """Progress bar."""

    x: float
    y: float
    w: float
    value: float  # [0, 1] fill ratio
    color: tuple[int, int, int] = (0, 255, 255)
    height_px: int = 6
    label: str = ""


@dataclass(frozen=True)
class LabelMark:
    """Text label."""

    text: str
    x: float
    y: float
    color: tuple[int, int, int] = (255, 255, 255)
    background: tuple[int, int, int] | None = None
    font_scale: float = 0.5


Mark = BBoxMark | BarMark | LabelMark

__all__ = [
    "ORIENTATION_COLORS",
    "DrawStyle",
    "Mark",
    "BBoxMark",
    "BarMark",
    "LabelMark",
]
