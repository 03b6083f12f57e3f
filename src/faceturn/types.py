"""Faceturn data types.

Per-frame values (samples, regions) and the detections that flow from
the estimator into the smoother and out to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional

import numpy as np


class Orientation(str, Enum):
    """Head orientation label. NONE means no face region this frame."""

    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    @property
    def display_text(self) -> str:
        if self is Orientation.NONE:
            return "No Face"
        return f"Looking {self.value}"


@dataclass(frozen=True)
class PixelSample:
    """A sampled frame coordinate and its skin-color confidence."""

    x: int
    y: int
    intensity: float


@dataclass
class FaceRegion:
    """Single face-region candidate reduced from one frame's skin samples.

    Sample coordinates are kept as parallel arrays so a frame allocates
    them once; ``pixels`` exposes them as PixelSample objects.

    Attributes:
        center_x: Mean x of qualifying samples (pixels).
        center_y: Mean y of qualifying samples (pixels).
        width: max(x) - min(x) of qualifying samples.
        height: max(y) - min(y) of qualifying samples.
        confidence: Aggregate confidence in [0, 1].
        xs: Sample x coordinates.
        ys: Sample y coordinates.
        intensities: Sample skin scores.
    """

    center_x: float
    center_y: float
    width: float
    height: float
    confidence: float
    xs: np.ndarray = field(repr=False)
    ys: np.ndarray = field(repr=False)
    intensities: np.ndarray = field(repr=False)

    @property
    def sample_count(self) -> int:
        return int(self.xs.size)

    @property
    def pixels(self) -> Iterator[PixelSample]:
        for x, y, v in zip(self.xs.tolist(), self.ys.tolist(), self.intensities.tolist()):
            yield PixelSample(x=int(x), y=int(y), intensity=float(v))

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        """Top-left anchored (x, y, w, h) in pixels."""
        if self.xs.size == 0:
            return (self.center_x, self.center_y, self.width, self.height)
        return (float(self.xs.min()), float(self.ys.min()), self.width, self.height)


@dataclass(frozen=True)
class Detection:
    """Orientation label with confidence at a point in time.

    Used both for the per-frame (instantaneous) estimate and for the
    smoothed result returned to callers.
    """

    orientation: Orientation
    confidence: float
    t_ns: int

    @classmethod
    def none(cls, t_ns: int) -> Detection:
        return cls(orientation=Orientation.NONE, confidence=0.0, t_ns=t_ns)


@dataclass
class FrameResult:
    """Output of FrameAnalyzer.analyze() for one frame.

    Attributes:
        detection: Smoothed detection (the externally visible result).
        region: Face region geometry, or None when no face was found.
        instant: Per-frame estimate before smoothing, or None.
        frame_size: (width, height) of the analyzed frame.
        timing: Per-step processing time in milliseconds.
    """

    detection: Detection
    region: Optional[FaceRegion] = None
    instant: Optional[Detection] = None
    frame_size: tuple[int, int] = (0, 0)
    timing: Optional[Dict[str, float]] = None

    @property
    def orientation(self) -> Orientation:
        return self.detection.orientation

    @property
    def confidence(self) -> float:
        return self.detection.confidence

    @property
    def face_found(self) -> bool:
        return self.region is not None


__all__ = [
    "Orientation",
    "PixelSample",
    "FaceRegion",
    "Detection",
    "FrameResult",
]
