"""faceturn - skin-color head orientation estimation for liveness prompts.

Classifies whether the dominant face in a video frame looks straight,
left or right from raw RGB pixels, smoothed over a short time window.

Quick Start:
    >>> from faceturn import FrameAnalyzer
    >>> analyzer = FrameAnalyzer()
    >>> result = analyzer.analyze(rgb_bytes, 640, 480)
    >>> print(f"{result.orientation.value}: {result.confidence:.2f}")
"""

from faceturn.types import (
    Orientation,
    PixelSample,
    FaceRegion,
    Detection,
    FrameResult,
)
from faceturn.config import AnalyzerConfig
from faceturn.color import skin_score, skin_scores
from faceturn.frame import FrameFormatError
from faceturn.region import RegionAggregator
from faceturn.orientation import OrientationEstimator
from faceturn.smoothing import TemporalSmoother
from faceturn.analyzer import FrameAnalyzer
from faceturn.history import DetectionHistory

__all__ = [
    "FrameAnalyzer",
    "RegionAggregator",
    "OrientationEstimator",
    "TemporalSmoother",
    "DetectionHistory",
    "AnalyzerConfig",
    "FrameFormatError",
    "Orientation",
    "PixelSample",
    "FaceRegion",
    "Detection",
    "FrameResult",
    "skin_score",
    "skin_scores",
]
