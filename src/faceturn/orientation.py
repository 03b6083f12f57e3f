"""Head orientation from left/right asymmetry of a face region.

The region's samples are split into three vertical bands around the
centroid x. A head turned to one side shows more skin on one half of
the region; the asymmetry score combines the population imbalance with
the imbalance of mean skin score between the two halves.

Mirrored convention: a denser left band is reported as RIGHT.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from faceturn.config import AnalyzerConfig
from faceturn.types import FaceRegion, Orientation


@dataclass(frozen=True)
class BandStats:
    """Left/center/right band populations and side mean intensities."""

    left_count: int
    right_count: int
    center_count: int
    left_mean: float
    right_mean: float

    @property
    def density_ratio(self) -> float:
        total = self.left_count + self.right_count
        if total == 0:
            return 0.0
        return abs(self.left_count - self.right_count) / total

    @property
    def intensity_ratio(self) -> float:
        total = self.left_mean + self.right_mean
        if total == 0:
            return 0.0
        return abs(self.left_mean - self.right_mean) / total

    @property
    def asymmetry(self) -> float:
        return (self.density_ratio + self.intensity_ratio) / 2


def _side_mean(values: np.ndarray) -> float:
    # fsum is correctly rounded, so sides with equal scores get bit-equal means.
    if values.size == 0:
        return 0.0
    return math.fsum(values) / values.size


def band_stats(region: FaceRegion, half_width: float) -> BandStats:
    offsets = region.xs - region.center_x
    left = offsets < -half_width
    right = offsets > half_width
    left_count = int(np.count_nonzero(left))
    right_count = int(np.count_nonzero(right))

    return BandStats(
        left_count=left_count,
        right_count=right_count,
        center_count=region.sample_count - left_count - right_count,
        left_mean=_side_mean(region.intensities[left]),
        right_mean=_side_mean(region.intensities[right]),
    )


class OrientationEstimator:
    """Instantaneous orientation label for a single face region."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self._config = config or AnalyzerConfig()

    def estimate(self, region: FaceRegion) -> Tuple[Orientation, float]:
        stats = band_stats(region, self._config.band_half_width)
        return self.classify(stats), min(region.confidence, 1.0)

    def classify(self, stats: BandStats) -> Orientation:
        cfg = self._config
        asymmetry = stats.asymmetry
        larger_side = max(stats.left_count, stats.right_count)

        if asymmetry < cfg.straight_threshold and stats.center_count > larger_side / 2:
            return Orientation.STRAIGHT
        if asymmetry > cfg.turn_threshold:
            if stats.left_count > stats.right_count:
                return Orientation.RIGHT
            return Orientation.LEFT
        # Dead zone between the thresholds stays straight.
        return Orientation.STRAIGHT


__all__ = ["BandStats", "OrientationEstimator", "band_stats"]
