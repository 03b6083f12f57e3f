"""Reduce a frame's skin-colored samples to one face-region candidate."""

import logging
from typing import Optional

import numpy as np

from faceturn.color import skin_scores
from faceturn.config import AnalyzerConfig
from faceturn.frame import FrameBuffer, as_rgb_array
from faceturn.types import FaceRegion

logger = logging.getLogger(__name__)


class RegionAggregator:
    """Samples a frame on a regular grid and summarizes skin pixels.

    Every ``sample_stride``-th pixel in both axes is scored; samples above
    ``skin_threshold`` form the population. Fewer than ``min_samples``
    qualifying samples means no region. Only one region is produced per
    frame; several faces merge into a single candidate.

    Args:
        config: Analyzer configuration (defaults if omitted).

    Example:
        >>> aggregator = RegionAggregator()
        >>> region = aggregator.aggregate(rgb_bytes, 640, 480)
        >>> if region is not None:
        ...     print(region.center_x, region.confidence)
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self._config = config or AnalyzerConfig()

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def aggregate(
        self,
        frame: FrameBuffer,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> Optional[FaceRegion]:
        image = as_rgb_array(frame, width, height)
        if image.size == 0:
            return None
        return self.aggregate_array(image)

    def aggregate_array(self, image: np.ndarray) -> Optional[FaceRegion]:
        """Aggregate an already validated ``(H, W, C)`` array."""
        cfg = self._config
        stride = cfg.sample_stride

        sampled = image[::stride, ::stride, :3]
        scores = skin_scores(sampled)
        mask = scores > cfg.skin_threshold

        row_idx, col_idx = np.nonzero(mask)
        count = int(row_idx.size)
        if count < cfg.min_samples:
            logger.debug("Skin population %d below floor %d", count, cfg.min_samples)
            return None

        xs = col_idx * stride
        ys = row_idx * stride
        intensities = scores[row_idx, col_idx]

        mean_intensity = float(intensities.mean())
        confidence = min(mean_intensity * (count / cfg.saturation_samples), 1.0)

        return FaceRegion(
            center_x=float(xs.mean()),
            center_y=float(ys.mean()),
            width=float(xs.max() - xs.min()),
            height=float(ys.max() - ys.min()),
            confidence=confidence,
            xs=xs,
            ys=ys,
            intensities=intensities,
        )


__all__ = ["RegionAggregator"]
