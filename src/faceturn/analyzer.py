"""Frame analyzer - skin region, orientation and smoothing per frame.

Runs the full per-frame pipeline:

    skin_regions -> orientation -> smoothing

and returns the smoothed orientation together with the region geometry
for overlay drawing.

Frames without a usable skin region report ``Orientation.NONE`` with
zero confidence and leave the smoothing window untouched, so a brief
loss of the face does not pull the consensus toward NONE.

Example:
    >>> analyzer = FrameAnalyzer()
    >>> result = analyzer.analyze(rgb_bytes, 640, 480)
    >>> print(result.orientation.value, f"{result.confidence:.0%}")
    >>> marks = analyzer.annotate(result)
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional

import numpy as np

from faceturn.config import AnalyzerConfig
from faceturn.frame import FrameBuffer, as_rgb_array
from faceturn.marks import ORIENTATION_COLORS, BarMark, BBoxMark, LabelMark, Mark
from faceturn.orientation import OrientationEstimator
from faceturn.region import RegionAggregator
from faceturn.smoothing import TemporalSmoother
from faceturn.steps import ProcessingStep, get_processing_steps, processing_step
from faceturn.types import Detection, FaceRegion, FrameResult

logger = logging.getLogger(__name__)


class FrameAnalyzer:
    """Per-stream orientation analyzer.

    One instance per video stream: the smoothing window is instance
    state and calls must be serialized by the caller.

    Args:
        config: Analyzer configuration (defaults if omitted).
        clock: Nanosecond clock used when ``analyze`` gets no timestamp.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        self._config = config or AnalyzerConfig()
        self._clock = clock
        self._aggregator = RegionAggregator(self._config)
        self._estimator = OrientationEstimator(self._config)
        self._smoother = TemporalSmoother(self._config)
        # Step timing tracking (populated by @processing_step)
        self._step_timings: Optional[Dict[str, float]] = None

    @property
    def name(self) -> str:
        return "face.orientation"

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    @property
    def smoother(self) -> TemporalSmoother:
        return self._smoother

    @property
    def processing_steps(self) -> List[ProcessingStep]:
        return get_processing_steps(self)

    def reset(self) -> None:
        """Drop smoothing state, e.g. when the stream restarts."""
        self._smoother.reset()
        logger.info("FrameAnalyzer reset")

    # ========== Processing Steps (decorated methods) ==========

    @processing_step(
        name="skin_regions",
        description="Sample pixels, score skin color, reduce to one region",
        input_type="RGB(A) image",
        output_type="Optional[FaceRegion]",
    )
    def _aggregate(self, image: np.ndarray) -> Optional[FaceRegion]:
        return self._aggregator.aggregate_array(image)

    @processing_step(
        name="orientation",
        description="Left/right band asymmetry to orientation label",
        input_type="FaceRegion",
        output_type="Detection (instantaneous)",
    )
    def _estimate(self, region: FaceRegion, t_ns: int) -> Detection:
        orientation, confidence = self._estimator.estimate(region)
        return Detection(orientation=orientation, confidence=confidence, t_ns=t_ns)

    @processing_step(
        name="smoothing",
        description="Recency-weighted vote over the rolling window",
        input_type="Detection (instantaneous)",
        output_type="Detection (smoothed)",
    )
    def _smooth(self, instant: Detection, t_ns: int) -> Detection:
        return self._smoother.fold(instant, t_ns)

    # ========== Main process method ==========

    def analyze(
        self,
        frame: FrameBuffer,
        width: Optional[int] = None,
        height: Optional[int] = None,
        t_ns: Optional[int] = None,
    ) -> FrameResult:
        """Analyze one frame.

        Args:
            frame: Raw RGB(A) buffer or (H, W, 3|4) uint8 array.
            width: Frame width (required for raw buffers).
            height: Frame height (required for raw buffers).
            t_ns: Frame timestamp in nanoseconds; defaults to the clock.

        Returns:
            FrameResult with the smoothed detection and region geometry.

        Raises:
            FrameFormatError: Buffer does not match the declared dimensions.
        """
        image = as_rgb_array(frame, width, height)
        if t_ns is None:
            t_ns = self._clock()
        frame_size = (int(image.shape[1]), int(image.shape[0]))

        self._step_timings = {}
        try:
            region = self._aggregate(image) if image.size else None
            if region is None:
                return FrameResult(
                    detection=Detection.none(t_ns),
                    frame_size=frame_size,
                    timing=dict(self._step_timings),
                )

            instant = self._estimate(region, t_ns)
            smoothed = self._smooth(instant, t_ns)
            logger.debug(
                "Frame %s: instant=%s(%.2f) smoothed=%s(%.2f) window=%d",
                t_ns,
                instant.orientation.value,
                instant.confidence,
                smoothed.orientation.value,
                smoothed.confidence,
                len(self._smoother),
            )
            return FrameResult(
                detection=smoothed,
                region=region,
                instant=instant,
                frame_size=frame_size,
                timing=dict(self._step_timings),
            )
        finally:
            self._step_timings = None

    def annotate(self, result: FrameResult) -> List[Mark]:
        """Overlay marks: region box, orientation label and confidence bar."""
        orientation = result.orientation
        color = ORIENTATION_COLORS[orientation.value]
        label = LabelMark(
            text=orientation.display_text,
            x=0.02,
            y=0.06,
            color=(255, 255, 255),
            background=color,
        )
        region = result.region
        frame_w, frame_h = result.frame_size
        if region is None or frame_w == 0 or frame_h == 0:
            return [label]

        bx, by, bw, bh = region.bbox
        x, y = bx / frame_w, by / frame_h
        w, h = bw / frame_w, bh / frame_h
        return [
            BBoxMark(
                x=x, y=y, w=w, h=h,
                label=orientation.value,
                color=color,
                confidence=result.confidence,
            ),
            BarMark(
                x=x, y=min(y + h + 0.02, 0.98), w=w,
                value=result.confidence,
                color=color,
            ),
            label,
        ]


__all__ = ["FrameAnalyzer"]
