"""Recency-weighted temporal smoothing of per-frame detections.

Each stream owns one TemporalSmoother. Detections older than the window
are evicted on every fold; the remaining ones vote with weight
``exp(-age / decay)`` scaled by their confidence.

Example:
    >>> smoother = TemporalSmoother()
    >>> smoothed = smoother.fold(Detection(Orientation.LEFT, 0.9, t0), now_ns=t0)
    >>> smoothed.orientation, smoothed.confidence
    (<Orientation.LEFT: 'left'>, 0.9)
"""

import logging
import math
from collections import deque
from typing import Deque, Dict, Optional, Tuple

from faceturn.config import AnalyzerConfig
from faceturn.types import Detection, Orientation

logger = logging.getLogger(__name__)

# Equal weighted scores resolve to the earliest entry here.
TIE_BREAK_ORDER = (
    Orientation.STRAIGHT,
    Orientation.LEFT,
    Orientation.RIGHT,
    Orientation.NONE,
)


class TemporalSmoother:
    """Rolling-window consensus over instantaneous detections.

    Not thread-safe: callers serialize folds per stream.

    Args:
        config: Analyzer configuration supplying ``window_ms`` and ``decay_ms``.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        cfg = config or AnalyzerConfig()
        self._window_ns = cfg.window_ns
        self._decay_ns = cfg.decay_ns
        self._window: Deque[Detection] = deque()

    def __len__(self) -> int:
        return len(self._window)

    @property
    def window(self) -> Tuple[Detection, ...]:
        return tuple(self._window)

    def reset(self) -> None:
        self._window.clear()

    def fold(self, detection: Detection, now_ns: int) -> Detection:
        """Add a detection and return the current consensus at ``now_ns``."""
        self._window.append(detection)
        self._evict(now_ns)
        return self._vote(now_ns)

    def _evict(self, now_ns: int) -> None:
        if all(now_ns - d.t_ns < self._window_ns for d in self._window):
            return
        kept = [d for d in self._window if now_ns - d.t_ns < self._window_ns]
        logger.debug("Evicted %d stale detections", len(self._window) - len(kept))
        self._window = deque(kept)

    def _vote(self, now_ns: int) -> Detection:
        if not self._window:
            return Detection.none(now_ns)

        scores: Dict[Orientation, float] = {o: 0.0 for o in TIE_BREAK_ORDER}
        total_weight = 0.0
        for entry in self._window:
            age = max(now_ns - entry.t_ns, 0)
            weight = math.exp(-age / self._decay_ns)
            scores[entry.orientation] += weight * entry.confidence
            total_weight += weight

        winner = max(TIE_BREAK_ORDER, key=lambda o: scores[o])
        if scores[winner] <= 0 or total_weight <= 0:
            # No entry carries any confidence.
            return Detection.none(now_ns)
        confidence = min(scores[winner] / total_weight, 1.0)
        return Detection(orientation=winner, confidence=confidence, t_ns=now_ns)


__all__ = ["TemporalSmoother", "TIE_BREAK_ORDER"]
