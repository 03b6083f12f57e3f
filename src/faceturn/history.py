"""Bounded log of recent smoothed detections for status displays."""

from collections import deque
from typing import Deque, List

from faceturn.types import Detection, Orientation

DEFAULT_HISTORY_SIZE = 10


class DetectionHistory:
    """Keeps the last ``maxlen`` detections, oldest evicted first.

    Also tracks the currently displayed detection; ``clear()`` resets both,
    mirroring a status panel's "Reset History" action.
    """

    def __init__(self, maxlen: int = DEFAULT_HISTORY_SIZE):
        if maxlen < 1:
            raise ValueError(f"maxlen must be >= 1, got {maxlen}")
        self._entries: Deque[Detection] = deque(maxlen=maxlen)
        self._current = Detection.none(0)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def current(self) -> Detection:
        return self._current

    def record(self, detection: Detection) -> None:
        """Show ``detection``; only face detections are logged."""
        self._current = detection
        if detection.orientation is not Orientation.NONE:
            self._entries.append(detection)

    def recent(self) -> List[Detection]:
        """Entries newest first."""
        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries.clear()
        self._current = Detection.none(0)


__all__ = ["DetectionHistory", "DEFAULT_HISTORY_SIZE"]
