"""Tests for DetectionHistory."""

import pytest

from faceturn.history import DEFAULT_HISTORY_SIZE, DetectionHistory
from faceturn.types import Detection, Orientation


def det(orientation, t_ns, confidence=0.8):
    return Detection(orientation=orientation, confidence=confidence, t_ns=t_ns)


class TestDetectionHistory:
    def test_starts_empty(self):
        history = DetectionHistory()
        assert len(history) == 0
        assert history.recent() == []
        assert history.current.orientation is Orientation.NONE

    def test_bounded_to_ten(self):
        history = DetectionHistory()
        for i in range(25):
            history.record(det(Orientation.LEFT, i))
        assert DEFAULT_HISTORY_SIZE == 10
        assert len(history) == 10
        assert [d.t_ns for d in history.recent()] == list(range(24, 14, -1))

    def test_newest_first(self):
        history = DetectionHistory()
        history.record(det(Orientation.STRAIGHT, 1))
        history.record(det(Orientation.RIGHT, 2))
        assert [d.orientation for d in history.recent()] == [Orientation.RIGHT, Orientation.STRAIGHT]

    def test_none_updates_current_but_is_not_logged(self):
        history = DetectionHistory()
        history.record(det(Orientation.LEFT, 1))
        history.record(Detection.none(2))
        assert len(history) == 1
        assert history.current.orientation is Orientation.NONE
        assert history.current.confidence == 0.0

    def test_clear_resets_current(self):
        history = DetectionHistory()
        history.record(det(Orientation.LEFT, 1))
        history.clear()
        assert len(history) == 0
        assert history.current.orientation is Orientation.NONE

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            DetectionHistory(maxlen=0)
