"""Tests for AnalyzerConfig."""

import pytest

from faceturn.config import AnalyzerConfig


class TestDefaults:
    def test_defaults(self):
        config = AnalyzerConfig()
        assert config.sample_stride == 2
        assert config.skin_threshold == 0.3
        assert config.min_samples == 50
        assert config.saturation_samples == 200.0
        assert config.band_half_width == 20.0
        assert config.straight_threshold == 0.15
        assert config.turn_threshold == 0.25
        assert config.window_ms == 500.0
        assert config.decay_ms == 200.0

    def test_nanosecond_views(self):
        config = AnalyzerConfig()
        assert config.window_ns == 500_000_000
        assert config.decay_ns == 200_000_000


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"sample_stride": 0},
        {"min_samples": 0},
        {"saturation_samples": 0},
        {"window_ms": 0},
        {"decay_ms": -1},
        {"straight_threshold": 0.3, "turn_threshold": 0.2},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            AnalyzerConfig(**kwargs)


class TestSerialization:
    def test_from_dict(self):
        config = AnalyzerConfig.from_dict({"sample_stride": 4, "window_ms": 800})
        assert config.sample_stride == 4
        assert config.window_ms == 800

    def test_from_dict_nested_section(self):
        config = AnalyzerConfig.from_dict({"analyzer": {"min_samples": 100}, "other": {}})
        assert config.min_samples == 100

    def test_from_dict_ignores_unknown_keys(self):
        config = AnalyzerConfig.from_dict({"fps": 30, "decay_ms": 150.0})
        assert config.decay_ms == 150.0

    def test_from_empty_dict(self):
        assert AnalyzerConfig.from_dict({}) == AnalyzerConfig()

    def test_to_dict_roundtrip(self):
        config = AnalyzerConfig(band_half_width=30.0)
        assert AnalyzerConfig.from_dict(config.to_dict()) == config

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "faceturn.yaml"
        path.write_text("analyzer:\n  sample_stride: 3\n  turn_threshold: 0.3\n")
        config = AnalyzerConfig.from_yaml(str(path))
        assert config.sample_stride == 3
        assert config.turn_threshold == 0.3

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert AnalyzerConfig.from_yaml(str(path)) == AnalyzerConfig()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AnalyzerConfig.from_yaml(str(tmp_path / "missing.yaml"))
