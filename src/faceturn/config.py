"""Configuration for the faceturn analyzer.

Every threshold used by the pipeline lives on AnalyzerConfig so a
deployment can tune them from a YAML file without code changes.

Example:
    >>> from faceturn.config import AnalyzerConfig
    >>> config = AnalyzerConfig(sample_stride=4, window_ms=800.0)
    >>> config = AnalyzerConfig.from_yaml("faceturn.yaml")
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

NS_PER_MS = 1_000_000


@dataclass
class AnalyzerConfig:
    """Tunable constants for skin sampling, orientation and smoothing.

    Attributes:
        sample_stride: Pixel step in both axes when sampling a frame.
        skin_threshold: Minimum skin score for a sample to count.
        min_samples: Minimum qualifying samples to form a region.
        saturation_samples: Population at which region confidence saturates.
        band_half_width: Half-width (pixels) of the center band around centroid x.
        straight_threshold: Asymmetry below this may be labelled straight.
        turn_threshold: Asymmetry above this is labelled a turn.
        window_ms: Rolling window age cutoff for smoothing.
        decay_ms: Time constant of the exponential recency weight.
    """

    sample_stride: int = 2
    skin_threshold: float = 0.3
    min_samples: int = 50
    saturation_samples: float = 200.0
    band_half_width: float = 20.0
    straight_threshold: float = 0.15
    turn_threshold: float = 0.25
    window_ms: float = 500.0
    decay_ms: float = 200.0

    def __post_init__(self) -> None:
        if self.sample_stride < 1:
            raise ValueError(f"sample_stride must be >= 1, got {self.sample_stride}")
        if self.min_samples < 1:
            raise ValueError(f"min_samples must be >= 1, got {self.min_samples}")
        if self.saturation_samples <= 0:
            raise ValueError("saturation_samples must be positive")
        if self.window_ms <= 0 or self.decay_ms <= 0:
            raise ValueError("window_ms and decay_ms must be positive")
        if self.straight_threshold > self.turn_threshold:
            raise ValueError(
                f"straight_threshold ({self.straight_threshold}) must not exceed "
                f"turn_threshold ({self.turn_threshold})"
            )

    @property
    def window_ns(self) -> int:
        return int(self.window_ms * NS_PER_MS)

    @property
    def decay_ns(self) -> float:
        return self.decay_ms * NS_PER_MS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create AnalyzerConfig from a dictionary (e.g., loaded from YAML).

        Unknown keys are ignored. A nested ``analyzer`` section is accepted
        so the analyzer settings can share a file with other sections.
        """
        section = data.get("analyzer", data) if data else {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in section.items() if k in known}
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "AnalyzerConfig":
        """Load AnalyzerConfig from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """
        import yaml

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["AnalyzerConfig", "NS_PER_MS"]
