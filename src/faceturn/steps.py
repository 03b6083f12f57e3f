"""Processing step registry and timing for the frame analyzer."""

import time
from dataclasses import dataclass
from functools import wraps
from typing import List, Optional


@dataclass
class ProcessingStep:
    """Describes a single processing step within the analyzer.

    Attributes:
        name: Short identifier for the step (e.g., "skin_regions").
        description: Human-readable description of what this step does.
        input_type: Description of input data type.
        output_type: Description of output data type.
        method_name: Name of the method implementing this step.
    """

    name: str
    description: str
    input_type: str = "Any"
    output_type: str = "Any"
    method_name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"


def processing_step(
    name: str,
    description: str = "",
    input_type: str = "Any",
    output_type: str = "Any",
):
    """Decorator to register a method as a processing step.

    When the owning instance has a ``_step_timings`` dict (not None), the
    elapsed time of each call is stored under ``name`` in milliseconds.

    Example:
        class FrameAnalyzer:
            @processing_step("skin_regions", description="Sample skin pixels")
            def _aggregate(self, image):
                return self._aggregator.aggregate_array(image)
    """

    def decorator(func):
        step_info = ProcessingStep(
            name=name,
            description=description or func.__doc__ or "",
            input_type=input_type,
            output_type=output_type,
            method_name=func.__name__,
        )

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            timings = getattr(self, "_step_timings", None)
            if timings is None:
                return func(self, *args, **kwargs)
            start = time.perf_counter_ns()
            result = func(self, *args, **kwargs)
            timings[name] = (time.perf_counter_ns() - start) / 1_000_000
            return result

        wrapper._step_info = step_info
        return wrapper

    return decorator


def get_processing_steps(cls_or_instance) -> List[ProcessingStep]:
    """Get registered processing steps in definition order."""
    cls = cls_or_instance if isinstance(cls_or_instance, type) else type(cls_or_instance)
    steps = {}
    for klass in reversed(cls.__mro__):
        for attr in vars(klass).values():
            info = getattr(attr, "_step_info", None)
            if info is not None:
                steps[info.name] = info
    return list(steps.values())


__all__ = ["ProcessingStep", "processing_step", "get_processing_steps"]
