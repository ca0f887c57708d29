# Module: config.py
from dataclasses import dataclass


@dataclass
class SegmentationConfig:
    """Tunables of the zero-parameter SLIC pipeline."""

    # Clustering rounds, no convergence check
    max_iter: int = 10

    # Seed value of each centroid's adaptive intensity normalization
    initial_max_intensity_diff: float = 100.0

    # Search window: offset = step * scale when step < threshold, else step
    small_step_threshold: int = 10
    small_step_window_scale: float = 1.5

    # Connectivity: min_size = (W * H // K) >> min_size_shift
    min_size_shift: int = 2

    def __post_init__(self):
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter}")
        if self.initial_max_intensity_diff <= 0:
            raise ValueError(
                "initial_max_intensity_diff must be positive, "
                f"got {self.initial_max_intensity_diff}"
            )
