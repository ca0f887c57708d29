# Utility functions
from .metrics import compute_quality_metrics

__all__ = [
    "compute_quality_metrics"
]
