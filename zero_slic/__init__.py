from .config import SegmentationConfig
from .segmentation import segment, superpixel_segmentation
from .io import load_image, read_text_image, write_labels
from .reconstruction import reconstruct_mean_image
from .visualization import plot_superpixels
from .utils import compute_quality_metrics
from .core import Centroid, find_gradients, find_seeds, perturb_seeds, perform_superpixel_segmentation, enforce_connectivity

__all__ = [
    "SegmentationConfig",
    "segment",
    "superpixel_segmentation",
    "load_image",
    "read_text_image",
    "write_labels",
    "reconstruct_mean_image",
    "plot_superpixels",
    "compute_quality_metrics",
    "Centroid",
    "find_gradients",
    "find_seeds",
    "perturb_seeds",
    "perform_superpixel_segmentation",
    "enforce_connectivity"
]


__version__ = '0.1.0'
