# Core segmentation stages
from .grid import Grid
from .gradients import find_gradients
from .seeds import Centroid, find_seeds, perturb_seeds
from .clustering import search_window, assign_labels, update_max_intensity_diff, update_centroids, perform_superpixel_segmentation
from .connectivity import min_superpixel_size, find_adjacent_label, flood_component, enforce_connectivity

__all__ = [
    "Grid",
    "find_gradients",
    "Centroid",
    "find_seeds",
    "perturb_seeds",
    "search_window",
    "assign_labels",
    "update_max_intensity_diff",
    "update_centroids",
    "perform_superpixel_segmentation",
    "min_superpixel_size",
    "find_adjacent_label",
    "flood_component",
    "enforce_connectivity"
]
