# Module: segmentation.py
import logging

import numpy as np

from .config import SegmentationConfig
from .core.gradients import find_gradients
from .core.seeds import find_seeds, perturb_seeds
from .core.clustering import perform_superpixel_segmentation
from .core.connectivity import enforce_connectivity

logger = logging.getLogger(__name__)


def segment(image, width, height, desired_clusters, config=None):
    """Zero-parameter SLIC superpixels of a single-channel image.

    Parameters:
        image : array_like
            ``width * height`` non-negative intensities, row-major. Not modified.
        width, height : int
            Image dimensions, both positive.
        desired_clusters : int
            Requested number of superpixels, at least 1. Fewer may be produced.
        config : SegmentationConfig, optional

    Returns:
        labels : ndarray of int
            Flat row-major labels; every id is a 4-connected region.
    """
    config = config or SegmentationConfig()
    image = np.asarray(image).ravel()

    gradients = find_gradients(image, width, height)
    seeds = find_seeds(image, width, height, desired_clusters,
                       config.initial_max_intensity_diff)
    seeds = perturb_seeds(gradients, image, width, height, seeds)
    raw_labels = perform_superpixel_segmentation(image, width, height, seeds,
                                                 desired_clusters, config)
    labels = enforce_connectivity(image, raw_labels, width, height,
                                  desired_clusters, config.min_size_shift)

    logger.info("Segmented %dx%d image into %d superpixels (%d requested, %d seeds)",
                width, height, int(labels.max()) + 1, desired_clusters, len(seeds))
    return labels


def superpixel_segmentation(image, n_segments=100, config=None):
    """Apply zero-parameter SLIC to a 2D grayscale image, returning a 2D label map."""
    image = np.asarray(image)
    height, width = image.shape
    labels = segment(image.ravel(), width, height, n_segments, config)
    return labels.reshape(height, width)
