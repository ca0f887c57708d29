# Module: clustering.py
import logging
import math
from dataclasses import replace

import numpy as np

from ..config import SegmentationConfig

logger = logging.getLogger(__name__)


def search_window(width, height, n_superpixels, config=None):
    """Return ``(step, offset)`` of the assignment pass.

    ``step`` is the expected superpixel side plus two pixels of slack and
    ``offset`` the half-size of the window searched around each centroid.
    """
    config = config or SegmentationConfig()
    step = int(math.sqrt(width * height / n_superpixels) + 2.0)
    if step < config.small_step_threshold:
        offset = int(step * config.small_step_window_scale)
    else:
        offset = step
    return step, offset


def _window_bounds(centroid, offset, width, height):
    ly = int(max(0.0, centroid.y - offset))
    uy = int(min(float(height), centroid.y + offset))
    lx = int(max(0.0, centroid.x - offset))
    ux = int(min(float(width), centroid.x + offset))
    return ly, uy, lx, ux


def assign_labels(image, width, height, centroids, n_superpixels,
                  labels, dists, intensity_dists, config=None):
    """Assign every pixel within reach to its nearest centroid.

    ``labels``, ``dists`` and ``intensity_dists`` are flat arrays updated in
    place. ``dists`` is reset to infinity first; a pixel changes owner only
    on a strictly smaller distance, so on ties the lowest centroid index
    wins. Pixels outside every window keep their previous label.
    """
    img = np.asarray(image, dtype=np.float64).reshape(height, width)
    label_grid = labels.reshape(height, width)
    dist_grid = dists.reshape(height, width)
    intensity_grid = intensity_dists.reshape(height, width)

    step, offset = search_window(width, height, n_superpixels, config)
    spatial_weight = 1.0 / (step * step)

    dist_grid.fill(np.inf)

    for index, centroid in enumerate(centroids):
        ly, uy, lx, ux = _window_bounds(centroid, offset, width, height)
        if ly >= uy or lx >= ux:
            continue

        ys = np.arange(ly, uy, dtype=np.float64)[:, None]
        xs = np.arange(lx, ux, dtype=np.float64)[None, :]
        intensity_dist = (img[ly:uy, lx:ux] - centroid.intensity) ** 2
        spatial_dist = (ys - centroid.y) ** 2 + (xs - centroid.x) ** 2
        dist = intensity_dist / centroid.max_intensity_diff + spatial_dist * spatial_weight

        closer = dist < dist_grid[ly:uy, lx:ux]
        dist_grid[ly:uy, lx:ux][closer] = dist[closer]
        intensity_grid[ly:uy, lx:ux][closer] = intensity_dist[closer]
        label_grid[ly:uy, lx:ux][closer] = index

    return labels


def update_max_intensity_diff(labels, intensity_dists, centroids):
    """Raise each centroid's normalization term to the largest squared
    intensity distance recorded among its pixels. Never lowers it."""
    maxima = np.array([c.max_intensity_diff for c in centroids], dtype=np.float64)
    np.maximum.at(maxima, labels, intensity_dists)
    for centroid, value in zip(centroids, maxima):
        centroid.max_intensity_diff = float(value)
    return centroids


def update_centroids(labels, image, width, height, centroids):
    """Move every centroid to the mean position and intensity of its pixels.

    An empty cluster is divided by one, which sends it to the origin with
    zero intensity.
    """
    n = len(centroids)
    img = np.asarray(image, dtype=np.float64).ravel()
    ys, xs = np.divmod(np.arange(width * height), width)

    counts = np.bincount(labels, minlength=n)[:n]
    counts = np.maximum(counts, 1)
    sum_intensity = np.bincount(labels, weights=img, minlength=n)[:n]
    sum_x = np.bincount(labels, weights=xs, minlength=n)[:n]
    sum_y = np.bincount(labels, weights=ys, minlength=n)[:n]

    for i, centroid in enumerate(centroids):
        centroid.intensity = float(sum_intensity[i] / counts[i])
        centroid.x = float(sum_x[i] / counts[i])
        centroid.y = float(sum_y[i] / counts[i])
    return centroids


def perform_superpixel_segmentation(image, width, height, seeds, n_superpixels,
                                    config=None, callback=None):
    """Iterate assignment, normalization update and centroid update.

    Parameters:
        image : array_like
            Flat row-major intensities.
        seeds : list of Centroid
            Initial centroids; copied, the caller's list is left untouched.
        n_superpixels : int
            Requested superpixel count, sets the search window size.
        config : SegmentationConfig, optional
        callback : callable, optional
            Called as ``callback(iteration, centroids)`` after each round.

    Returns:
        labels : ndarray of int
            Flat raw label field, values index into ``seeds``. All zeros
            when ``seeds`` is empty.
    """
    config = config or SegmentationConfig()
    centroids = [replace(seed) for seed in seeds]
    size = width * height

    labels = np.zeros(size, dtype=np.intp)
    if not centroids:
        logger.debug("No seeds fit a %dx%d image, skipping clustering", width, height)
        return labels

    dists = np.full(size, np.inf)
    intensity_dists = np.full(size, np.inf)

    for iteration in range(config.max_iter):
        assign_labels(image, width, height, centroids, n_superpixels,
                      labels, dists, intensity_dists, config)
        update_max_intensity_diff(labels, intensity_dists, centroids)
        update_centroids(labels, image, width, height, centroids)
        logger.debug("Round %d: %d non-empty clusters",
                     iteration, np.unique(labels).size)
        if callback is not None:
            callback(iteration, centroids)

    return labels
