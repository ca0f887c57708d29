"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from scipy import ndimage


def _check_partition(labels, w, h):
    """Labels cover the image with compact ids, each a single 4-connected region."""
    assert labels.shape == (w * h,)
    assert labels.min() >= 0
    ids = np.unique(labels)
    assert list(ids) == list(range(len(ids)))
    grid = labels.reshape(h, w)
    for i in ids:
        _, n = ndimage.label(grid == i)
        assert n == 1, f"label {i} is not 4-connected"


@pytest.fixture
def assert_valid_partition():
    return _check_partition


@pytest.fixture
def uniform_4x4():
    return np.full(16, 7, dtype=np.uint32), 4, 4


@pytest.fixture
def vertical_edge():
    """10x10 image, columns 0-4 black, columns 5-9 white."""
    img = np.zeros((10, 10), dtype=np.uint32)
    img[:, 5:] = 255
    return img.ravel(), 10, 10


@pytest.fixture
def two_tone():
    """8 wide, 4 high, left half 0, right half 255."""
    img = np.zeros((4, 8), dtype=np.uint32)
    img[:, 4:] = 255
    return img.ravel(), 8, 4


@pytest.fixture
def quadrants():
    """24x24 image with four flat quadrants of different intensity."""
    img = np.empty((24, 24), dtype=np.uint32)
    img[:12, :12] = 20
    img[:12, 12:] = 90
    img[12:, :12] = 160
    img[12:, 12:] = 230
    return img.ravel(), 24, 24
