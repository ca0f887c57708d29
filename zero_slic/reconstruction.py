# Module: reconstruction.py
import numpy as np
from scipy import ndimage


def reconstruct_mean_image(image, labels):
    """Replace every pixel by the mean intensity of its superpixel."""
    image = np.asarray(image, dtype=np.float64)
    labels = np.asarray(labels).reshape(image.shape)
    ids = np.arange(labels.max() + 1)
    means = np.asarray(ndimage.mean(image, labels=labels, index=ids))
    # ids absent from the label map come back as nan and are never indexed
    return means[labels]
