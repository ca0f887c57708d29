# Module: gradients.py
import numpy as np


def find_gradients(image, width, height):
    """Squared central-difference gradient magnitude of a flat image.

    Border pixels have no defined gradient and stay at zero.
    """
    img = np.asarray(image, dtype=np.float64).reshape(height, width)
    gradients = np.zeros((height, width), dtype=np.float64)
    if height < 3 or width < 3:
        return gradients.ravel()

    dx = (img[1:-1, :-2] - img[1:-1, 2:]) ** 2
    dy = (img[:-2, 1:-1] - img[2:, 1:-1]) ** 2
    gradients[1:-1, 1:-1] = dx + dy
    return gradients.ravel()
