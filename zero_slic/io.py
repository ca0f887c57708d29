# Module: io.py
import numpy as np
import matplotlib.image as mpimg
from skimage.color import rgb2gray, rgba2rgb


def load_image(filepath):
    """Load an image file as 2D integer intensities in [0, 255]."""
    img = mpimg.imread(filepath)
    if img.ndim == 3:
        if img.shape[2] == 4:
            img = rgba2rgb(img)
        img = rgb2gray(img)
    img = img.astype(np.float64)
    peak = img.max()
    if peak > 0:
        img = img / peak
    return np.rint(img * 255).astype(np.uint32)


def read_text_image(stream):
    """Read ``width height`` followed by ``width * height`` row-major intensities.

    Returns the flat image with its width and height.
    """
    tokens = stream.read().split()
    if len(tokens) < 2:
        raise ValueError("expected image width and height")
    try:
        values = [int(token) for token in tokens]
    except ValueError as e:
        raise ValueError(f"non-integer token in image stream: {e}") from e

    width, height = values[0], values[1]
    pixels = values[2:2 + width * height]
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} intensities, got {len(pixels)}"
        )
    return np.array(pixels, dtype=np.uint32), width, height


def write_labels(labels, width, height, stream):
    """Write ``height`` lines of ``width`` space-separated labels."""
    grid = np.asarray(labels).reshape(height, width)
    for row in grid:
        stream.write(" ".join(str(int(v)) for v in row))
        stream.write("\n")
