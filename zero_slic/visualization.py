# Module: visualization.py
import numpy as np
import matplotlib.pyplot as plt
from skimage.segmentation import mark_boundaries


def plot_superpixels(image, labels, filepath=None, title="Superpixels"):
    """Draw superpixel boundaries over a grayscale image.

    The figure is saved to ``filepath`` when given, and returned either way.
    """
    image = np.asarray(image, dtype=np.float64)
    labels = np.asarray(labels).reshape(image.shape)
    peak = image.max()
    normalized = image / peak if peak > 0 else image

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(mark_boundaries(normalized, labels))
    ax.set_title(f"{title} ({len(np.unique(labels))} regions)")
    ax.axis("off")
    fig.tight_layout()
    if filepath is not None:
        fig.savefig(filepath, dpi=150)
    return fig
