# Module: seeds.py
import logging
import math
from dataclasses import dataclass, replace

from .grid import Grid

logger = logging.getLogger(__name__)

# 8-neighbourhood, clockwise starting from the left neighbour
_NEIGHBOUR_DX = (-1, -1, 0, 1, 1, 1, 0, -1)
_NEIGHBOUR_DY = (0, -1, -1, -1, 0, 1, 1, 1)


@dataclass
class Centroid:
    """Cluster centre: sub-pixel position, mean intensity and the
    per-cluster intensity normalization term."""
    x: float
    y: float
    intensity: float
    max_intensity_diff: float = 100.0


def find_seeds(image, width, height, n_superpixels, initial_max_intensity_diff=100.0):
    """Lay seeds on a brick-pattern grid with spacing ``sqrt(W * H / K)``.

    Odd rows are shifted right by half a step. Rows and columns whose
    coordinate falls outside the image are dropped, so fewer than
    ``n_superpixels`` seeds may be returned.
    """
    img = Grid(image, width, height)
    step = math.sqrt(width * height / n_superpixels)
    offset = int(step / 2)

    seeds = []
    row_parity = 0
    for i in range(height):
        y = int(i * step + offset)
        if y > height - 1:
            break
        for j in range(width):
            x = int(j * step + (offset << (row_parity & 1)))
            if x > width - 1:
                break
            seeds.append(Centroid(
                x=float(x),
                y=float(y),
                intensity=float(img[y, x]),
                max_intensity_diff=initial_max_intensity_diff,
            ))
        row_parity += 1

    logger.debug("Placed %d seeds for %d requested superpixels (step %.2f)",
                 len(seeds), n_superpixels, step)
    return seeds


def perturb_seeds(gradients, image, width, height, seeds):
    """Move each seed one hop towards the lowest gradient in its 8-neighbourhood.

    A neighbour wins only when its gradient is strictly lower than that of
    the best position found so far for the seed.
    """
    grad = Grid(gradients, width, height)
    img = Grid(image, width, height)

    perturbed = []
    moved = 0
    for seed in seeds:
        x0, y0 = int(seed.x), int(seed.y)
        best_x, best_y = x0, y0
        for dx, dy in zip(_NEIGHBOUR_DX, _NEIGHBOUR_DY):
            nx, ny = x0 + dx, y0 + dy
            if grad.contains(ny, nx) and grad[ny, nx] < grad[best_y, best_x]:
                best_x, best_y = nx, ny

        if (best_x, best_y) == (x0, y0):
            perturbed.append(replace(seed))
        else:
            moved += 1
            perturbed.append(replace(
                seed, x=float(best_x), y=float(best_y),
                intensity=float(img[best_y, best_x]),
            ))

    logger.debug("Perturbed %d of %d seeds", moved, len(seeds))
    return perturbed
