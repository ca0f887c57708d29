# Module: connectivity.py
import logging
from collections import deque

import numpy as np

from .grid import Grid

logger = logging.getLogger(__name__)

# 4-neighbourhood: left, up, right, down
_NEIGHBOURS = ((0, -1), (-1, 0), (0, 1), (1, 0))


def min_superpixel_size(width, height, n_superpixels, shift=2):
    """Components of at most this many pixels are merged into a neighbour."""
    return (width * height // n_superpixels) >> shift


def find_adjacent_label(row, col, components, adjacent_label):
    """Return the id of a finalized 4-neighbour of ``(row, col)``.

    The last neighbour found wins; ``adjacent_label`` is returned unchanged
    when no neighbour has an id yet.
    """
    for dy, dx in _NEIGHBOURS:
        ny, nx = row + dy, col + dx
        if components.contains(ny, nx) and components[ny, nx] >= 0:
            adjacent_label = int(components[ny, nx])
    return adjacent_label


def flood_component(row, col, component_id, labels, components):
    """Mark every pixel 4-connected to ``(row, col)`` that shares its raw
    label with ``component_id``. Returns the list of visited pixels."""
    raw_label = labels[row, col]
    components[row, col] = component_id
    members = [(row, col)]
    frontier = deque(members)
    while frontier:
        y, x = frontier.popleft()
        for dy, dx in _NEIGHBOURS:
            ny, nx = y + dy, x + dx
            if (components.contains(ny, nx) and components[ny, nx] < 0
                    and labels[ny, nx] == raw_label):
                components[ny, nx] = component_id
                members.append((ny, nx))
                frontier.append((ny, nx))
    return members


def enforce_connectivity(image, labels, width, height, n_superpixels, min_size_shift=2):
    """Relabel the raw clustering into compact 4-connected component ids.

    ``image`` is accepted for signature symmetry with the other stages and
    is not read. Components no larger than the minimum superpixel size take
    the id of a neighbouring, already finalized component and their id is
    handed to the next component found.
    """
    min_size = min_superpixel_size(width, height, n_superpixels, min_size_shift)
    raw = Grid(labels, width, height)
    components = Grid.full(width, height, -1, dtype=np.intp)

    current_label = 0
    adjacent_label = 0
    merged = 0
    for row in range(height):
        for col in range(width):
            if components[row, col] >= 0:
                continue
            adjacent_label = find_adjacent_label(row, col, components, adjacent_label)
            members = flood_component(row, col, current_label, raw, components)
            if len(members) <= min_size:
                for y, x in members:
                    components[y, x] = adjacent_label
                merged += 1
                continue
            current_label += 1

    logger.debug("Connectivity: %d components, %d fragments merged (min size %d)",
                 current_label, merged, min_size)
    return components.flat()
