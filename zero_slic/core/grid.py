# Module: grid.py
import numpy as np


class Grid:
    """Row-major 2D view over a flat buffer of ``width * height`` values.

    Indexing takes ``(row, col)`` and is bounds-checked: negative or
    too-large indices raise ``IndexError`` instead of wrapping around.
    """

    def __init__(self, data, width, height, dtype=None):
        values = np.array(data, dtype=dtype, copy=True)
        if values.size != width * height:
            raise ValueError(
                f"buffer holds {values.size} values, expected {width} x {height}"
            )
        self.width = int(width)
        self.height = int(height)
        self.values = values.reshape(self.height, self.width)

    @classmethod
    def full(cls, width, height, fill_value, dtype=None):
        return cls(np.full(width * height, fill_value, dtype=dtype), width, height)

    @property
    def shape(self):
        return self.height, self.width

    def contains(self, row, col):
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, key):
        row, col = key
        if not self.contains(row, col):
            raise IndexError(f"({row}, {col}) outside grid of shape {self.shape}")
        return row, col

    def __getitem__(self, key):
        return self.values[self._check(key)]

    def __setitem__(self, key, value):
        self.values[self._check(key)] = value

    def flat(self):
        """Row-major flat copy of the grid."""
        return self.values.ravel().copy()
