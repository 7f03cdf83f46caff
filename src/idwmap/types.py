"""Value types shared by the interpolation and clustering modules."""

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class DataItem:
    """A single measurement: raster coordinates and a value."""

    point: tuple
    value: float

    def __post_init__(self):
        x, y = self.point
        object.__setattr__(self, 'point', (float(x), float(y)))
        object.__setattr__(self, 'value', float(self.value))


@dataclass(frozen=True)
class Range:
    """
    Closed value interval.

    An empty data set produces ``Range(inf, -inf)``; check ``is_empty``
    before using the bounds.
    """

    min: float
    max: float

    @classmethod
    def empty(cls):
        return cls(math.inf, -math.inf)

    @property
    def is_empty(self):
        return self.min > self.max


@dataclass(frozen=True)
class Grid:
    """
    Rectangular grid described by its vertical (x) and horizontal (y) lines.

    Both boundary sequences are strictly increasing, start at 0 and end at
    the raster width / height.
    """

    x: tuple
    y: tuple

    @property
    def shape(self):
        """(columns, rows) of cells."""
        return len(self.x) - 1, len(self.y) - 1

    def cells(self):
        """Yield ``(i, j, x1, y1, x2, y2)`` for every cell, column-major."""
        for i in range(len(self.x) - 1):
            for j in range(len(self.y) - 1):
                yield i, j, self.x[i], self.y[j], self.x[i + 1], self.y[j + 1]


@dataclass
class Cluster:
    """Value band ``[min, max)``; the last band of a sequence is closed."""

    min: float
    max: float
    items: list = field(default_factory=list)

    @property
    def midpoint(self):
        return (self.min + self.max) / 2

    def contains(self, value, is_last=False):
        return value >= self.min and (
            value < self.max or (is_last and value == self.max)
        )


def make_data_items(points, values):
    """
    Build DataItems from parallel point and value sequences.

    Examples
    --------
    >>> items = make_data_items([[0, 0], [10, 0]], [10, 20])
    >>> items[1]
    DataItem(point=(10.0, 0.0), value=20.0)
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    values = np.asarray(values, dtype=float).ravel()
    if len(points) != len(values):
        raise ValueError(
            f"Got {len(points)} points but {len(values)} values"
        )
    return [DataItem((x, y), float(v)) for (x, y), v in zip(points, values)]


def data_to_arrays(data):
    """
    Split DataItems into a ``(n, 2)`` coordinate array and a ``(n,)`` value array.
    """
    points = np.array([item.point for item in data], dtype=float).reshape(-1, 2)
    values = np.array([item.value for item in data], dtype=float)
    return points, values
