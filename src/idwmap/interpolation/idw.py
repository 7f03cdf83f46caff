"""Inverse Distance Weighting (IDW) interpolation onto a raster."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from joblib import Parallel, delayed
from tqdm import tqdm

from ..exceptions import ConfigurationError
from ..spatial.index import SpatialIndex
from ..spatial.polygon import multipolygon_mask
from ..types import data_to_arrays
from ..utils.coordinates import pixel_coordinates

# Pixels per parallel work item
DEFAULT_CHUNK_SIZE = 4096

# Upper bound on pixel x data-point pairs held in memory by the base strategy
MAX_BASE_PAIRS = 2_000_000


@dataclass(frozen=True)
class BaseWeightOptions:
    """Global power-law weighting: every data point influences every cell."""

    power: float = 2
    type: ClassVar[str] = 'base'

    def __post_init__(self):
        if not self.power > 0:
            raise ConfigurationError(f"IDW power must be positive, got {self.power}")


@dataclass(frozen=True)
class ModifiedWeightOptions:
    """Radius-bounded weighting: only points within ``radius`` influence a cell."""

    radius: float = 100
    type: ClassVar[str] = 'modified'

    def __post_init__(self):
        if not self.radius > 0:
            raise ConfigurationError(f"IDW radius must be positive, got {self.radius}")


WEIGHT_OPTION_TYPES = {
    BaseWeightOptions.type: BaseWeightOptions,
    ModifiedWeightOptions.type: ModifiedWeightOptions,
}


def make_weight_options(weight_type, power=2, radius=100):
    """
    Build weighting options from a strategy tag.

    Parameters
    ----------
    weight_type : {'base', 'modified'}
        Weighting strategy
    power : float, optional
        Power parameter for 'base' (default: 2)
    radius : float, optional
        Search radius in pixels for 'modified' (default: 100)

    Returns
    -------
    BaseWeightOptions or ModifiedWeightOptions

    Raises
    ------
    ConfigurationError
        For an unknown tag or an invalid parameter
    """
    if weight_type == BaseWeightOptions.type:
        return BaseWeightOptions(power=power)
    if weight_type == ModifiedWeightOptions.type:
        return ModifiedWeightOptions(radius=radius)
    raise ConfigurationError(
        f"Unknown IDW weight type '{weight_type}'. "
        f"Supported: {sorted(WEIGHT_OPTION_TYPES)}"
    )


def base_weights(distance_squared, power=2):
    """
    Unnormalised power-law IDW weights.

    Computes ``1 / d**power`` from squared distances, skipping the square
    root for the common ``power == 2`` case.

    Parameters
    ----------
    distance_squared : ndarray
        Squared distances from the target cell to the known points
    power : float, optional
        Power parameter (default: 2)

    Returns
    -------
    ndarray
        Weights; ``inf`` where the distance is zero

    Examples
    --------
    >>> base_weights(np.array([1.0, 4.0, 16.0]))
    array([1.    , 0.25  , 0.0625])
    >>> base_weights(np.array([4.0]), power=1)
    array([0.5])
    """
    distance_squared = np.asarray(distance_squared, dtype=float)
    with np.errstate(divide='ignore'):
        if power == 2:
            return 1.0 / distance_squared
        return 1.0 / distance_squared ** (power / 2)


def modified_weights(distances, radius):
    """
    Unnormalised radius-bounded IDW weights.

    Implements ``w = (max(0, R - d) / (R * d))**2``, which falls to zero at
    the search radius ``R``.

    Examples
    --------
    >>> modified_weights(np.array([5.0, 10.0]), radius=10)
    array([0.01, 0.  ])
    """
    distances = np.asarray(distances, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        return (np.maximum(0.0, radius - distances) / (radius * distances)) ** 2


def _base_chunk(xs, ys, points, values, power):
    dx = xs[:, np.newaxis] - points[np.newaxis, :, 0]
    dy = ys[:, np.newaxis] - points[np.newaxis, :, 1]
    distance_squared = dx * dx + dy * dy

    exact = distance_squared == 0
    weights = base_weights(distance_squared, power)
    weights[exact] = 0.0

    with np.errstate(divide='ignore', invalid='ignore'):
        result = (weights @ values) / weights.sum(axis=1)

    # Coinciding data point: lowest input index wins
    hits = exact.any(axis=1)
    if hits.any():
        first = exact.argmax(axis=1)
        result[hits] = values[first[hits]]

    return result


def _modified_chunk(xs, ys, index, values, radius):
    result = np.full(xs.size, np.nan)
    query_idx, point_idx = index.radius_pairs(xs, ys, radius)
    if query_idx.size == 0:
        return result

    points = index.points
    dx = xs[query_idx] - points[point_idx, 0]
    dy = ys[query_idx] - points[point_idx, 1]
    distances = np.sqrt(dx * dx + dy * dy)

    exact = distances == 0
    weights = modified_weights(distances, radius)
    weights[exact] = 0.0

    numerator = np.bincount(query_idx, weights=weights * values[point_idx],
                            minlength=xs.size)
    denominator = np.bincount(query_idx, weights=weights, minlength=xs.size)
    has_neighbors = np.bincount(query_idx, minlength=xs.size) > 0

    with np.errstate(divide='ignore', invalid='ignore'):
        result[has_neighbors] = (numerator[has_neighbors]
                                 / denominator[has_neighbors])

    if exact.any():
        exact_query = query_idx[exact]
        exact_point = point_idx[exact]
        order = np.lexsort((exact_point, exact_query))
        exact_query = exact_query[order]
        exact_point = exact_point[order]
        _, first = np.unique(exact_query, return_index=True)
        result[exact_query[first]] = values[exact_point[first]]

    return result


def _check_raster_size(width, height):
    for name, size in (('width', width), ('height', height)):
        if int(size) != size or size < 0:
            raise ConfigurationError(
                f"Raster {name} must be a non-negative integer, got {size}"
            )
    return int(width), int(height)


def _interpolate_raster(chunk_func, chunk_args, width, height, contour,
                        chunk_size, n_jobs, verbose, label):
    width, height = _check_raster_size(width, height)
    if chunk_size < 1:
        raise ConfigurationError(f"chunk_size must be at least 1, got {chunk_size}")

    raster = np.full(width * height, np.nan)
    xs, ys = pixel_coordinates(width, height)

    # Cells outside the contour stay undefined without being weighted
    if contour is not None:
        active = np.flatnonzero(multipolygon_mask(xs, ys, contour))
    else:
        active = np.arange(raster.size)

    if active.size == 0:
        return raster

    chunks = [active[start:start + chunk_size]
              for start in range(0, active.size, chunk_size)]

    if verbose:
        print(f"{label} IDW: interpolating {active.size} of {raster.size} cells "
              f"in {len(chunks)} chunks...")

    results = Parallel(n_jobs=n_jobs)(
        delayed(chunk_func)(xs[chunk], ys[chunk], *chunk_args)
        for chunk in (tqdm(chunks) if verbose else chunks)
    )

    for chunk, values in zip(chunks, results):
        raster[chunk] = values

    return raster


def idw_base(data, options, width, height, contour=None,
             chunk_size=DEFAULT_CHUNK_SIZE, n_jobs=1, verbose=False):
    """
    Interpolate with the global power-law IDW formula.

    Every data point contributes ``w = 1 / d**power`` to every cell and the
    cell value is ``sum(w * value) / sum(w)``. A cell that coincides with a
    data point takes that point's value directly; if several points
    coincide, the one with the lowest index in ``data`` wins. Cost is
    O(width * height * n).

    Parameters
    ----------
    data : sequence of DataItem
        Known measurements in raster coordinates
    options : BaseWeightOptions
        Power parameter
    width, height : int
        Raster size in pixels
    contour : sequence, optional
        MultiPolygon mask; cells outside it are NaN (default: None, no clip)
    chunk_size : int, optional
        Pixels per work item (default: 4096). Capped so that a chunk never
        holds more than ``MAX_BASE_PAIRS`` pixel/point pairs.
    n_jobs : int, optional
        joblib worker count (default: 1, sequential)
    verbose : bool, optional
        Print progress (default: False)

    Returns
    -------
    ndarray of shape (width * height,)
        Flat raster, cell ``(x, y)`` at index ``y * width + x``. All NaN when
        ``data`` is empty.

    Examples
    --------
    >>> from idwmap.types import make_data_items
    >>> data = make_data_items([[0, 0], [2, 0]], [10, 20])
    >>> idw_base(data, BaseWeightOptions(power=2), 3, 1)
    array([10., 15., 20.])
    """
    points, values = data_to_arrays(data)
    chunk_size = max(1, min(chunk_size, MAX_BASE_PAIRS // max(len(points), 1)))
    return _interpolate_raster(
        _base_chunk, (points, values, options.power),
        width, height, contour, chunk_size, n_jobs, verbose, 'Base'
    )


def idw_modified(data, options, width, height, contour=None,
                 chunk_size=DEFAULT_CHUNK_SIZE, n_jobs=1, verbose=False):
    """
    Interpolate with the radius-bounded (modified) IDW formula.

    A spatial index over the data is built once; each cell is influenced
    only by points within ``options.radius`` with weight
    ``(max(0, R - d) / (R * d))**2``. Cells without neighbors are NaN.
    The exact-coincidence rule matches ``idw_base``. Cost is
    O(width * height * k) for an average neighborhood size k.

    Parameters and return value are as for ``idw_base``, with
    ``options`` a ``ModifiedWeightOptions``.

    Examples
    --------
    >>> from idwmap.types import make_data_items
    >>> data = make_data_items([[0, 0]], [10])
    >>> idw_modified(data, ModifiedWeightOptions(radius=1.5), 3, 1)
    array([10., 10., nan])
    """
    points, values = data_to_arrays(data)
    index = SpatialIndex(points)
    return _interpolate_raster(
        _modified_chunk, (index, values, options.radius),
        width, height, contour, chunk_size, n_jobs, verbose, 'Modified'
    )


def idw(data, weight_options, width, height, contour=None,
        chunk_size=DEFAULT_CHUNK_SIZE, n_jobs=1, verbose=False):
    """
    Compute an IDW raster with the strategy selected by ``weight_options``.

    Parameters
    ----------
    data : sequence of DataItem
        Known measurements in raster coordinates
    weight_options : BaseWeightOptions or ModifiedWeightOptions
        Weighting strategy and its parameter
    width, height : int
        Raster size in pixels
    contour : sequence, optional
        MultiPolygon clip mask (default: None)
    chunk_size, n_jobs, verbose
        See ``idw_base``

    Returns
    -------
    ndarray of shape (width * height,)
        Flat raster with NaN for undefined cells

    Raises
    ------
    ConfigurationError
        If ``weight_options`` is not one of the supported option types
    """
    if isinstance(weight_options, BaseWeightOptions):
        return idw_base(data, weight_options, width, height, contour,
                        chunk_size, n_jobs, verbose)
    if isinstance(weight_options, ModifiedWeightOptions):
        return idw_modified(data, weight_options, width, height, contour,
                            chunk_size, n_jobs, verbose)
    raise ConfigurationError(
        f"Unsupported IDW weight options {weight_options!r}. "
        f"Supported: {sorted(WEIGHT_OPTION_TYPES)}"
    )
