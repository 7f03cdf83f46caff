"""End-to-end flow: aggregation, value bands and IDW raster."""

from dataclasses import dataclass

import numpy as np

from .clustering.clusters import get_data_clusters
from .config import PipelineConfig
from .data_processing.aggregation import aggregate_data_by_grid
from .data_processing.statistics import get_data_range
from .interpolation.idw import idw
from .spatial.grid import build_square_grid


@dataclass
class PipelineResult:
    """Everything a renderer needs to draw one map."""

    data: list
    grid: object
    value_range: object
    clusters: list
    raster: np.ndarray
    contour: list = None


def run_pipeline(data, config=None, contour=None, contour_provider=None,
                 verbose=False):
    """
    Interpolate a data set and split its values into bands.

    Steps:
    1. Build the square grid for the raster
    2. Optionally aggregate the raw data by grid cell
    3. Compute the value range and the value clusters
    4. Compute the IDW raster, clipped to the density contour if one is
       given or requested

    Parameters
    ----------
    data : sequence of DataItem
        Raw measurements in raster coordinates
    config : PipelineConfig, optional
        Parameter set (default: PipelineConfig())
    contour : sequence, optional
        Ready-made MultiPolygon to clip the raster to (default: None)
    contour_provider : callable, optional
        ``provider(data, contour_config, width, height) -> MultiPolygon``,
        called when ``config.contour.apply`` is set and no ``contour`` is
        given (default: None)
    verbose : bool, optional
        Print progress information (default: False)

    Returns
    -------
    PipelineResult
        Working data set, grid, value range, filled clusters and flat raster.
        Empty data gives no clusters and an all-NaN raster.
    """
    config = (config or PipelineConfig()).validate()
    width = config.raster.width
    height = config.raster.height

    grid = build_square_grid(width, height, config.aggregation.grid_cell_size)

    if config.aggregation.enabled:
        working = aggregate_data_by_grid(
            data, grid, config.aggregation.min_points_per_cell
        )
        if verbose:
            print(f"Aggregated {len(data)} measurements into {len(working)} "
                  f"grid cells ({grid.shape[0]}x{grid.shape[1]} grid)")
    else:
        working = list(data)

    if verbose and not working:
        print("Warning: data set is empty; consider relaxing the aggregation "
              "parameters or disabling aggregation")

    value_range = get_data_range(working)
    clusters = get_data_clusters(
        working, value_range,
        config.clustering.count,
        config.clustering.algorithm,
        random_state=config.clustering.random_state
    )
    if verbose:
        print(f"Value range [{value_range.min}, {value_range.max}] split into "
              f"{len(clusters)} of {config.clustering.count} requested clusters "
              f"({config.clustering.algorithm})")

    if contour is None and config.contour.apply and contour_provider is not None:
        contour = contour_provider(working, config.contour, width, height)

    raster = idw(
        working,
        config.interpolation.weight_options(),
        width, height,
        contour=contour,
        chunk_size=config.interpolation.chunk_size,
        n_jobs=config.interpolation.n_jobs,
        verbose=verbose
    )

    return PipelineResult(
        data=working,
        grid=grid,
        value_range=value_range,
        clusters=clusters,
        raster=raster,
        contour=contour
    )
