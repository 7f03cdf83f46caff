"""
Parameter sets for the interpolation pipeline.

Defaults mirror a 500x500 pixel map with radius-bounded IDW and ten
k-means color bands. Parameter files are YAML with one section per
dataclass below, e.g.::

    raster:
      width: 800
      height: 600
    interpolation:
      type: base
      power: 3
"""

from dataclasses import dataclass, field, fields, asdict
from pathlib import Path

import yaml

from .clustering.clusters import CENTROID_ALGORITHMS
from .exceptions import ConfigurationError
from .interpolation.idw import DEFAULT_CHUNK_SIZE, make_weight_options


@dataclass
class RasterConfig:
    """Raster size in pixels."""

    width: int = 500
    height: int = 500

    def validate(self):
        for name in ('width', 'height'):
            size = getattr(self, name)
            if isinstance(size, bool) or int(size) != size or size <= 0:
                raise ConfigurationError(f"raster.{name} must be a positive integer, got {size}")


@dataclass
class AggregationConfig:
    """Grid aggregation of dense point clusters."""

    enabled: bool = False
    grid_cell_size: float = 30
    min_points_per_cell: int = 5

    def validate(self):
        if not self.grid_cell_size > 0:
            raise ConfigurationError(
                f"aggregation.grid_cell_size must be positive, got {self.grid_cell_size}"
            )
        if self.min_points_per_cell < 1:
            raise ConfigurationError(
                f"aggregation.min_points_per_cell must be at least 1, "
                f"got {self.min_points_per_cell}"
            )


@dataclass
class InterpolationConfig:
    """IDW strategy and execution parameters."""

    type: str = 'modified'
    radius: float = 100
    power: float = 2
    chunk_size: int = DEFAULT_CHUNK_SIZE
    n_jobs: int = 1

    def weight_options(self):
        """Tagged weighting options for ``idwmap.interpolation.idw``."""
        return make_weight_options(self.type, power=self.power, radius=self.radius)

    def validate(self):
        self.weight_options()
        if self.chunk_size < 1:
            raise ConfigurationError(
                f"interpolation.chunk_size must be at least 1, got {self.chunk_size}"
            )


@dataclass
class ClusteringConfig:
    """Value band partitioning."""

    count: int = 10
    algorithm: str = 'kMeansByCount'
    random_state: int = None

    def validate(self):
        if self.algorithm not in CENTROID_ALGORITHMS:
            raise ConfigurationError(
                f"clustering.algorithm must be one of {list(CENTROID_ALGORITHMS)}, "
                f"got '{self.algorithm}'"
            )
        if isinstance(self.count, bool) or int(self.count) != self.count or self.count < 1:
            raise ConfigurationError(
                f"clustering.count must be a positive integer, got {self.count}"
            )


@dataclass
class ContourConfig:
    """
    Parameters handed to the external density-contour provider.

    ``apply`` enables clipping of the raster to the returned contour.
    """

    bandwidth: float = 20
    threshold: float = 0.003
    pixels_per_grid_unit: float = 1
    apply: bool = False

    def validate(self):
        if not self.bandwidth > 0:
            raise ConfigurationError(f"contour.bandwidth must be positive, got {self.bandwidth}")
        if not self.pixels_per_grid_unit > 0:
            raise ConfigurationError(
                f"contour.pixels_per_grid_unit must be positive, got {self.pixels_per_grid_unit}"
            )


@dataclass
class PipelineConfig:
    """Complete parameter set for ``idwmap.pipeline.run_pipeline``."""

    raster: RasterConfig = field(default_factory=RasterConfig)
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    interpolation: InterpolationConfig = field(default_factory=InterpolationConfig)
    clustering: ClusteringConfig = field(default_factory=ClusteringConfig)
    contour: ContourConfig = field(default_factory=ContourConfig)

    def validate(self):
        """Raise ConfigurationError on the first invalid parameter."""
        for section in fields(self):
            getattr(self, section.name).validate()
        return self

    def to_dict(self):
        return asdict(self)


def config_from_dict(mapping):
    """
    Build a validated PipelineConfig from nested dictionaries.

    Missing sections and keys take their defaults.

    Raises
    ------
    ConfigurationError
        For unknown sections or keys, or invalid values
    """
    mapping = mapping or {}
    if not isinstance(mapping, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(mapping).__name__}")

    section_types = {f.name: f.default_factory for f in fields(PipelineConfig)}
    unknown = set(mapping) - set(section_types)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {sorted(unknown)}")

    sections = {}
    for name, section_type in section_types.items():
        values = mapping.get(name) or {}
        allowed = {f.name for f in fields(section_type)}
        unknown = set(values) - allowed
        if unknown:
            raise ConfigurationError(f"Unknown keys in '{name}': {sorted(unknown)}")
        sections[name] = section_type(**values)

    return PipelineConfig(**sections).validate()


def load_config(config_path):
    """
    Load a PipelineConfig from a YAML parameter file.

    Parameters
    ----------
    config_path : str or Path
        Path to the YAML file

    Returns
    -------
    PipelineConfig
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        mapping = yaml.safe_load(f)

    return config_from_dict(mapping)
