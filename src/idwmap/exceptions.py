"""Exceptions raised by idwmap."""


class ConfigurationError(ValueError):
    """
    Invalid static parameter.

    Raised for non-positive cell sizes, radii or cluster counts, unknown
    weighting strategies or centroid algorithms, and malformed configuration
    files. Never caught inside the package.
    """
