"""Microplate data model for bioscience assay data."""
from microplate.config import settings, configure_logging
from microplate.exceptions import (
    MicroplateError,
    WellIndexError,
    DataRangeError,
    PlateBoundsError,
    PlateDimensionError,
    GroupError,
    NumericTypeError
)
from microplate.models import (
    NumericType, ReplacePolicy,
    WellIndex, Well, WellList, WellSet,
    PlateType, PLATE_DIMENSIONS, Plate, Stack
)

__version__ = "1.0.0"

__all__ = [
    "settings", "configure_logging",
    "MicroplateError", "WellIndexError", "DataRangeError", "PlateBoundsError",
    "PlateDimensionError", "GroupError", "NumericTypeError",
    "NumericType", "ReplacePolicy", "WellIndex", "Well", "WellList", "WellSet",
    "PlateType", "PLATE_DIMENSIONS", "Plate", "Stack"
]
