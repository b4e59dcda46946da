"""Ordered-collection core: wells, well sets, plates and stacks."""
from microplate.config import ReplacePolicy
from microplate.models.numeric import NumericType
from microplate.models.well_index import WellIndex
from microplate.models.well import Well
from microplate.models.well_list import WellList
from microplate.models.well_set import WellSet
from microplate.models.plate_type import PlateType, PLATE_DIMENSIONS
from microplate.models.plate import Plate
from microplate.models.stack import Stack

__all__ = [
    "NumericType", "ReplacePolicy",
    "WellIndex", "Well", "WellList", "WellSet",
    "PlateType", "PLATE_DIMENSIONS", "Plate", "Stack"
]
