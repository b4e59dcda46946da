"""Plate presets and descriptor resolution."""
from enum import Enum
from typing import Tuple

from microplate.exceptions import PlateDimensionError


class PlateType(int, Enum):
    """Plate type enumeration, valued by well count."""
    CUSTOM = -1
    PLATE_6WELL = 6
    PLATE_12WELL = 12
    PLATE_24WELL = 24
    PLATE_48WELL = 48
    PLATE_96WELL = 96
    PLATE_384WELL = 384
    PLATE_1536WELL = 1536


# Plate dimensions constant (rows, columns)
PLATE_DIMENSIONS = {
    PlateType.PLATE_6WELL: (2, 3),
    PlateType.PLATE_12WELL: (3, 4),
    PlateType.PLATE_24WELL: (4, 6),
    PlateType.PLATE_48WELL: (6, 8),
    PlateType.PLATE_96WELL: (8, 12),
    PlateType.PLATE_384WELL: (16, 24),
    PlateType.PLATE_1536WELL: (32, 48),
}


def dimensions_for(plate_type) -> Tuple[int, int]:
    """(rows, columns) of a preset."""
    try:
        return PLATE_DIMENSIONS[PlateType(plate_type)]
    except (ValueError, KeyError):
        raise PlateDimensionError(f"Invalid plate type: {plate_type}.")


def resolve_type(rows: int, columns: int, kind: str = "Plate") -> Tuple[PlateType, str]:
    """Plate type and descriptor for a set of dimensions.

    Preset dimensions give e.g. (PLATE_96WELL, "96-Well"); anything else
    gives (CUSTOM, "Custom <kind>: <rows>x<columns>").
    """
    if rows < 1 or columns < 1:
        raise PlateDimensionError(f"Invalid plate dimensions: {rows}x{columns}")

    for plate_type, dimensions in PLATE_DIMENSIONS.items():
        if dimensions == (rows, columns):
            return plate_type, f"{plate_type.value}-Well"
    return PlateType.CUSTOM, f"Custom {kind}: {rows}x{columns}"
