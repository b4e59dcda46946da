"""Shared fixtures."""
import pytest

from microplate.models import NumericType, Plate, PlateType, Stack, Well, WellList, WellSet


@pytest.fixture
def sample_wells():
    """Create a handful of wells across two rows."""
    return [
        Well("A1", data=[1, 2, 3]),
        Well("A2", data=[4, 5, 6]),
        Well("B1", data=[7, 8, 9]),
        Well("B3", data=[10]),
    ]


@pytest.fixture
def sample_set(sample_wells):
    """Create a labelled well set from the sample wells."""
    return WellSet(sample_wells, label="Samples")


@pytest.fixture
def plate_96(sample_wells):
    """Create a 96-well plate seeded with the sample wells."""
    return Plate.of_type(PlateType.PLATE_96WELL, label="Assay", wells=sample_wells)


@pytest.fixture
def grouped_plate(plate_96):
    """Create a 96-well plate with two declared groups."""
    plate_96.add_groups([
        WellList.parse("A1,A2", label="Controls"),
        WellList.parse("B1,B3", label="Treated"),
    ])
    return plate_96


@pytest.fixture
def double_plate():
    """Create a small custom plate holding doubles."""
    return Plate(2, 3, label="Doubles", wells=[Well("A1", data=[1.5, 2.5], numeric_type=NumericType.DOUBLE)],
                 numeric_type=NumericType.DOUBLE)


@pytest.fixture
def stack_96():
    """Create a 96-well stack holding three labelled plates."""
    plates = [
        Plate.of_type(PlateType.PLATE_96WELL, label=label, wells=[Well("A1", data=[number])])
        for number, label in enumerate(["Plate1", "Plate2", "Plate3"], start=1)
    ]
    return Stack.of_type(PlateType.PLATE_96WELL, label="Screen", plates=plates)
