"""Error types raised by the microplate core and its services."""


class MicroplateError(Exception):
    """Base class for all microplate errors."""


class WellIndexError(MicroplateError, ValueError):
    """A well index string or token does not match the <letters><digits> grammar."""


class DataRangeError(MicroplateError, IndexError):
    """A positional range falls outside a well or collection."""


class PlateBoundsError(MicroplateError, ValueError):
    """A well or group index lies outside the declared plate extents."""


class PlateDimensionError(MicroplateError, ValueError):
    """Plate dimensions are invalid or do not match the owning stack."""


class GroupError(MicroplateError, ValueError):
    """A well group is unlabelled or its label is already taken."""


class NumericTypeError(MicroplateError, ValueError):
    """A value cannot be represented by the well's numeric type."""
