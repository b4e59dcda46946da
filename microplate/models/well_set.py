"""Well set: a sorted, de-duplicated collection of wells."""
from functools import total_ordering
from typing import Optional

from microplate.models.numeric import NumericType
from microplate.models.well_collection import WellCollection


@total_ordering
class WellSet(WellCollection):
    """Sorted set of wells, unique by (row, column).

    Members are the caller's own Well objects; ``copy()`` gives a set of
    independent wells. Accepted inputs for every bulk verb are described in
    ``microplate.models.well_collection``.
    """

    def __init__(
        self,
        wells=None,
        label: Optional[str] = None,
        numeric_type: NumericType = NumericType.INTEGER
    ):
        if label is None and isinstance(wells, WellSet):
            label = wells.label
        super().__init__(label or f"WellSet{numeric_type.value}", numeric_type)
        if wells is not None:
            self._insert(wells)

    def add(self, wells, delimiter: Optional[str] = None) -> bool:
        """Insert wells; returns False if any index was already present."""
        return self._insert(wells, delimiter)

    def remove(self, wells, delimiter: Optional[str] = None) -> bool:
        """Remove members by index; returns False if any was missing."""
        return self._delete(wells, delimiter)

    def replace(self, wells, delimiter: Optional[str] = None, policy=None) -> bool:
        """Overwrite member data in place, inserting absent wells under UPSERT.

        Returns False if an absent well was skipped under EXISTING_ONLY.
        """
        return self._replace(wells, delimiter, policy)

    def retain(self, wells, delimiter: Optional[str] = None) -> bool:
        """Keep only members whose index appears in the input; True if any were removed."""
        return self._retain(wells, delimiter)

    def contains(self, wells, delimiter: Optional[str] = None) -> bool:
        """True if every input index is a member."""
        return self._contains(wells, delimiter)

    def clear(self) -> None:
        self._clear()

    def copy(self) -> "WellSet":
        """Deep copy: same label, independent wells."""
        return WellSet([well.copy() for well in self], label=self.label, numeric_type=self.numeric_type)

    def _snapshot(self, items) -> "WellSet":
        return WellSet(items, numeric_type=self.numeric_type)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WellSet):
            return NotImplemented
        return self.label == other.label and self._keys() == other._keys()

    __hash__ = None

    def __lt__(self, other) -> bool:
        if not isinstance(other, WellSet):
            return NotImplemented
        return (self.label, len(self), self._keys()) < (other.label, len(other), other._keys())

    def __str__(self) -> str:
        return "\n".join([self.label] + self.to_string_list())

    def __repr__(self) -> str:
        return f"WellSet(label={self.label!r}, wells={self.indices()})"
