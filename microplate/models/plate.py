"""Plate model: bounded wells plus a registry of named well groups."""
import logging
from functools import total_ordering
from typing import Dict, List, Optional

from microplate.exceptions import GroupError, PlateBoundsError
from microplate.models.numeric import NumericType
from microplate.models.plate_type import PlateType, dimensions_for, resolve_type
from microplate.models.well import Well
from microplate.models.well_collection import WellCollection
from microplate.models.well_list import WellList
from microplate.models.well_set import WellSet

logger = logging.getLogger(__name__)

_TYPE_ORDER = {numeric_type: order for order, numeric_type in enumerate(NumericType)}


def _is_group_key(item) -> bool:
    return isinstance(item, (str, WellList, WellSet))


@total_ordering
class Plate(WellCollection):
    """A rows x columns plate.

    The plate owns its wells: anything added is stored as a copy, and
    ``get_well`` hands back the plate's own instance. Groups are declared as
    lists of indices and are materialised on demand as WellSets over those
    same instances, so a group always sees the plate's current data. An
    index the plate does not hold yet shows up as an empty placeholder well.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        label: Optional[str] = None,
        wells=None,
        numeric_type: NumericType = NumericType.INTEGER
    ):
        super().__init__(label or f"Plate{numeric_type.value}", numeric_type)
        self.rows = rows
        self.columns = columns
        self.type, self.descriptor = resolve_type(rows, columns)
        self._groups: Dict[str, WellList] = {}
        if wells is not None:
            self.add_wells(wells)

    @classmethod
    def of_type(
        cls,
        plate_type: PlateType,
        label: Optional[str] = None,
        wells=None,
        numeric_type: NumericType = NumericType.INTEGER
    ) -> "Plate":
        """Create a plate from one of the well-count presets."""
        rows, columns = dimensions_for(plate_type)
        return cls(rows, columns, label=label, wells=wells, numeric_type=numeric_type)

    @classmethod
    def from_plate(cls, plate: "Plate") -> "Plate":
        """Deep copy: fresh wells with the same data, copied group lists."""
        copy = cls(plate.rows, plate.columns, label=plate.label, numeric_type=plate.numeric_type)
        copy.add_wells(plate)
        copy.add_groups(plate.group_lists())
        return copy

    def copy(self) -> "Plate":
        return Plate.from_plate(self)

    @property
    def type_string(self) -> str:
        return self.numeric_type.value

    # Bounds

    def _check_index(self, row: int, column: int) -> None:
        if row >= self.rows or column > self.columns:
            raise PlateBoundsError(
                f"Invalid well indices for well {Well(row, column).index_string} "
                f"on a {self.rows}x{self.columns} plate"
            )

    def _check(self, wells: List[Well]) -> None:
        for well in wells:
            self._check_index(well.row, well.column)

    def _admit(self, well: Well) -> Well:
        return Well(well.row, well.column, data=well.data, numeric_type=self.numeric_type)

    # Wells

    def add_wells(self, wells, delimiter: Optional[str] = None) -> bool:
        """Add copies of the input wells; returns False if any index was taken."""
        return self._insert(wells, delimiter)

    def remove_wells(self, wells, delimiter: Optional[str] = None) -> bool:
        """Remove wells by index; returns False if any was missing."""
        return self._delete(wells, delimiter)

    def replace_wells(self, wells, delimiter: Optional[str] = None, policy=None) -> bool:
        """Overwrite well data in place, inserting absent wells under UPSERT."""
        return self._replace(wells, delimiter, policy)

    def retain_wells(self, wells, delimiter: Optional[str] = None) -> bool:
        """Keep only wells whose index appears in the input; True if any were removed."""
        return self._retain(wells, delimiter)

    def contains(self, wells, delimiter: Optional[str] = None) -> bool:
        """True if every input index holds a well on this plate."""
        return self._contains(wells, delimiter)

    def clear_wells(self) -> None:
        self._clear()

    def data_set(self) -> WellSet:
        """The plate's wells as a WellSet (the same well instances)."""
        return WellSet(self.all_wells(), numeric_type=self.numeric_type)

    def _snapshot(self, items) -> WellSet:
        return WellSet(items, numeric_type=self.numeric_type)

    # Groups

    def _group_list(self, group) -> WellList:
        if isinstance(group, WellList):
            return group.copy()
        if isinstance(group, WellSet):
            return group.to_well_list()
        raise TypeError(f"A group must be a WellList or WellSet, got {type(group).__name__}")

    def _materialise(self, group: WellList) -> WellSet:
        wells = []
        for index in group:
            well = self._wells.get(index.key())
            if well is None:
                well = Well(index.row, index.column, numeric_type=self.numeric_type)
            wells.append(well)
        return WellSet(wells, label=group.label, numeric_type=self.numeric_type)

    def _find_group(self, key) -> Optional[WellList]:
        if isinstance(key, str):
            return self._groups.get(key)
        wanted = self._group_list(key)
        for label in sorted(self._groups):
            if self._groups[label] == wanted:
                return self._groups[label]
        return None

    def add_groups(self, groups) -> None:
        """Declare one or more groups (WellList or WellSet).

        Raises:
            GroupError: If a group has no label or its label is taken.
            PlateBoundsError: If a group index lies outside the plate.
        """
        lists = [self._group_list(groups)] if _is_group_key(groups) else [self._group_list(g) for g in groups]

        labels = set()
        for group in lists:
            if not group.label:
                raise GroupError(f"Well groups require a label: {group}")
            if group.label in self._groups or group.label in labels:
                raise GroupError(f"The group {group} already exists in the group list.")
            for index in group:
                self._check_index(index.row, index.column)
            labels.add(group.label)

        for group in lists:
            self._groups[group.label] = group

    def remove_groups(self, groups) -> bool:
        """Remove groups by label, WellList or WellSet; returns False if any was missing."""
        keys = [groups] if _is_group_key(groups) else list(groups)
        removed = True
        for key in keys:
            group = self._find_group(key)
            if group is None:
                logger.debug("Group %s does not exist on %s", key, self.label)
                removed = False
                continue
            del self._groups[group.label]
        return removed

    def get_group(self, key) -> Optional[WellSet]:
        """A single group by label or exact index list, or None."""
        group = self._find_group(key)
        return self._materialise(group) if group is not None else None

    def get_groups(self, keys) -> List[WellSet]:
        """Every group matching a label, an index list or many of them, ordered."""
        keys = [keys] if _is_group_key(keys) else list(keys)
        found = {}
        for key in keys:
            group = self._find_group(key)
            if group is not None:
                found[group.label] = group
        return sorted(self._materialise(group) for group in found.values())

    def contains_group(self, keys) -> bool:
        """True if every given label or index list names a group."""
        if _is_group_key(keys):
            return self._find_group(keys) is not None
        return all(self._find_group(key) is not None for key in keys)

    def clear_groups(self) -> None:
        self._groups.clear()

    def all_groups(self) -> List[WellSet]:
        """Every group materialised over the plate's wells, ordered."""
        return sorted(self._materialise(group) for group in self._groups.values())

    def group_lists(self) -> List[WellList]:
        """Copies of the declared group index lists, ordered by label."""
        return [self._groups[label].copy() for label in sorted(self._groups)]

    # Output

    def print_data(self, target) -> Optional[str]:
        """"<index> <data>" for one well on the plate, or None."""
        well = self.get_well(target)
        return str(well) if well is not None else None

    def print_all_data(self) -> str:
        """Header line "<label> <descriptor>" then one line per well."""
        lines = [f"{self.label} {self.descriptor}"] + self.to_string_list()
        return "\n".join(lines) + "\n"

    # Comparison

    def sort_key(self):
        """Explicit plate order used by stacks.

        Well count, rows, columns, label, numeric type, number of wells and
        finally the member indices.
        """
        return (
            self.rows * self.columns,
            self.rows,
            self.columns,
            self.label,
            _TYPE_ORDER[self.numeric_type],
            len(self),
            self._keys(),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plate):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self.label == other.label
            and self.type == other.type
            and self.descriptor == other.descriptor
            and self.numeric_type == other.numeric_type
            and self.all_groups() == other.all_groups()
            and self.data_set() == other.data_set()
        )

    __hash__ = None

    def __lt__(self, other) -> bool:
        if not isinstance(other, Plate):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"Type: {self.descriptor} Label: {self.label}"

    def __repr__(self) -> str:
        return f"Plate({self.rows}x{self.columns}, label={self.label!r}, wells={len(self)})"
