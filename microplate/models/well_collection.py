"""Bulk well operations shared by WellSet and Plate.

Every verb (add, remove, replace, retain, contains, lookup) runs through
``as_wells``, which flattens the accepted input shapes into a list of wells:

- a Well
- a WellIndex
- an index string, split on a delimiter ("A1,B2")
- any iterable of the above (a list, tuple, WellList, WellSet or Plate)

The whole input is normalised and checked before the collection is touched,
so a malformed token or out-of-bounds index leaves the collection unchanged.
"""
import logging
from typing import Iterable, List, Optional

from sortedcontainers import SortedDict

from microplate.config import ReplacePolicy, settings
from microplate.exceptions import DataRangeError, WellIndexError
from microplate.models.navigable import NavigableCollection, check_slice
from microplate.models.numeric import NumericType
from microplate.models.well import Well
from microplate.models.well_index import WellIndex, parse_column, parse_index, parse_row, split_tokens
from microplate.models.well_list import WellList

logger = logging.getLogger(__name__)


def as_wells(
    source,
    delimiter: Optional[str] = None,
    numeric_type: NumericType = NumericType.INTEGER
) -> List[Well]:
    """Flatten any accepted input shape into wells, preserving order."""
    if isinstance(source, Well):
        return [source]
    if isinstance(source, WellIndex):
        return [Well(source.row, source.column, numeric_type=numeric_type)]
    if isinstance(source, str):
        tokens = split_tokens(source, delimiter or settings.default_delimiter)
        return [Well(token, numeric_type=numeric_type) for token in tokens]
    if source is None:
        raise TypeError("Expected a well, index, index string or iterable, got None")

    wells = []
    for item in source:
        wells.extend(as_wells(item, delimiter, numeric_type))
    return wells


def well_key(target):
    """(row, column) key for a single well, index or index string."""
    if isinstance(target, (Well, WellIndex)):
        return target.key()
    if isinstance(target, str):
        return parse_index(target)
    if isinstance(target, tuple) and len(target) == 2:
        return tuple(target)
    raise WellIndexError(f"Cannot locate a well from {target!r}")


class WellCollection(NavigableCollection):
    """Sorted wells keyed by (row, column), one well per index."""

    def __init__(self, label: Optional[str] = None, numeric_type: NumericType = NumericType.INTEGER):
        self._wells = SortedDict()
        self.label = label
        self.numeric_type = numeric_type

    # Hooks

    def _check(self, wells: List[Well]) -> None:
        """Validate a normalised batch before any mutation."""

    def _admit(self, well: Well) -> Well:
        """The object actually stored for an incoming well."""
        return well

    def _prepare(self, source, delimiter: Optional[str]) -> List[Well]:
        wells = as_wells(source, delimiter, self.numeric_type)
        self._check(wells)
        return wells

    # Core verbs

    def _insert(self, source, delimiter: Optional[str] = None) -> bool:
        added = True
        for well in self._prepare(source, delimiter):
            key = well.key()
            if key in self._wells:
                logger.debug("Well %s already exists in %s", well.index_string, self.label)
                added = False
                continue
            self._wells[key] = self._admit(well)
        return added

    def _delete(self, source, delimiter: Optional[str] = None) -> bool:
        removed = True
        for well in self._prepare(source, delimiter):
            if self._wells.pop(well.key(), None) is None:
                logger.debug("Well %s does not exist in %s", well.index_string, self.label)
                removed = False
        return removed

    def _replace(self, source, delimiter: Optional[str] = None, policy=None) -> bool:
        policy = ReplacePolicy(policy or settings.replace_policy)
        replaced = True
        for well in self._prepare(source, delimiter):
            existing = self._wells.get(well.key())
            if existing is not None:
                existing.replace_data(well)
            elif policy is ReplacePolicy.UPSERT:
                self._wells[well.key()] = self._admit(well)
            else:
                logger.debug("Well %s is not a member of %s; not replaced", well.index_string, self.label)
                replaced = False
        return replaced

    def _retain(self, source, delimiter: Optional[str] = None) -> bool:
        keep = {well.key() for well in self._prepare(source, delimiter)}
        doomed = [key for key in self._wells if key not in keep]
        for key in doomed:
            del self._wells[key]
        return bool(doomed)

    def _contains(self, source, delimiter: Optional[str] = None) -> bool:
        return all(
            well.key() in self._wells
            for well in as_wells(source, delimiter, self.numeric_type)
        )

    # Lookup

    def get_well(self, target) -> Optional[Well]:
        """The member at a single index, or None."""
        return self._wells.get(well_key(target))

    def get_wells(self, source, delimiter: Optional[str] = None):
        """Members matching the input as a new WellSet, or None if none match."""
        found = []
        for well in as_wells(source, delimiter, self.numeric_type):
            member = self._wells.get(well.key())
            if member is not None and member not in found:
                found.append(member)
        return self._snapshot(found) if found else None

    def get_row(self, row):
        """Members in a row (int or letters), or None."""
        row = parse_row(row)
        found = [well for well in self._wells.values() if well.row == row]
        return self._snapshot(found) if found else None

    def get_column(self, column):
        """Members in a column, or None."""
        column = parse_column(column)
        found = [well for well in self._wells.values() if well.column == column]
        return self._snapshot(found) if found else None

    def all_wells(self) -> List[Well]:
        return list(self._wells.values())

    def indices(self) -> List[WellIndex]:
        return [well.index for well in self._wells.values()]

    def to_well_list(self) -> WellList:
        """Snapshot of the member indices carrying this collection's label."""
        return WellList(self.indices(), label=self.label)

    def to_string_list(self) -> List[str]:
        return [str(well) for well in self._wells.values()]

    def is_empty(self) -> bool:
        return not self._wells

    def _clear(self) -> None:
        self._wells.clear()

    # Navigation hooks

    def _key_for(self, target):
        return well_key(target)

    def _bisect_left(self, key) -> int:
        return self._wells.bisect_left(key)

    def _bisect_right(self, key) -> int:
        return self._wells.bisect_right(key)

    def _item_at(self, position: int) -> Well:
        return self._wells.peekitem(position)[1]

    def _pop_at(self, position: int) -> Well:
        return self._wells.popitem(position)[1]

    # Protocols

    def __len__(self) -> int:
        return len(self._wells)

    def __iter__(self):
        return iter(self._wells.values())

    def __contains__(self, target) -> bool:
        try:
            return well_key(target) in self._wells
        except ValueError:
            return False

    def __getitem__(self, position):
        values = self._wells.values()
        if isinstance(position, slice):
            check_slice(position, len(self))
            return self._snapshot(values[position])
        try:
            return values[position]
        except IndexError:
            raise DataRangeError(f"Position {position} is outside a collection of {len(self)} wells")

    def _keys(self) -> Iterable:
        return list(self._wells.keys())
