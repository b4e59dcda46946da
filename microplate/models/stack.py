"""Stack model: an ordered collection of same-sized plates."""
import bisect
import logging
from typing import List, Optional

from microplate.config import ReplacePolicy, settings
from microplate.exceptions import DataRangeError, PlateDimensionError
from microplate.models.navigable import NavigableCollection, check_slice
from microplate.models.numeric import NumericType
from microplate.models.plate import Plate
from microplate.models.plate_type import PlateType, dimensions_for, resolve_type

logger = logging.getLogger(__name__)


def _as_keys(source) -> list:
    """Flatten a plate, a label or an iterable of either into a list."""
    if isinstance(source, (Plate, str)):
        return [source]
    if source is None:
        raise TypeError("Expected a plate, a label or an iterable of them, got None")
    keys = []
    for item in source:
        keys.extend(_as_keys(item))
    return keys


class Stack(NavigableCollection):
    """Plates sharing the stack's dimensions, ordered by ``Plate.sort_key``.

    Members are the caller's plates, not copies. A plate is a member at most
    once, where "once" means structural equality. Plates are mutable, so the
    order is re-established on every read rather than cached.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        label: Optional[str] = None,
        plates=None,
        numeric_type: NumericType = NumericType.INTEGER
    ):
        self.rows = rows
        self.columns = columns
        self.type, self.descriptor = resolve_type(rows, columns, kind="Stack")
        self.label = label or f"Stack{numeric_type.value}"
        self.numeric_type = numeric_type
        self._plates: List[Plate] = []
        if plates is not None:
            self.add(plates)

    @classmethod
    def of_type(
        cls,
        plate_type: PlateType,
        label: Optional[str] = None,
        plates=None,
        numeric_type: NumericType = NumericType.INTEGER
    ) -> "Stack":
        """Create a stack for one of the plate presets."""
        rows, columns = dimensions_for(plate_type)
        return cls(rows, columns, label=label, plates=plates, numeric_type=numeric_type)

    @classmethod
    def from_plates(cls, plates, label: Optional[str] = None) -> "Stack":
        """Create a stack sized after the first plate given."""
        plates = _as_keys(plates)
        if not plates:
            raise PlateDimensionError("Cannot size a stack from an empty plate list")
        first = plates[0]
        if not isinstance(first, Plate):
            raise TypeError(f"Expected a plate, got {first!r}")
        return cls(first.rows, first.columns, label=label, plates=plates, numeric_type=first.numeric_type)

    def copy(self) -> "Stack":
        """Deep copy: every plate is copied with its wells and groups."""
        return Stack(
            self.rows, self.columns,
            label=self.label,
            plates=[plate.copy() for plate in self._ordered()],
            numeric_type=self.numeric_type
        )

    @property
    def type_string(self) -> str:
        return self.numeric_type.value

    # Validation

    def _plates_in(self, source) -> List[Plate]:
        plates = []
        for item in _as_keys(source):
            if not isinstance(item, Plate):
                raise TypeError(f"Expected a plate, got {item!r}")
            if (item.rows, item.columns) != (self.rows, self.columns):
                raise PlateDimensionError(
                    f"Invalid plate dimensions. Found: {item.rows}x{item.columns}. "
                    f"Expected: {self.rows}x{self.columns}."
                )
            plates.append(item)
        return plates

    def _ordered(self) -> List[Plate]:
        self._plates.sort(key=Plate.sort_key)
        return self._plates

    def _matching(self, key) -> List[Plate]:
        if isinstance(key, str):
            return [plate for plate in self._ordered() if plate.label == key]
        return [plate for plate in self._ordered() if plate == key]

    # Verbs

    def add(self, plates) -> bool:
        """Add plates; returns False if any was already a member.

        Raises:
            PlateDimensionError: If any plate's dimensions differ from the stack.
        """
        added = True
        for plate in self._plates_in(plates):
            if plate in self._plates:
                logger.debug("Plate %s already exists in %s", plate.label, self.label)
                added = False
                continue
            self._plates.append(plate)
        return added

    def remove(self, plates) -> bool:
        """Remove plates or every plate carrying a label; False if any was missing."""
        removed = True
        for key in _as_keys(plates):
            matches = self._matching(key)
            if not matches:
                logger.debug("Plate %s does not exist in %s", key, self.label)
                removed = False
            for plate in matches:
                self._plates.remove(plate)
        return removed

    def replace(self, plates, policy=None) -> bool:
        """Swap in plates for members with the same label.

        Unmatched plates are added under UPSERT and skipped under
        EXISTING_ONLY, in which case the result is False.
        """
        policy = ReplacePolicy(policy or settings.replace_policy)
        replaced = True
        for plate in self._plates_in(plates):
            matches = self._matching(plate.label)
            if not matches and policy is not ReplacePolicy.UPSERT:
                logger.debug("Plate %s is not a member of %s; not replaced", plate.label, self.label)
                replaced = False
                continue
            for member in matches:
                self._plates.remove(member)
            if plate not in self._plates:
                self._plates.append(plate)
        return replaced

    def retain(self, plates) -> bool:
        """Keep only the given plates or labels; True if any were removed."""
        keys = _as_keys(plates)
        kept = [
            plate for plate in self._plates
            if any(plate.label == key if isinstance(key, str) else plate == key for key in keys)
        ]
        changed = len(kept) != len(self._plates)
        self._plates = kept
        return changed

    def contains(self, plates) -> bool:
        """True if every given plate or label is present."""
        return all(self._matching(key) for key in _as_keys(plates))

    def get(self, key) -> Optional[Plate]:
        """The first member matching a label or plate, or None."""
        matches = self._matching(key)
        return matches[0] if matches else None

    def get_plates(self, keys) -> Optional[List[Plate]]:
        """Members matching any given plate or label, in stack order, or None."""
        keys = _as_keys(keys)
        found = [
            plate for plate in self._ordered()
            if any(plate.label == key if isinstance(key, str) else plate == key for key in keys)
        ]
        return found or None

    def labels(self) -> List[str]:
        return [plate.label for plate in self._ordered()]

    def all_plates(self) -> List[Plate]:
        return list(self._ordered())

    def clear(self) -> None:
        self._plates.clear()

    def is_empty(self) -> bool:
        return not self._plates

    # Navigation hooks

    def _key_for(self, target):
        if isinstance(target, str):
            plate = self.get(target)
            if plate is None:
                logger.debug("Plate %s does not exist in %s", target, self.label)
                return None
            return plate.sort_key()
        if not isinstance(target, Plate):
            raise TypeError(f"Expected a plate or a label, got {type(target).__name__}")
        return target.sort_key()

    def _sort_keys(self) -> list:
        return [plate.sort_key() for plate in self._ordered()]

    def _bisect_left(self, key) -> int:
        return bisect.bisect_left(self._sort_keys(), key)

    def _bisect_right(self, key) -> int:
        return bisect.bisect_right(self._sort_keys(), key)

    def _item_at(self, position: int) -> Plate:
        return self._ordered()[position]

    def _pop_at(self, position: int) -> Plate:
        return self._ordered().pop(position)

    def _snapshot(self, items) -> "Stack":
        return Stack(self.rows, self.columns, plates=items, numeric_type=self.numeric_type)

    # Protocols

    def __len__(self) -> int:
        return len(self._plates)

    def __iter__(self):
        return iter(list(self._ordered()))

    def __contains__(self, key) -> bool:
        return bool(self._matching(key))

    def __getitem__(self, position):
        if isinstance(position, slice):
            check_slice(position, len(self))
        try:
            return self._ordered()[position]
        except IndexError:
            raise DataRangeError(f"Position {position} is outside a stack of {len(self)} plates")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self.label == other.label
            and self.type == other.type
            and self.descriptor == other.descriptor
            and self.numeric_type == other.numeric_type
            and self._ordered() == other._ordered()
        )

    __hash__ = None

    def __str__(self) -> str:
        return f"Type: {self.descriptor} Label: {self.label}"

    def __repr__(self) -> str:
        return f"Stack({self.rows}x{self.columns}, label={self.label!r}, plates={self.labels()})"
