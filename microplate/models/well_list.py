"""Well list: a labelled, ordered set of well indices used to declare groups."""
from functools import total_ordering
from typing import Iterable, List, Optional

from sortedcontainers import SortedSet

from microplate.config import settings
from microplate.models.well_index import WellIndex, split_tokens


def _as_index(item) -> WellIndex:
    if isinstance(item, WellIndex):
        return item
    if isinstance(item, str):
        return WellIndex.parse(item)
    # Wells and anything else exposing row/column
    return WellIndex(item.row, item.column)


@total_ordering
class WellList:
    """Ordered, de-duplicated well indices with an optional label.

    Two lists are equal when they hold the same indices; the label does not
    take part. Lists order by size, then by comparing indices from the
    highest down.
    """

    def __init__(self, indices: Optional[Iterable] = None, label: Optional[str] = None):
        self._indices = SortedSet()
        self.label = label
        if isinstance(indices, WellList):
            self.label = label if label is not None else indices.label
        if indices is not None:
            for item in indices:
                self.add(item)

    @classmethod
    def parse(cls, text: str, delimiter: Optional[str] = None, label: Optional[str] = None) -> "WellList":
        """Build a list from a delimiter-separated index string."""
        tokens = split_tokens(text, delimiter or settings.default_delimiter)
        return cls([WellIndex.parse(token) for token in tokens], label=label)

    def add(self, index) -> None:
        self._indices.add(_as_index(index))

    def remove(self, index) -> None:
        self._indices.discard(_as_index(index))

    def indices(self) -> List[WellIndex]:
        return list(self._indices)

    def copy(self) -> "WellList":
        return WellList(self._indices, label=self.label)

    def __contains__(self, index) -> bool:
        try:
            return _as_index(index) in self._indices
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self):
        return iter(self._indices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WellList):
            return NotImplemented
        return list(self._indices) == list(other._indices)

    __hash__ = None

    def __lt__(self, other) -> bool:
        if not isinstance(other, WellList):
            return NotImplemented
        if len(self) != len(other):
            return len(self) < len(other)
        for mine, theirs in zip(reversed(self._indices), reversed(other._indices)):
            if mine != theirs:
                return mine < theirs
        return False

    def __str__(self) -> str:
        return f"{self.label} [{', '.join(str(index) for index in self._indices)}]"

    def __repr__(self) -> str:
        return f"WellList({self})"
