"""Sorted-set navigation shared by WellSet, Plate and Stack."""
from typing import Any, List, Optional

from microplate.exceptions import DataRangeError


def check_slice(position: slice, size: int) -> None:
    """Raise DataRangeError when a slice bound lies outside ``size`` members."""
    for bound in (position.start, position.stop):
        if bound is not None and not -size <= bound <= size:
            raise DataRangeError(f"Range {position.start}:{position.stop} is outside a collection of {size}")


class NavigableCollection:
    """Total-order navigation over a sorted, de-duplicated collection.

    Subclasses keep their members sorted by a key and supply the hooks
    below. Every query here treats "nothing there" as None rather than an
    error, and range queries return fresh snapshots built by ``_snapshot``.
    A target whose key is None (a label the collection does not hold) finds
    nothing and bounds an empty range.
    """

    def _key_for(self, target) -> Any:
        """Sort key for an arbitrary target (member, index, string...), or None."""
        raise NotImplementedError

    def _bisect_left(self, key) -> int:
        raise NotImplementedError

    def _bisect_right(self, key) -> int:
        raise NotImplementedError

    def _item_at(self, position: int):
        raise NotImplementedError

    def _pop_at(self, position: int):
        raise NotImplementedError

    def _snapshot(self, items: List):
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def _items(self, start: int, stop: int) -> List:
        return [self._item_at(i) for i in range(start, stop)]

    # Ends

    def first(self):
        return self._item_at(0) if len(self) else None

    def last(self):
        return self._item_at(len(self) - 1) if len(self) else None

    def poll_first(self):
        """Remove and return the lowest member."""
        return self._pop_at(0) if len(self) else None

    def poll_last(self):
        """Remove and return the highest member."""
        return self._pop_at(len(self) - 1) if len(self) else None

    # Neighbours

    def floor(self, target) -> Optional[Any]:
        """Greatest member <= target."""
        key = self._key_for(target)
        if key is None:
            return None
        position = self._bisect_right(key)
        return self._item_at(position - 1) if position > 0 else None

    def ceiling(self, target) -> Optional[Any]:
        """Least member >= target."""
        key = self._key_for(target)
        if key is None:
            return None
        position = self._bisect_left(key)
        return self._item_at(position) if position < len(self) else None

    def higher(self, target) -> Optional[Any]:
        """Least member strictly > target."""
        key = self._key_for(target)
        if key is None:
            return None
        position = self._bisect_right(key)
        return self._item_at(position) if position < len(self) else None

    def lower(self, target) -> Optional[Any]:
        """Greatest member strictly < target."""
        key = self._key_for(target)
        if key is None:
            return None
        position = self._bisect_left(key)
        return self._item_at(position - 1) if position > 0 else None

    # Ranges

    def head_set(self, target, inclusive: bool = False):
        """Members below target (or up to it when inclusive)."""
        key = self._key_for(target)
        if key is None:
            return self._snapshot([])
        stop = self._bisect_right(key) if inclusive else self._bisect_left(key)
        return self._snapshot(self._items(0, stop))

    def tail_set(self, target, inclusive: bool = True):
        """Members from target upward (strictly above when not inclusive)."""
        key = self._key_for(target)
        if key is None:
            return self._snapshot([])
        start = self._bisect_left(key) if inclusive else self._bisect_right(key)
        return self._snapshot(self._items(start, len(self)))

    def sub_set(self, low, high, low_inclusive: bool = True, high_inclusive: bool = False):
        """Members between two targets; half-open [low, high) by default."""
        low_key, high_key = self._key_for(low), self._key_for(high)
        if low_key is None or high_key is None:
            return self._snapshot([])
        if high_key < low_key:
            raise ValueError(f"Range start {low} is above range end {high}")

        start = self._bisect_left(low_key) if low_inclusive else self._bisect_right(low_key)
        stop = self._bisect_right(high_key) if high_inclusive else self._bisect_left(high_key)
        return self._snapshot(self._items(start, max(start, stop)))

    def descending(self) -> List:
        """Members from highest to lowest."""
        return self._items(0, len(self))[::-1]

    def __reversed__(self):
        return iter(self.descending())
