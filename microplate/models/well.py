"""Well model: an addressable plate location holding numeric measurements."""
from numbers import Number
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, Field

from microplate.config import settings
from microplate.exceptions import DataRangeError, NumericTypeError
from microplate.models.numeric import NumericType
from microplate.models.well_index import (
    WellIndex, parse_column, parse_index, parse_row, row_to_letters, split_tokens
)


class Well(BaseModel):
    """A single well: (row, column) plus an ordered list of values.

    Equality, hashing and ordering use the index only, so two wells at the
    same location are the same member of a set whatever data they hold.
    """
    row: int = Field(ge=0)
    column: int = Field(ge=1)
    numeric_type: NumericType = NumericType.INTEGER
    data: List[Any] = Field(default_factory=list)

    def __init__(
        self,
        row,
        column=None,
        data: Optional[Iterable] = None,
        numeric_type: NumericType = NumericType.INTEGER,
        **kwargs
    ):
        if column is not None and data is None and not isinstance(column, (str, int)):
            data, column = column, None
        if column is None:
            row, column = parse_index(row)
        else:
            row, column = parse_row(row), parse_column(column)
        numeric_type = NumericType(numeric_type)
        super().__init__(
            row=row,
            column=column,
            numeric_type=numeric_type,
            data=[numeric_type.coerce(v) for v in data] if data is not None else [],
            **kwargs
        )

    # Index accessors

    @property
    def index(self) -> WellIndex:
        return WellIndex(self.row, self.column)

    @property
    def index_string(self) -> str:
        return f"{self.row_string}{self.column}"

    @property
    def row_string(self) -> str:
        return row_to_letters(self.row)

    @property
    def type_string(self) -> str:
        return self.numeric_type.value

    def key(self):
        return self.row, self.column

    # Value sources

    def _values(self, source, delimiter: Optional[str] = None) -> List[Any]:
        """Flatten a value source into coerced values.

        Accepts a number, a delimiter-separated string of numbers, a Well,
        or an iterable of numbers or wells (a WellSet or Plate included).
        Wells contribute their data in the source's iteration order.
        """
        if isinstance(source, Well):
            return [self.numeric_type.coerce(v) for v in source.data]
        if isinstance(source, str):
            tokens = split_tokens(source, delimiter or settings.default_delimiter)
            return [self.numeric_type.coerce(token) for token in tokens]
        if isinstance(source, Number):
            return [self.numeric_type.coerce(source)]

        values = []
        for item in source:
            if isinstance(item, Well):
                values.extend(self.numeric_type.coerce(v) for v in item.data)
            else:
                values.append(self.numeric_type.coerce(item))
        return values

    def _check_range(self, begin: int, end: int) -> None:
        if begin < 0:
            raise DataRangeError(f"Indices must be positive values: {begin}")
        if begin > end:
            raise DataRangeError("The starting index must be less than the ending index.")
        if end > len(self.data):
            raise DataRangeError(f"Ending index does not exist: {end}")

    # Adding and replacing data

    def add(self, source, delimiter: Optional[str] = None) -> None:
        """Append values to the end of the data list."""
        self.data.extend(self._values(source, delimiter))

    def replace_data(self, source, delimiter: Optional[str] = None) -> None:
        """Replace the data list wholesale."""
        self.data = self._values(source, delimiter)

    # Removing data

    def remove(self, source, delimiter: Optional[str] = None) -> None:
        """Remove every occurrence of each value found in the source."""
        doomed = set(self._values(source, delimiter))
        self.data = [v for v in self.data if v not in doomed]

    def remove_range(self, begin: int, end: int) -> None:
        """Remove the positions [begin, end)."""
        self._check_range(begin, end)
        self.data = self.data[:begin] + self.data[end:]

    # Retaining data

    def retain(self, source, delimiter: Optional[str] = None) -> None:
        """Keep only values found in the source.

        Against a WellSet or other collection of wells the intersection is
        taken successively, so a value survives only if every well holds it.
        """
        if not isinstance(source, (Well, str, Number)):
            source = list(source)
            if source and all(isinstance(item, Well) for item in source):
                for well in source:
                    self.retain(well)
                return

        kept = set(self._values(source, delimiter))
        self.data = [v for v in self.data if v in kept]

    def retain_range(self, begin: int, end: int) -> None:
        """Keep only the positions [begin, end)."""
        self._check_range(begin, end)
        self.data = self.data[begin:end]

    # Queries

    def index_of(self, value) -> Optional[int]:
        """First position of a value, or None."""
        try:
            value = self.numeric_type.coerce(value)
        except NumericTypeError:
            return None
        for position, datum in enumerate(self.data):
            if datum == value:
                return position
        return None

    def last_index_of(self, value) -> Optional[int]:
        """Last position of a value, or None."""
        try:
            value = self.numeric_type.coerce(value)
        except NumericTypeError:
            return None
        for position in range(len(self.data) - 1, -1, -1):
            if self.data[position] == value:
                return position
        return None

    def sub_list(self, begin: int, length: int) -> "Well":
        """New well at the same index holding data[begin:begin + length]."""
        if length < 0:
            raise DataRangeError(f"Length must be non-negative: {length}")
        self._check_range(begin, begin + length)
        return Well(
            self.row, self.column,
            data=self.data[begin:begin + length],
            numeric_type=self.numeric_type
        )

    def clear(self) -> None:
        self.data = []

    def is_empty(self) -> bool:
        return not self.data

    def copy(self) -> "Well":
        """Deep copy with an independent data list."""
        return Well(self.row, self.column, data=self.data, numeric_type=self.numeric_type)

    # Conversions

    def to_float(self) -> List[float]:
        return [float(v) for v in self.data]

    def to_int(self) -> List[int]:
        return [int(v) for v in self.data]

    def to_decimal(self) -> list:
        return [NumericType.BIGDECIMAL.coerce(v) for v in self.data]

    # Protocols

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, position):
        return self.data[position]

    def __contains__(self, value) -> bool:
        try:
            return self.numeric_type.coerce(value) in self.data
        except ValueError:
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __lt__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.key() < other.key()

    def __le__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.key() <= other.key()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.key() > other.key()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.key() >= other.key()

    def __str__(self) -> str:
        return f"{self.index_string} [{', '.join(str(v) for v in self.data)}]"

    def __repr__(self) -> str:
        return f"Well({self})"
