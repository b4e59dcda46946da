"""Well index model and the <row-letters><column-digits> index grammar."""
import re
from functools import total_ordering
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from microplate.exceptions import WellIndexError

ALPHA_BASE = 26
ASCII_OFFSET = 65  # ord("A")

_INDEX_PATTERN = re.compile(r"^([A-Z]+)([0-9]+)$")
_LETTERS_PATTERN = re.compile(r"^[A-Z]+$")


def row_to_letters(row: int) -> str:
    """Convert a zero-based row to its letters: 0 -> A, 25 -> Z, 26 -> AA."""
    if row < 0:
        raise WellIndexError(f"Invalid row index: {row}. Row must be non-negative.")
    letters = ""
    while row >= 0:
        letters = chr(row % ALPHA_BASE + ASCII_OFFSET) + letters
        row = row // ALPHA_BASE - 1
    return letters


def letters_to_row(letters: str) -> int:
    """Convert row letters to a zero-based row: A -> 0, Z -> 25, AA -> 26."""
    upper = letters.strip().upper()
    if not _LETTERS_PATTERN.match(upper):
        raise WellIndexError(f"Invalid row ID: {letters!r}")

    row = ord(upper[-1]) - ASCII_OFFSET
    for power, char in enumerate(reversed(upper[:-1]), start=1):
        row += (ord(char) - ASCII_OFFSET + 1) * ALPHA_BASE ** power
    return row


def parse_row(row) -> int:
    """Accept a row as an int, a decimal string or row letters."""
    if isinstance(row, int) and not isinstance(row, bool):
        return row
    if isinstance(row, str):
        text = row.strip()
        if text.isdigit():
            return int(text)
        return letters_to_row(text)
    raise WellIndexError(f"Invalid row value: {row!r}")


def parse_column(column) -> int:
    """Accept a column as an int or a digit string."""
    if isinstance(column, int) and not isinstance(column, bool):
        return column
    if isinstance(column, str) and column.strip().isdigit():
        return int(column.strip())
    raise WellIndexError(f"Illegal column value: {column!r}")


def parse_index(text: str) -> Tuple[int, int]:
    """Parse an index string such as "A1" or "aa12" into (row, column)."""
    if not isinstance(text, str):
        raise WellIndexError(f"Invalid well index: {text!r}")

    match = _INDEX_PATTERN.match(text.strip().upper())
    if not match:
        raise WellIndexError(f"Invalid well index: {text!r}")

    letters, digits = match.groups()
    return letters_to_row(letters), int(digits)


def split_tokens(text: str, delimiter: str) -> List[str]:
    """Split a delimiter-separated list, trimming each token.

    Raises:
        WellIndexError: If the delimiter is empty or a token is blank.
    """
    if not delimiter:
        raise WellIndexError("The delimiter cannot be empty.")

    tokens = [token.strip() for token in text.split(delimiter)]
    if any(not token for token in tokens):
        raise WellIndexError(f"Empty token in delimited list: {text!r}")
    return tokens


@total_ordering
class WellIndex(BaseModel):
    """Immutable (row, column) key, ordered row-major."""
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    column: int = Field(ge=1)

    def __init__(self, row: int, column: int, **kwargs):
        super().__init__(row=row, column=column, **kwargs)

    @classmethod
    def parse(cls, text: str) -> "WellIndex":
        """Build an index from its string form."""
        row, column = parse_index(text)
        return cls(row, column)

    @property
    def row_string(self) -> str:
        return row_to_letters(self.row)

    def key(self) -> Tuple[int, int]:
        return self.row, self.column

    def __lt__(self, other):
        if not isinstance(other, WellIndex):
            return NotImplemented
        return self.key() < other.key()

    def __str__(self) -> str:
        return f"{self.row_string}{self.column}"

    def __repr__(self) -> str:
        return f"WellIndex({self})"
