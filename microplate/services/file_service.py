"""Delimited plate-map and table import and export."""
import io
import logging
from typing import Dict, Optional

import pandas as pd

from microplate.config import settings
from microplate.exceptions import PlateBoundsError
from microplate.models import NumericType, Plate, Well, WellIndex, WellSet
from microplate.models.well_collection import well_key
from microplate.models.well_index import row_to_letters

logger = logging.getLogger(__name__)


class FileService:
    """Service for writing and parsing delimiter-separated result files.

    A result is a mapping from wells (or indices, or index strings) to a
    single value per well, as produced by ``plate_to_map``.
    """

    def __init__(self, delimiter: Optional[str] = None, missing_token: Optional[str] = None):
        self.delimiter = delimiter or settings.output_delimiter
        self.missing_token = missing_token or settings.missing_token

    def _keyed(self, result: Dict) -> Dict:
        return {well_key(key): value for key, value in result.items()}

    def _split_label(self, text: str):
        lines = text.strip("\n").splitlines()
        if not lines:
            raise ValueError("Empty document: expected a label line")
        return lines[0], "\n".join(lines[1:])

    # Writers

    def result_to_plate_map(
        self,
        result: Dict,
        rows: int,
        columns: int,
        label: str = "Result",
        delimiter: Optional[str] = None
    ) -> str:
        """
        Render a result as a rows x columns grid.

        Args:
            result: Mapping of well, index or index string to value
            rows: Number of plate rows
            columns: Number of plate columns
            label: First line of the output
            delimiter: Cell separator, defaults to the output delimiter

        Returns:
            The label line, a header of column numbers, then one line per row
        """
        delimiter = delimiter or self.delimiter
        values = self._keyed(result)
        for row, column in values:
            if row >= rows or column > columns:
                raise PlateBoundsError(
                    f"Result well {row_to_letters(row)}{column} lies outside a {rows}x{columns} plate"
                )

        grid = [
            [str(values[(row, column)]) if (row, column) in values else self.missing_token
             for column in range(1, columns + 1)]
            for row in range(rows)
        ]
        df = pd.DataFrame(
            grid,
            index=[row_to_letters(row) for row in range(rows)],
            columns=[str(column) for column in range(1, columns + 1)]
        )
        logger.info("Wrote plate map %s: %d values on a %dx%d grid", label, len(values), rows, columns)
        return f"{label}\n" + df.to_csv(sep=delimiter, lineterminator="\n")

    def result_to_table(self, result: Dict, label: str = "Result", delimiter: Optional[str] = None) -> str:
        """Render a result as "Index/Value" rows in well order."""
        delimiter = delimiter or self.delimiter
        values = self._keyed(result)
        df = pd.DataFrame(
            [(f"{row_to_letters(row)}{column}", str(values[(row, column)])) for row, column in sorted(values)],
            columns=["Index", "Value"]
        )
        logger.info("Wrote table %s: %d values", label, len(values))
        return f"{label}\n" + df.to_csv(sep=delimiter, index=False, lineterminator="\n")

    def plate_to_map(self, plate: Plate, position: int = 0) -> Dict[WellIndex, object]:
        """One value per well: the datum at ``position``. Shorter wells are skipped."""
        return {well.index: well.data[position] for well in plate if len(well) > position}

    # Readers

    def read_plate_map(
        self,
        text: str,
        delimiter: Optional[str] = None,
        numeric_type: NumericType = NumericType.INTEGER
    ) -> Plate:
        """Parse a plate map into a plate holding one datum per filled cell."""
        delimiter = delimiter or self.delimiter
        label, body = self._split_label(text)

        df = pd.read_csv(
            io.StringIO(body),
            sep=delimiter,
            index_col=0,
            dtype=str,
            keep_default_na=False
        )
        # Trailing delimiters leave unnamed empty columns behind
        df = df.loc[:, ~df.columns.str.startswith("Unnamed")]

        plate = Plate(len(df.index), len(df.columns), label=label, numeric_type=numeric_type)
        wells = []
        for row_letters, cells in df.iterrows():
            for column, cell in cells.items():
                cell = cell.strip()
                if not cell or cell == self.missing_token:
                    continue
                wells.append(Well(row_letters.strip(), int(column), data=[cell], numeric_type=numeric_type))
        plate.add_wells(wells)

        logger.info("Read plate map %s: %d wells on %s", label, len(plate), plate.descriptor)
        return plate

    def read_table(
        self,
        text: str,
        delimiter: Optional[str] = None,
        numeric_type: NumericType = NumericType.INTEGER
    ) -> WellSet:
        """Parse an Index/Value table into a well set labelled with the first line."""
        delimiter = delimiter or self.delimiter
        label, body = self._split_label(text)

        df = pd.read_csv(io.StringIO(body), sep=delimiter, dtype=str, keep_default_na=False)
        wells = [
            Well(row["Index"].strip(), data=[row["Value"]], numeric_type=numeric_type)
            for _, row in df.iterrows()
        ]

        logger.info("Read table %s: %d wells", label, len(wells))
        return WellSet(wells, label=label, numeric_type=numeric_type)
