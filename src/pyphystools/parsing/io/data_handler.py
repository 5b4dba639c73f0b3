import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation, Overflow
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import pandas as pd

from pyphystools.algorithms.interpolation import format_decimal, to_decimal
from pyphystools.core.exceptions import ColumnIndexError, DataFormatError
from pyphystools.core.piecewise_function import Number, PiecewiseFunction
from pyphystools.data.constants import DECIMAL_CONTEXT, FileConstants, ProcessingConstants, UnitsPrefix

logger = logging.getLogger(__name__)


def read_function_points(file_path: Union[str, Path],
                         abscissa_multiplier: Number = 1,
                         value_multiplier: Number = 1,
                         expected_extension: str = ProcessingConstants.DEFAULT_EXTENSION,
                         separator: str = ProcessingConstants.DEFAULT_SEPARATOR,
                         column_count: int = ProcessingConstants.DEFAULT_COLUMN_COUNT,
                         columns: Sequence[int] = ProcessingConstants.DEFAULT_COLUMNS) -> Dict[Decimal, Decimal]:
    """
    Reads (abscissa, value) samples from a delimited text file, one sample per line.

    A line is kept when it has exactly column_count fields, trailing empty fields aside,
    and its abscissa field is a numeric literal; any other line is skipped, as are lines
    whose scaled values fall outside the decimal context. Later occurrences of an abscissa
    are dropped.
    Args:
        file_path: Path to the data file
        abscissa_multiplier: Multiplier converting the abscissa column to SI
        value_multiplier: Multiplier converting the value column to SI
        expected_extension: Extension the file must carry, without the dot
        separator: Column separator; a single character is literal, longer ones are regular expressions
        column_count: Number of fields of a valid line
        columns: Indices of the abscissa and value columns
    Returns:
        Normalized abscissa to value mapping, in file order
    Raises:
        DataFormatError: If the file extension is not the expected one
        ColumnIndexError: If a column index is outside [0, column_count)
        FileNotFoundError: If the specified file doesn't exist
    """
    file_path = Path(file_path)
    abscissa_column, value_column = _validate_columns(columns, column_count)
    extension = file_path.name.split(".")[-1]
    if extension != expected_extension.lstrip("."):
        raise DataFormatError(f"Unexpected file extension '{extension}' for {file_path}, "
                              f"expected '{expected_extension}'")
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise DataFormatError(f"Path is not a file: {file_path}")
    abscissa_multiplier = to_decimal(abscissa_multiplier)
    value_multiplier = to_decimal(value_multiplier)
    logger.debug("Reading function data from %s (separator=%r, columns=%d)", file_path, separator, column_count)
    cells = _read_cells(file_path, separator, column_count)
    points: Dict[Decimal, Decimal] = {}
    if cells.empty:
        logger.info("Loaded 0 points from %s (no data lines)", file_path)
        return points
    complete = (cells[list(range(column_count))] != "").all(axis=1) & (cells[column_count] == "")
    numeric = cells[abscissa_column].str.fullmatch(ProcessingConstants.NUMBER_REGEX)
    rows = cells[complete & numeric.astype(bool)]
    skipped = len(cells) - len(rows)
    duplicates = 0
    for abscissa_text, value_text in zip(rows[abscissa_column], rows[value_column]):
        abscissa = _scaled_decimal(abscissa_text, abscissa_multiplier)
        value = _scaled_decimal(value_text, value_multiplier)
        if abscissa is None or value is None:
            logger.debug("Skipping non-numeric or out-of-range sample (%s, %s) in %s",
                         abscissa_text, value_text, file_path)
            skipped += 1
            continue
        if abscissa in points:
            duplicates += 1
            continue
        points[abscissa] = value
    if duplicates:
        logger.warning("Found %d duplicate abscissas in %s, keeping the first occurrences", duplicates, file_path)
    logger.info("Loaded %d points from %s (%d lines skipped)", len(points), file_path, skipped)
    return points


def _validate_columns(columns: Sequence[int], column_count: int) -> Sequence[int]:
    """Check that the abscissa and value column indices exist in a line of column_count fields."""
    if len(columns) != 2:
        raise ColumnIndexError(f"Expected an abscissa and a value column, got {list(columns)}")
    for column in columns:
        if not 0 <= column < column_count:
            raise ColumnIndexError(f"Column index {column} out of bounds (lines have {column_count} columns)")
    return columns


def _read_cells(file_path: Path, separator: str, column_count: int) -> pd.DataFrame:
    """
    Read every non-blank line into column_count + 1 stripped string columns.

    The last column collects what follows the expected fields, so it stays empty
    for lines of the right width, trailing separator included.
    """
    try:
        frame = pd.read_csv(
            file_path,
            sep=separator,
            header=None,
            names=list(range(column_count + 1)),
            index_col=False,
            dtype=str,
            engine='python',  # Explicitly specify engine for regex separator
            on_bad_lines='skip',
            skip_blank_lines=True,
            keep_default_na=False,
            encoding=FileConstants.DEFAULT_ENCODING
        )
    except pd.errors.EmptyDataError:
        logger.warning("No data found in %s", file_path)
        return pd.DataFrame()
    if frame.empty:
        return frame
    return frame.fillna("").apply(lambda column: column.astype(str).str.strip())


def _scaled_decimal(text: str, multiplier: Decimal) -> Optional[Decimal]:
    """Canonical product of a decimal literal and a multiplier, or None if it is not a finite decimal in range."""
    try:
        result = Decimal(text)
        if not result.is_finite():
            return None
        return format_decimal(DECIMAL_CONTEXT.multiply(result, multiplier))
    except (InvalidOperation, Overflow):
        return None


class FunctionFileLoader(ABC):
    """Strategy turning a data file into a PiecewiseFunction."""

    @abstractmethod
    def load_function(self, file_path: Union[str, Path], abscissa_unit: UnitsPrefix,
                      value_unit: UnitsPrefix) -> PiecewiseFunction:
        """
        Load the function stored in a file.
        Args:
            file_path: File containing the function values
            abscissa_unit: Unit prefix of the abscissa column
            value_unit: Unit prefix of the value column
        Raises:
            DataFormatError: If the file has the wrong extension or shape
            OSError: If the file cannot be read
            IndexError: If a column is out of bounds
        """


class DelimitedFileLoader(FunctionFileLoader):
    """Loader for delimited text files of a fixed layout."""

    def __init__(self, expected_extension: str = ProcessingConstants.DEFAULT_EXTENSION,
                 separator: str = ProcessingConstants.DEFAULT_SEPARATOR,
                 column_count: int = ProcessingConstants.DEFAULT_COLUMN_COUNT,
                 columns: Sequence[int] = ProcessingConstants.DEFAULT_COLUMNS) -> None:
        self.expected_extension = expected_extension
        self.separator = separator
        self.column_count = column_count
        self.columns = tuple(_validate_columns(columns, column_count))
        logger.debug("DelimitedFileLoader configured for '.%s' files with %d columns",
                     expected_extension.lstrip("."), column_count)

    def load_function(self, file_path: Union[str, Path], abscissa_unit: UnitsPrefix = UnitsPrefix.UNITY,
                      value_unit: UnitsPrefix = UnitsPrefix.UNITY) -> PiecewiseFunction:
        logger.info("Loading function from %s (abscissa unit: %s, value unit: %s)",
                    file_path, abscissa_unit.name, value_unit.name)
        return PiecewiseFunction.from_file(file_path, abscissa_unit.multiplier, value_unit.multiplier,
                                           self.expected_extension, self.separator, self.column_count, self.columns)

    def __repr__(self) -> str:
        return (f"DelimitedFileLoader(expected_extension={self.expected_extension!r}, separator={self.separator!r}, "
                f"column_count={self.column_count}, columns={self.columns})")
