"""
Comma-separated table reading.

Reads a whole export stream with pandas, keeping every cell as its literal
string, and indexes the header row by column position.
"""

import logging
from collections.abc import Sequence
from typing import TextIO

import pandas as pd

from cronometer_ledger.utils.exceptions import TableReadError

logger = logging.getLogger(__name__)

HeaderIndex = dict[int, str]
Row = list[str]


def index_headers(header_row: Sequence[str]) -> HeaderIndex:
    """
    Map column positions to the column names found in the header row.

    Names are taken as-is: duplicates and empty names are accepted.

    Args:
        header_row: Cells of the first table row.

    Returns:
        Mapping of column position to column name.
    """
    return {position: name for position, name in enumerate(header_row)}


def read_table(stream: TextIO) -> tuple[HeaderIndex, list[Row]]:
    """
    Read a comma-separated table into a header index and data rows.

    Every data row must have as many cells as the header row.

    Args:
        stream: Text stream positioned at the header row.

    Returns:
        Tuple of (header index, data rows in input order).

    Raises:
        TableReadError: If the table structure cannot be read.
    """
    try:
        df = pd.read_csv(
            stream,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            engine="c",
        )
    except pd.errors.EmptyDataError:
        logger.debug("Empty export stream, no header row")
        return {}, []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise TableReadError(f"Failed to read export table: {e}") from e

    table: list[Row] = []

    for line_number, row in enumerate(df.itertuples(index=False, name=None)):
        # With na_filter off, empty cells stay "" and only reader padding is non-str.
        missing = sum(1 for value in row if not isinstance(value, str))
        if missing:
            raise TableReadError(
                f"Failed to read export table: row {line_number} has "
                f"{len(row) - missing} fields, expected {len(row)}"
            )
        table.append(list(row))

    headers = index_headers(table[0])
    logger.debug(f"Indexed {len(headers)} columns: {list(headers.values())}")

    return headers, table[1:]
