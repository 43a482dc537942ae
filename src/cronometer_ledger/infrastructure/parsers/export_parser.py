"""
Parser for Cronometer export tables.

Decodes each data row through the family's column dispatch table into a
row buffer, then assembles the timestamp and builds the typed record.
A parse call is atomic: the first failing row aborts it.
"""

import logging
from datetime import tzinfo
from typing import Any, TextIO, cast

from pydantic import ValidationError

from cronometer_ledger.domain.records import (
    BiometricRecord,
    ExerciseRecord,
    ExportKind,
    ServingRecord,
)
from cronometer_ledger.infrastructure.parsers.columns import COLUMN_TABLES, DAY, TIME
from cronometer_ledger.infrastructure.parsers.table_reader import HeaderIndex, read_table
from cronometer_ledger.utils.exceptions import ParsingError
from cronometer_ledger.utils.timezone_utils import (
    DEFAULT_TIMEZONE,
    MIDNIGHT,
    assemble_timestamp,
    resolve_timezone,
)

logger = logging.getLogger(__name__)

ExportRecord = ServingRecord | ExerciseRecord | BiometricRecord

RECORD_TYPES: dict[ExportKind, type[ExportRecord]] = {
    ExportKind.SERVINGS: ServingRecord,
    ExportKind.EXERCISES: ExerciseRecord,
    ExportKind.BIOMETRICS: BiometricRecord,
}


class ExportParser:
    """
    Parser for one Cronometer export family.

    The header vocabulary is chosen by ``kind``; it is never inferred from
    the header row itself.
    """

    def __init__(self, kind: ExportKind | str) -> None:
        """
        Initialize export parser.

        Args:
            kind: Export family (servings, exercises or biometrics).
        """
        self.kind = ExportKind(kind)
        self.columns = COLUMN_TABLES[self.kind]
        self.record_type = RECORD_TYPES[self.kind]

    def decode_row(self, row: list[str], headers: HeaderIndex) -> dict[str, Any]:
        """
        Decode the cells of one data row into a row buffer.

        Args:
            row: Cell strings in column order.
            headers: Column position to name mapping.

        Returns:
            Buffer of field values, including the staged day and time strings.

        Raises:
            ParsingError: If a cell cannot be decoded.
        """
        buffer: dict[str, Any] = {}

        for position, value in enumerate(row):
            decoder = self.columns.get(headers.get(position, ""))
            if decoder is None:
                continue
            buffer.update(decoder(value))

        return buffer

    def finalize_row(self, buffer: dict[str, Any], timezone: str | tzinfo) -> ExportRecord:
        """
        Assemble the timestamp and build the record from a row buffer.

        Args:
            buffer: Output of ``decode_row``.
            timezone: Zone the row's wall-clock time is expressed in.

        Returns:
            Typed record.

        Raises:
            TimestampError: If the day/time pair is malformed.
            ParsingError: If the record cannot be constructed.
        """
        fields = dict(buffer)
        date_str = fields.pop(DAY, "")
        time_str = fields.pop(TIME, "") or MIDNIGHT

        recorded_time = assemble_timestamp(date_str, time_str, timezone)

        try:
            return self.record_type(recorded_time=recorded_time, **fields)
        except ValidationError as e:
            raise ParsingError(f"Invalid {self.kind.value} record: {e}") from e

    def parse(
        self, stream: TextIO, timezone: str | tzinfo | None = DEFAULT_TIMEZONE
    ) -> list[ExportRecord]:
        """
        Parse an export stream into records.

        Args:
            stream: Text stream with a header row followed by data rows.
            timezone: Zone applied to every row's Day/Time columns.

        Returns:
            Records in input row order.

        Raises:
            ConfigurationError: If the timezone is unknown.
            ParsingError: If the table or any row cannot be parsed.
        """
        tz = resolve_timezone(timezone)
        headers, rows = read_table(stream)

        ignored = [name for name in headers.values() if name not in self.columns]
        if ignored:
            logger.debug(f"Ignoring unrecognized {self.kind.value} columns: {ignored}")

        records: list[ExportRecord] = []

        for row_number, row in enumerate(rows, start=1):
            try:
                records.append(self.finalize_row(self.decode_row(row, headers), tz))
            except ParsingError as e:
                logger.error(f"Failed to parse {self.kind.value} row {row_number}: {e}")
                raise

        logger.info(f"Parsed {len(records)} {self.kind.value} records")
        return records


def parse_servings_export(
    stream: TextIO, timezone: str | tzinfo | None = DEFAULT_TIMEZONE
) -> list[ServingRecord]:
    """Parse a servings export (food diary with nutrient breakdown)."""
    return cast(list[ServingRecord], ExportParser(ExportKind.SERVINGS).parse(stream, timezone))


def parse_exercise_export(
    stream: TextIO, timezone: str | tzinfo | None = DEFAULT_TIMEZONE
) -> list[ExerciseRecord]:
    """Parse an exercises export."""
    return cast(list[ExerciseRecord], ExportParser(ExportKind.EXERCISES).parse(stream, timezone))


def parse_biometric_export(
    stream: TextIO, timezone: str | tzinfo | None = DEFAULT_TIMEZONE
) -> list[BiometricRecord]:
    """Parse a biometrics export."""
    return cast(list[BiometricRecord], ExportParser(ExportKind.BIOMETRICS).parse(stream, timezone))
