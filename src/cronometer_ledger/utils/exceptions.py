"""Custom exceptions for the cronometer ledger."""


class CronometerLedgerError(Exception):
    """Base exception for all cronometer ledger errors."""

    pass


class ConfigurationError(CronometerLedgerError):
    """Raised when there is a configuration error."""

    pass


class ParsingError(CronometerLedgerError):
    """Raised when an export stream cannot be parsed."""

    pass


class TableReadError(ParsingError):
    """Raised when the underlying comma-separated table cannot be read."""

    pass


class AmountFormatError(ParsingError):
    """Raised when a composite amount cell is not of the form 'value unit'."""

    def __init__(self, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(f"invalid amount format {raw_value!r}, expected 'value unit'")


class CoercionError(ParsingError):
    """Raised when a numeric cell cannot be converted to a float."""

    def __init__(self, field: str, raw_value: str, reason: str = "") -> None:
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        message = f"parsing {field} value {raw_value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TimestampError(ParsingError):
    """Raised when a date and time pair does not match the export layout."""

    def __init__(self, combined: str, reason: str) -> None:
        self.combined = combined
        self.reason = reason
        super().__init__(f"invalid date/time format {combined!r}: {reason}")
