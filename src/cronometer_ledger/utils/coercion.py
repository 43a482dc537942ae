"""
Cell value coercion.

Converts raw export cells into typed values. An empty numeric cell always
coerces to zero; the export does not distinguish "not tracked" from
"tracked as zero".
"""

import re

from cronometer_ledger.utils.exceptions import AmountFormatError, CoercionError

_WHITESPACE_RUN = re.compile(r"\s+")


def parse_float(value: str) -> float:
    """
    Convert a cell string to a float, treating the empty string as zero.

    Args:
        value: Raw cell text, taken literally (never trimmed).

    Returns:
        Parsed float value.

    Raises:
        ValueError: If the text is not a plain float literal.
    """
    if value == "":
        return 0.0

    if value != value.strip() or "_" in value:
        raise ValueError(f"could not convert string to float: {value!r}")

    return float(value)


def parse_field_float(value: str, field: str) -> float:
    """
    Convert a cell string to a float, attributing failures to a field.

    Args:
        value: Raw cell text.
        field: Human readable field label used in the error message.

    Returns:
        Parsed float value.

    Raises:
        CoercionError: If the text is not numeric.
    """
    try:
        return parse_float(value)
    except ValueError as e:
        raise CoercionError(field, value, str(e)) from e


def split_amount(value: str) -> tuple[float, str]:
    """
    Split a composite "value unit" cell such as "123.4 g".

    The split happens on the first whitespace run; everything after it is
    the unit, kept verbatim.

    Args:
        value: Raw amount cell.

    Returns:
        Tuple of (quantity value, quantity unit).

    Raises:
        AmountFormatError: If the cell has no whitespace separator.
        CoercionError: If the quantity prefix is not numeric.
    """
    parts = _WHITESPACE_RUN.split(value, maxsplit=1)
    if len(parts) < 2:
        raise AmountFormatError(value)

    quantity, unit = parts
    return parse_field_float(quantity, "quantity"), unit


def parse_reading(value: str, field: str) -> float:
    """Coerce a biometric reading; composite readings like "120/80" become zero."""
    if "/" in value:
        return 0.0
    return parse_field_float(value, field)
