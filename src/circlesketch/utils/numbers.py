"""Stable text formatting for coordinates and parameters."""

from decimal import Decimal


def format_number(value: float) -> str:
    """Format a float as short, round-trip-safe positional text.

    Integral values print without a fractional part ("1", not "1.0") and
    exponents are expanded, so the output stays inside the subset of the
    SVG number grammar the path lexer accepts.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(-0.0)
        '0'
        >>> format_number(1e-07)
        '0.0000001'
    """
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text
