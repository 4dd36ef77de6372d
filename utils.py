"""
Utility functions for ElNotices: cell text, numbers and Swedish formatting
"""
from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

NBSP = "\u00a0"

# whole digits allowed in a cell; keeps quantize within the 28-digit decimal context
MAX_WHOLE_DIGITS = 15


def cell_to_text(value: object) -> str:
    """Render a raw cell value the way a spreadsheet displays it"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def parse_decimal(text: str) -> Decimal:
    """
    Parse a number written with either decimal separator.
    Spaces (regular and non-breaking) are treated as thousands separators.
    Raises ValueError if the text is not a finite number.
    """
    s = text.strip().replace(NBSP, "").replace(" ", "").replace(",", ".")
    if not s:
        raise ValueError("empty number")
    try:
        d = Decimal(s)
    except InvalidOperation:
        raise ValueError(f"not a number: {text!r}")
    if not d.is_finite():
        raise ValueError(f"not a finite number: {text!r}")
    if d and d.adjusted() >= MAX_WHOLE_DIGITS:
        raise ValueError(f"number too large: {text!r}")
    return d


def parse_int(text: str) -> int:
    """Parse an integer cell, dropping any fractional part (truncates toward zero)"""
    return int(parse_decimal(text))


def round_half_up(d: Decimal) -> int:
    """Round to the nearest integer, halves away from zero: 2.5 -> 3, -2.5 -> -3"""
    try:
        return int(d.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValueError(f"cannot round {d}")


def format_decimal_sv(value: float, max_fraction_digits: int = 3) -> str:
    """Format a number the Swedish way, e.g. 1234.5 -> '1 234,5'"""
    step = Decimal(1).scaleb(-max_fraction_digits)
    try:
        d = Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"cannot format {value}")
    sign = "-" if d < 0 else ""
    whole, _, frac = f"{abs(d):f}".partition(".")
    frac = frac.rstrip("0")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)

    out = NBSP.join(groups)
    if frac:
        out += "," + frac
    return sign + out
