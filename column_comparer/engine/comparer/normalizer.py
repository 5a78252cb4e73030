"""
Normalization rules for cell text.
Turns raw spreadsheet values into the text that gets compared and printed.
"""
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any
import logging

logger = logging.getLogger(__name__)


def normalize_cell_text(value: Any) -> str:
    """
    Blank-normalize a cell value.

    Rules:
    - None becomes ""
    - Empty or whitespace-only text becomes ""
    - Any other text is kept exactly (no trimming)
    - Non-text values are rendered with render_cell_value first

    Args:
        value: Raw cell value or text

    Returns:
        Normalized text
    """
    if value is None:
        return ""

    text = value if isinstance(value, str) else render_cell_value(value)

    if not text.strip():
        return ""

    return text


def render_number(value: Any, max_precision: int = 15) -> str:
    """
    Render a numeric value the way a spreadsheet displays it in General format.

    Rules:
    - Integral values have no decimal part (3.0 -> "3")
    - Limit to 15 significant digits (Excel's internal precision)
    - Plain decimal notation unless the magnitude needs an exponent

    Args:
        value: Numeric value (int, float or Decimal)
        max_precision: Maximum significant digits

    Returns:
        Rendered string
    """
    try:
        dec = Decimal(str(value))

        if not dec.is_finite():
            return str(value)

        if dec == dec.to_integral_value():
            return str(int(dec))

        formatted = format(float(dec), f'.{max_precision}g')

        if 'e' in formatted.lower():
            float_val = float(formatted)
            if 1e-6 < abs(float_val) < 1e15:
                formatted = f"{float_val:.{max_precision}f}".rstrip('0').rstrip('.')

        return formatted

    except (ValueError, InvalidOperation, TypeError):
        return str(value)


def render_boolean(value: bool) -> str:
    """Render a boolean as "TRUE" or "FALSE"."""
    return "TRUE" if value else "FALSE"


def render_temporal(value: Any) -> str:
    """
    Render a date, time or datetime as ISO 8601.

    Midnight datetimes are shown as plain dates since that is how
    date-only cells come back from openpyxl.
    """
    if isinstance(value, datetime):
        if value.time() == time(0, 0) and value.tzinfo is None:
            return value.date().isoformat()
        return value.isoformat()
    return value.isoformat()


def render_cell_value(value: Any) -> str:
    """
    Render a non-text cell value as text.

    Args:
        value: Cell value of any type

    Returns:
        Display text (not yet blank-normalized)
    """
    if value is None:
        return ""
    # bool before numbers: bool is a subclass of int
    if isinstance(value, bool):
        return render_boolean(value)
    if isinstance(value, (int, float, Decimal)):
        return render_number(value)
    if isinstance(value, (datetime, date, time)):
        return render_temporal(value)
    if isinstance(value, str):
        return value
    return str(value)
