"""
CSV line encoding for full-row output.

A value is quoted when it contains the separator, a comma, a double quote,
a newline or a carriage return. The comma always triggers quoting, even when
another separator is in use.
"""
from typing import Iterable

DEFAULT_SEPARATOR = ","

QUOTE = '"'

# Characters that force quoting regardless of the separator
ALWAYS_QUOTE = frozenset([",", QUOTE, "\n", "\r"])


def needs_quotes(text: str, separator: str = DEFAULT_SEPARATOR) -> bool:
    """Check whether a value has to be wrapped in double quotes."""
    return any(character == separator or character in ALWAYS_QUOTE for character in text)


def escape_csv_value(text: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Escape one value for a CSV line.

    Args:
        text: Value to escape (None is not accepted, normalize first)
        separator: Active separator character

    Returns:
        Value with doubled quotes, wrapped in quotes when needed
    """
    escaped = text.replace(QUOTE, QUOTE * 2)
    if needs_quotes(escaped, separator):
        return f"{QUOTE}{escaped}{QUOTE}"
    return escaped


def encode_csv_line(values: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Encode values as one CSV line (no trailing separator, no line ending).

    Args:
        values: Ordered values
        separator: Separator character

    Returns:
        Encoded line
    """
    return separator.join(escape_csv_value(value, separator) for value in values)
