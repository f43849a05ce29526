"""
Formatters -- Element-to-string strategies for vector rendering

A formatter is a plain function value, `element -> str`, passed into
the layout engine. It must be total: once built, it never raises.

Accepted specs:
- Python format specs: ".6g", ".3f", "+.2e", ...
- Named numeric formats: "G6", "F2", "E3", "N0"
- Any callable taking one element and returning a string

Invalid spec strings are rejected when the formatter is built,
never per element.
"""

import re
from typing import Any, Callable, Optional, Union


ValueFormatter = Callable[[Any], str]

DEFAULT_FORMAT = "G6"   # six significant digits
DEBUG_FORMAT = "F6"     # fixed six decimals, used by repr()

# Uppercase letter plus optional precision, e.g. G6, F2, E, N0
_NAMED_FORMAT = re.compile(r"^([GFEN])(\d{1,2})?$")

# Default precision per named format when none is given
_NAMED_DEFAULTS = {
    "G": None,  # shortest round-trip
    "F": 2,
    "E": 6,
    "N": 2,
}


def to_format_spec(spec: str) -> str:
    """
    Translate a named numeric format to a Python format spec.

    Strings that are not named formats pass through unchanged.

    Examples:
        to_format_spec("G6")  -> ".6g"
        to_format_spec("F2")  -> ".2f"
        to_format_spec("E3")  -> ".3E"
        to_format_spec("N0")  -> ",.0f"
        to_format_spec("G")   -> ""
        to_format_spec(".4g") -> ".4g"
    """
    match = _NAMED_FORMAT.match(spec)
    if not match:
        return spec

    letter, digits = match.groups()
    precision = int(digits) if digits else _NAMED_DEFAULTS[letter]

    if letter == "G":
        return f".{precision}g" if precision else ""
    if letter == "F":
        return f".{precision}f"
    if letter == "E":
        return f".{precision}E"
    return f",.{precision}f"


def _validate(python_spec: str, original: str) -> None:
    # A spec is valid if it formats either an int or a float ("d" only fits ints)
    errors = []
    for probe in (0.0, 0):
        try:
            format(probe, python_spec)
            return
        except ValueError as e:
            errors.append(str(e))
    raise ValueError(f"Invalid format '{original}': {errors[0]}")


def make_formatter(spec: Optional[Union[str, ValueFormatter]] = None) -> ValueFormatter:
    """
    Build a total element formatter.

    Args:
        spec: Format spec string, named format, callable, or None for DEFAULT_FORMAT

    Returns:
        Function mapping one element to its display string

    Raises:
        ValueError: If spec is a string no numeric value can be formatted with
    """
    if callable(spec):
        return spec

    original = spec if spec is not None else DEFAULT_FORMAT
    python_spec = to_format_spec(original)
    _validate(python_spec, original)

    def format_value(value: Any) -> str:
        try:
            return format(value, python_spec)
        except (TypeError, ValueError):
            # e.g. numpy.bool_ rejects numeric specs
            return str(value)

    format_value.spec = original
    return format_value


def format_debug(value: Any) -> str:
    """Fixed six-decimal form used for compact one-line displays."""
    return _debug_formatter(value)


_debug_formatter = make_formatter(DEBUG_FORMAT)
