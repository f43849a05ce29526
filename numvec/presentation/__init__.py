"""
Presentation -- Display vocabulary for numvec

Contains display and formatting:
- Symbols: Ellipsis and separators (unicode/ascii)
- Formatters: Element-to-string strategies
"""

from .symbols import (
    SymbolSet, get_symbols, supports_unicode,
    safe_print, UNICODE, ASCII
)
from .formatters import (
    ValueFormatter, make_formatter, to_format_spec, format_debug,
    DEFAULT_FORMAT, DEBUG_FORMAT
)

__all__ = [
    # Symbols
    "SymbolSet", "get_symbols", "supports_unicode",
    "safe_print", "UNICODE", "ASCII",
    # Formatters
    "ValueFormatter", "make_formatter", "to_format_spec", "format_debug",
    "DEFAULT_FORMAT", "DEBUG_FORMAT",
]
