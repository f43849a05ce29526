"""
DescribeOptions -- Settings for one description call

Every field has the documented default, so DescribeOptions() renders
the way str(vector) does. Options built from configuration take the
user's display settings instead.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional, TYPE_CHECKING

from ..presentation.formatters import DEFAULT_FORMAT, ValueFormatter, make_formatter
from ..presentation.symbols import ASCII, SymbolSet, get_symbols

if TYPE_CHECKING:
    from ..config import DisplayConfig


@dataclass
class DescribeOptions:
    """
    Options controlling how a vector is laid out and rendered.

    Attributes:
        max_per_column: Maximum rows per display column
        max_width: Maximum total width in characters
        format: Format spec ("G6", ".3f", ...) or element -> str callable
        column_separator: Text placed between columns
        row_separator: Text placed between rows (no trailing separator)
        ellipsis: Marker for omitted elements in a truncated column
    """
    max_per_column: int = 12
    max_width: int = 80
    format: Any = DEFAULT_FORMAT
    column_separator: str = ASCII.column_separator
    row_separator: str = field(default_factory=lambda: os.linesep)
    ellipsis: str = ASCII.ellipsis

    @property
    def padding(self) -> int:
        """Width each column costs beyond its cells."""
        return len(self.column_separator)

    def formatter(self) -> ValueFormatter:
        """
        Build the element formatter for these options.

        Raises:
            ValueError: If format is an invalid spec string
        """
        return make_formatter(self.format)

    @classmethod
    def with_overrides(cls, **overrides) -> "DescribeOptions":
        """Defaults, with every override that isn't None applied."""
        return replace(cls(), **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_config(
        cls,
        display: "DisplayConfig",
        symbols: Optional[SymbolSet] = None
    ) -> "DescribeOptions":
        """
        Options from display configuration.

        Unset ellipsis falls back to the symbol set's marker and unset
        row separator to the platform line separator.
        """
        if symbols is None:
            symbols = get_symbols(display.symbols)

        return cls(
            max_per_column=display.max_per_column,
            max_width=display.max_width,
            format=display.format,
            column_separator=display.column_separator,
            row_separator=display.row_separator if display.row_separator is not None else os.linesep,
            ellipsis=display.ellipsis if display.ellipsis is not None else symbols.ellipsis,
        )
