"""
Layout -- Partition vector elements into display columns

Elements are walked in index order in chunks of up to max_per_column.
Each chunk becomes a candidate column; it is accepted only while the
running width (column widths plus padding) stays within max_width.

When elements are left over, the last accepted column is truncated:
its bottom cells become two ellipsis markers followed by the last two
elements of the vector.

    1   6            1
    2   7     or     ..
    3   8            ..
    4   9            12
    5  10            13

Width or row pressure never raises. The first column is always kept,
even when it alone is wider than max_width.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

MIN_WIDTH = 12          # max_width is clamped up to this
MIN_PER_COLUMN = 1      # max_per_column is clamped up to this


@dataclass(frozen=True)
class FormattedColumn:
    """Formatted cells of one display column, top to bottom."""
    cells: Tuple[str, ...]

    @property
    def width(self) -> int:
        return max((len(cell) for cell in self.cells), default=0)

    @property
    def height(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Grid:
    """
    Rows x columns of formatted cell strings.

    Cells are stored row-major. Columns shorter than the tallest one are
    padded below with empty strings.
    """
    cells: Tuple[Tuple[str, ...], ...]
    columns: int
    truncated: bool = False

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def row(self, i: int) -> Tuple[str, ...]:
        return self.cells[i]

    def column(self, j: int) -> Tuple[str, ...]:
        if not 0 <= j < self.columns:
            raise IndexError(f"column {j} out of range for {self.columns} columns")
        return tuple(row[j] for row in self.cells)

    def column_widths(self) -> List[int]:
        """Longest cell length per column."""
        widths = [0] * self.columns
        for row in self.cells:
            for j, cell in enumerate(row):
                widths[j] = max(widths[j], len(cell))
        return widths

    def to_lists(self) -> List[List[str]]:
        return [list(row) for row in self.cells]

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[str]], truncated: bool = False) -> "Grid":
        """Assemble a grid from top-to-bottom column cell lists."""
        if not columns:
            return cls(cells=(), columns=0, truncated=truncated)

        rows = max(len(column) for column in columns)
        cells = tuple(
            tuple(column[i] if i < len(column) else "" for column in columns)
            for i in range(rows)
        )
        return cls(cells=cells, columns=len(columns), truncated=truncated)


def format_column(
    values: Sequence[Any],
    offset: int,
    height: int,
    format: Callable[[Any], str]
) -> FormattedColumn:
    """Format `height` consecutive elements starting at `offset`."""
    return FormattedColumn(tuple(format(values[i]) for i in range(offset, offset + height)))


def truncate_tail(
    cells: List[str],
    values: Sequence[Any],
    ellipsis: str,
    format: Callable[[Any], str]
) -> None:
    """
    Overwrite the bottom of a column with ellipsis markers and the last elements.

    A column of four or more rows ends [.., .., v[N-2], v[N-1]].
    Shorter columns keep at least one ellipsis:
    three rows [.., v[N-2], v[N-1]], two rows [.., v[N-1]], one row [..].
    """
    count = len(values)
    height = len(cells)
    keep = min(2, height - 1)
    marks = min(2, height - keep)

    tail = [ellipsis] * marks + [format(values[i]) for i in range(count - keep, count)]
    cells[height - len(tail):] = tail


def layout(
    values: Sequence[Any],
    max_per_column: int,
    max_width: int,
    padding: int,
    ellipsis: str,
    format: Callable[[Any], str]
) -> Grid:
    """
    Lay out values into a grid of formatted columns.

    Args:
        values: Indexable, sized sequence of elements (e.g. a Vector)
        max_per_column: Maximum rows per column (clamped to >= 1)
        max_width: Maximum total width in characters (clamped to >= 12)
        padding: Width added per column for the separator
        ellipsis: Marker for omitted elements
        format: Total function turning one element into its display string

    Returns:
        Grid of accepted columns, truncated if not every element fits
    """
    max_per_column = max(max_per_column, MIN_PER_COLUMN)
    max_width = max(max_width, MIN_WIDTH)

    count = len(values)
    columns: List[List[str]] = []
    chars = 0
    offset = 0

    while offset < count:
        height = min(max_per_column, count - offset)
        candidate = format_column(values, offset, height, format)
        chars += candidate.width + padding
        if chars > max_width and columns:
            break
        columns.append(list(candidate.cells))
        offset += height

    truncated = offset < count
    if truncated:
        truncate_tail(columns[-1], values, ellipsis, format)

    logger.debug(
        "Laid out %d of %d elements in %d column(s)%s",
        offset, count, len(columns), " (truncated)" if truncated else ""
    )
    return Grid.from_columns(columns, truncated)
