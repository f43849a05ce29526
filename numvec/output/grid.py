"""
GridRenderer -- Render a cell grid as aligned text

Each column is as wide as its longest cell; cells are right-aligned so
digits line up. Rows are joined with the row separator and no separator
follows the last row.
"""

from typing import TYPE_CHECKING

from .base import BaseRenderer
from .layout import Grid

if TYPE_CHECKING:
    from ..core.vector import Vector


def render_grid(grid: Grid, column_separator: str = "  ", row_separator: str = "\n") -> str:
    """
    Join a grid into text.

    Args:
        grid: Cells to render
        column_separator: Text between cells of a row
        row_separator: Text between rows

    Returns:
        Rendered text, "" for an empty grid
    """
    widths = grid.column_widths()
    lines = [
        column_separator.join(cell.rjust(width) for cell, width in zip(row, widths))
        for row in grid.cells
    ]
    return row_separator.join(lines)


class GridRenderer(BaseRenderer):
    """
    Plain-text description: type line, then the column layout.

    Example (defaults, 3 elements):
        DenseVector 3-float64
        3
        1
        4
    """

    def render_values(self, vector: "Vector") -> str:
        """Column layout only, without the type line."""
        grid = self.build_grid(vector)
        return render_grid(grid, self.options.column_separator, self.options.row_separator)

    def render(self, vector: "Vector") -> str:
        values = self.render_values(vector)
        if not values:
            return vector.to_type_string()
        return vector.to_type_string() + self.options.row_separator + values
