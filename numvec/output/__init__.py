"""
Output Module -- View layer for vector descriptions

Separates layout from presentation. The layout engine turns a vector
into a Grid; renderers turn a vector (via its Grid) into text or JSON.

Usage:
    from numvec.output import DescribeOptions, describe

    text = describe(vector)                                  # defaults
    text = describe(vector, DescribeOptions(max_width=40))   # narrower
    data = describe(vector, format="json")
"""

from typing import Optional, TYPE_CHECKING

# Re-export for convenience
from .options import DescribeOptions
from .layout import Grid, FormattedColumn, layout, MIN_WIDTH, MIN_PER_COLUMN
from .base import BaseRenderer
from .grid import GridRenderer, render_grid
from .json import JsonRenderer

if TYPE_CHECKING:
    from ..core.vector import Vector


# =============================================================================
# Format Registry
# =============================================================================

# Maps format name to renderer class
RENDERERS = {
    "text": GridRenderer,
    "json": JsonRenderer,
}

# Valid format values for config/CLI
VALID_FORMATS = tuple(RENDERERS.keys())


def get_renderer(format: str, options: Optional[DescribeOptions] = None) -> BaseRenderer:
    """
    Get appropriate renderer instance.

    Args:
        format: Format name from VALID_FORMATS
        options: Layout and formatting options

    Returns:
        Renderer instance

    Raises:
        ValueError: If format is invalid
    """
    if format not in RENDERERS:
        valid = ", ".join(RENDERERS.keys())
        raise ValueError(f"Unknown format '{format}'. Valid: {valid}")

    return RENDERERS[format](options)


# =============================================================================
# Main Entry Points
# =============================================================================

def describe(
    vector: "Vector",
    options: Optional[DescribeOptions] = None,
    format: str = "text"
) -> str:
    """
    Describe a vector: type line plus its column-wise element layout.

    Args:
        vector: Vector to describe
        options: Layout and formatting options (defaults if None)
        format: "text" or "json"

    Returns:
        Description ready for printing

    Example:
        describe(DenseVector([3.0, 1.0, 4.0]), DescribeOptions(row_separator="\\n"))
        -> "DenseVector 3-float64\\n3\\n1\\n4"
    """
    return get_renderer(format, options).render(vector)


def render_vector_string(vector: "Vector", options: Optional[DescribeOptions] = None) -> str:
    """Column-wise element layout only, without the type line."""
    return GridRenderer(options).render_values(vector)


__all__ = [
    "DescribeOptions", "describe", "render_vector_string",
    "Grid", "FormattedColumn", "layout", "render_grid",
    "MIN_WIDTH", "MIN_PER_COLUMN",
    "BaseRenderer", "GridRenderer", "JsonRenderer",
    "RENDERERS", "VALID_FORMATS", "get_renderer",
]
