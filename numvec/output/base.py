"""
BaseRenderer -- Abstract base class for vector renderers

All renderers inherit from this class and implement render().
Provides the shared layout step so every output format sees the same
columns, truncation included.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .layout import Grid, layout
from .options import DescribeOptions

if TYPE_CHECKING:
    from ..core.vector import Vector


class BaseRenderer(ABC):
    """
    Abstract base class for all vector renderers.

    Subclasses must implement render() method.
    """

    def __init__(self, options: Optional[DescribeOptions] = None):
        """
        Initialize renderer.

        Args:
            options: Layout and formatting options (defaults if None)
        """
        self.options = options or DescribeOptions()

    @abstractmethod
    def render(self, vector: "Vector") -> str:
        """
        Render a vector description.

        Args:
            vector: The vector to describe

        Returns:
            Formatted string for output
        """

    def build_grid(self, vector: "Vector") -> Grid:
        """Lay the vector out with this renderer's options."""
        options = self.options
        return layout(
            vector,
            options.max_per_column,
            options.max_width,
            options.padding,
            options.ellipsis,
            options.formatter(),
        )
