"""
JsonRenderer -- Render a vector description as JSON for piping

Carries the same layout as the text renderer, so truncated vectors
stay truncated:
    {"type": "DenseVector 13-int64", "kind": "DenseVector", "count": 13,
     "dtype": "int64", "rows": 5, "columns": 1, "truncated": true,
     "cells": [["1"], [".."], [".."], ["12"], ["13"]]}
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

import orjson

from .base import BaseRenderer
from .options import DescribeOptions

if TYPE_CHECKING:
    from ..core.vector import Vector


class JsonRenderer(BaseRenderer):
    """
    Render a vector description as JSON.

    Useful for:
    - Piping to jq or other tools
    - Machine-readable output
    """

    def __init__(self, options: Optional[DescribeOptions] = None, compact: bool = False):
        """
        Initialize JSON renderer.

        Args:
            options: Layout and formatting options
            compact: If True, output single line (no indentation)
        """
        super().__init__(options)
        self.compact = compact

    def to_dict(self, vector: "Vector") -> Dict[str, Any]:
        """Description fields before serialization."""
        grid = self.build_grid(vector)
        return {
            "type": vector.to_type_string(),
            "kind": vector.kind,
            "count": len(vector),
            "dtype": vector.dtype.name,
            "rows": grid.rows,
            "columns": grid.columns,
            "truncated": grid.truncated,
            "cells": grid.to_lists(),
        }

    def render(self, vector: "Vector") -> str:
        option = None if self.compact else orjson.OPT_INDENT_2
        return orjson.dumps(self.to_dict(vector), option=option).decode()
