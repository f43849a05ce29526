"""
numvec -- Numeric vectors with readable, bounded text descriptions

Value-equal, fixed-size vectors over pluggable storage, rendered
column by column within a width budget.

Usage:
    from numvec import DenseVector, DescribeOptions, describe

    v = DenseVector(range(1, 14), dtype="int64")
    print(v)                                        # type line + columns
    print(describe(v, DescribeOptions(max_per_column=5, max_width=20)))
    v.index_of(4)                                   # -> 3
    v.append(14)                                    # UnsupportedOperation
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.errors import VectorError, UnsupportedOperation, InvalidArgument
from .core.storage import VectorStorage, DenseStorage
from .core.vector import Vector, DenseVector

# Output layer
from .output import (
    DescribeOptions, describe, render_vector_string,
    Grid, FormattedColumn, layout, render_grid,
    GridRenderer, JsonRenderer, get_renderer,
)

# Presentation layer
from .presentation.formatters import make_formatter, DEFAULT_FORMAT
from .presentation.symbols import get_symbols, SymbolSet, UNICODE, ASCII

# Config (stays at root)
from .config import Config, ConfigManager, get_config, DisplayConfig, LoggingConfig
from .logging_config import setup_logging

__all__ = [
    # Core
    'VectorError', 'UnsupportedOperation', 'InvalidArgument',
    'VectorStorage', 'DenseStorage',
    'Vector', 'DenseVector',
    # Output
    'DescribeOptions', 'describe', 'render_vector_string',
    'Grid', 'FormattedColumn', 'layout', 'render_grid',
    'GridRenderer', 'JsonRenderer', 'get_renderer',
    # Presentation
    'make_formatter', 'DEFAULT_FORMAT',
    'get_symbols', 'SymbolSet', 'UNICODE', 'ASCII',
    # Config
    'Config', 'ConfigManager', 'get_config', 'DisplayConfig', 'LoggingConfig',
    'setup_logging',
]
