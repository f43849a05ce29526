"""
DescribeCommand -- Print the description of a vector given on the command line

Values come from, in order of preference:
- positional arguments
- --file PATH (or '-' for stdin)
- stdin when it isn't a terminal

Values may be separated by whitespace or commas.
"""

import logging
import re
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional

import numpy as np

from ..commands.base import BaseCommand
from ..core.errors import InvalidArgument
from ..core.vector import DenseVector
from ..output import DescribeOptions, VALID_FORMATS, describe
from ..presentation.symbols import safe_print

logger = logging.getLogger(__name__)

COMMAND_NAME = 'describe'

_SEPARATORS = re.compile(r"[,\s]+")


def parse_values(chunks: Iterable[str], dtype: str = "float64") -> DenseVector:
    """
    Build a dense vector from text chunks.

    Args:
        chunks: Strings holding comma or whitespace separated numbers
        dtype: numpy element type name

    Returns:
        DenseVector of the parsed values

    Raises:
        InvalidArgument: If dtype is unknown or a value doesn't parse
    """
    tokens = [token for chunk in chunks for token in _SEPARATORS.split(chunk.strip()) if token]
    try:
        array = np.array(tokens, dtype=str).astype(dtype)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"could not parse values as {dtype}: {e}", "values") from e
    return DenseVector(array)


class DescribeCommand(BaseCommand):
    """Command that renders a vector description from text input."""

    def describe(
        self,
        values: Iterable[str],
        file: Optional[str] = None,
        dtype: str = "float64",
        output_format: str = "text",
        **overrides
    ) -> int:
        """
        Parse values and print their description.

        Args:
            values: Values from the command line
            file: Path to read values from ('-' for stdin)
            dtype: numpy element type name
            output_format: "text" or "json"
            **overrides: DescribeOptions fields overriding configuration

        Returns:
            Process exit status
        """
        chunks = list(values)
        if not chunks:
            source = self._read_source(file)
            if source is None:
                safe_print("Error: no values given (pass values, --file, or pipe to stdin)",
                           file=sys.stderr)
                return 2
            chunks = [source]

        try:
            vector = parse_values(chunks, dtype)
            options = self.options(**overrides)
            output = describe(vector, options, output_format)
        except (InvalidArgument, ValueError) as e:
            safe_print(f"Error: {e}", file=sys.stderr)
            return 2

        logger.debug("Described %s", vector.to_type_string())
        safe_print(output)
        return 0

    def options(self, **overrides) -> DescribeOptions:
        """Options from configuration with command-line overrides applied."""
        options = DescribeOptions.from_config(self.config.display, self.symbols)
        return replace(options, **{k: v for k, v in overrides.items() if v is not None})

    def _read_source(self, file: Optional[str]) -> Optional[str]:
        if file == '-' or (file is None and not sys.stdin.isatty()):
            return sys.stdin.read()
        if file is None:
            return None
        return Path(file).read_text()


def register_parser(subparsers):
    """Register describe command parser."""
    p = subparsers.add_parser('describe', help='Describe a vector column by column')
    p.add_argument('values', nargs='*',
                   help='Element values, separated by spaces or commas')
    p.add_argument('--file', '-f',
                   help="Read values from a file ('-' for stdin)")
    p.add_argument('--dtype', default='float64',
                   help='Element type (default: float64)')
    p.add_argument('--max-per-column', type=int,
                   help='Maximum rows per column (default: from config)')
    p.add_argument('--max-width', type=int,
                   help='Maximum total width (default: from config)')
    p.add_argument('--format', dest='value_format',
                   help='Element format, e.g. G6, F2 or .3e (default: from config)')
    p.add_argument('--ellipsis',
                   help='Marker for omitted elements (default: from config)')
    p.add_argument('--output', '-o', choices=VALID_FORMATS, default='text',
                   help='Output format (default: text)')
    return p


def handle(cli, args):
    """Handle describe command dispatch."""
    try:
        return cli._describe_cmd.describe(
            args.values,
            file=args.file,
            dtype=args.dtype,
            output_format=args.output,
            max_per_column=args.max_per_column,
            max_width=args.max_width,
            format=args.value_format,
            ellipsis=args.ellipsis,
        )
    except OSError as e:
        safe_print(f"Error: could not read values: {e}", file=sys.stderr)
        return 2
