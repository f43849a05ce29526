"""
CLI -- Command interface for numvec

    numvec describe 3 1 4 1 5 9 2 6
    numvec describe --file values.txt --max-per-column 5 --max-width 40
    seq 1 100 | numvec describe --dtype int64 --output json
    numvec config
    numvec config --set display.max_width=120
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .logging_config import setup_logging
from .presentation.symbols import get_symbols, safe_print
from .commands.describe import DescribeCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


class VectorCLI:
    """Command-line interface holding configuration and command handlers."""

    def __init__(self, project_dir: Path):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()

        # Initialize symbols based on config
        self.symbols = get_symbols(self.config.display.symbols)

        self._describe_cmd = DescribeCommand(self)
        self._config_cmd = ConfigCommand(self)

    def configure_logging(self, verbose: bool = False) -> None:
        """Apply logging configuration, forcing DEBUG when verbose."""
        level = logging.DEBUG if verbose else self.config.logging.numeric_level
        setup_logging(level, self.config.logging.file)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for numvec CLI.

    Uses command registry pattern for modular command handling.
    Parser definitions and dispatch logic are in individual command modules.
    """
    parser = argparse.ArgumentParser(
        prog='numvec',
        description="numvec -- Column-wise text descriptions of numeric vectors",
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("NUMVEC_PROJECT_PATH", "."),
        help='Project directory for .numvec/config.yaml (default: NUMVEC_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug details to stderr'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'numvec {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    from .commands import register_all, dispatch
    register_all(subparsers)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cli = VectorCLI(Path(args.project))
    cli.configure_logging(args.verbose)

    try:
        return dispatch(args.command, cli, args) or 0
    except KeyError as e:
        safe_print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 2


if __name__ == '__main__':
    sys.exit(main())
