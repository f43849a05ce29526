"""
ConfigCommand -- Configuration display and updates

Handles configuration operations:
- Displaying current configuration
- Setting configuration values (project or user scope)
"""

import sys

from ..commands.base import BaseCommand
from ..presentation.symbols import safe_print


class ConfigCommand(BaseCommand):
    """Command for configuration management."""

    def show_config(self) -> int:
        """Show current configuration."""
        safe_print(self.config_manager.display())
        return 0

    def set_config(self, key: str, value: str, scope: str = "project") -> int:
        """Set a configuration value."""
        symbols = self.symbols
        error = self.config_manager.set(key, value, scope)

        if error:
            safe_print(f"{symbols.check_fail} {error}", file=sys.stderr)
            return 2

        if scope == "project":
            path = self.config_manager.project_config_path
        else:
            path = self.config_manager.user_config_path
        safe_print(f"{symbols.check_pass} Set {key} = {value} {symbols.arrow} {path}")
        return 0


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., display.max_width=120)')
    p.add_argument('--user', action='store_true',
                   help='Apply to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if args.set:
        if '=' not in args.set:
            safe_print("Error: Use format KEY=VALUE (e.g., display.max_width=120)", file=sys.stderr)
            return 2
        key, value = args.set.split('=', 1)
        scope = "user" if args.user else "project"
        return cli._config_cmd.set_config(key.strip(), value, scope)
    return cli._config_cmd.show_config()
