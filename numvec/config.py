"""
Configuration -- Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables (NUMVEC_*)
  2. Project config (.numvec/config.yaml)
  3. User config (~/.numvec/config.yaml)
  4. Defaults
"""

import copy
import logging
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .presentation.formatters import DEFAULT_FORMAT, make_formatter
from .presentation.symbols import get_symbols

logger = logging.getLogger(__name__)


VALID_SYMBOLS = ("ascii", "unicode", "auto")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> (section, setting, parser)
ENV_OVERRIDES = {
    "NUMVEC_MAX_PER_COLUMN": ("display", "max_per_column", int),
    "NUMVEC_MAX_WIDTH": ("display", "max_width", int),
    "NUMVEC_FORMAT": ("display", "format", str),
    "NUMVEC_SYMBOLS": ("display", "symbols", str),
    "NUMVEC_LOG_LEVEL": ("logging", "level", str.upper),
}


@dataclass
class DisplayConfig:
    """Vector display preferences."""
    max_per_column: int = 12
    max_width: int = 80
    format: str = DEFAULT_FORMAT
    column_separator: str = "  "
    row_separator: Optional[str] = None  # None = platform line separator
    ellipsis: Optional[str] = None       # None = symbol set's ellipsis
    symbols: str = "ascii"               # "ascii" | "unicode" | "auto"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.max_per_column < 1:
            return f"max_per_column must be at least 1, got {self.max_per_column}"
        if self.max_width < 1:
            return f"max_width must be positive, got {self.max_width}"
        if self.symbols not in VALID_SYMBOLS:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(VALID_SYMBOLS)}"
        try:
            make_formatter(self.format)
        except ValueError as e:
            return str(e)
        return None


@dataclass
class LoggingConfig:
    """Logging preferences."""
    level: str = "WARNING"
    file: Optional[str] = None

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.level not in VALID_LOG_LEVELS:
            return f"Unknown log level '{self.level}'. Valid: {', '.join(VALID_LOG_LEVELS)}"
        return None

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level, logging.WARNING)


@dataclass
class Config:
    """Application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "display": {
                "max_per_column": self.display.max_per_column,
                "max_width": self.display.max_width,
                "format": self.display.format,
                "column_separator": self.display.column_separator,
                "row_separator": self.display.row_separator,
                "ellipsis": self.display.ellipsis,
                "symbols": self.display.symbols,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        display_data = data.get("display") or {}
        logging_data = data.get("logging") or {}
        defaults = DisplayConfig()

        return cls(
            display=DisplayConfig(
                max_per_column=int(display_data.get("max_per_column", defaults.max_per_column)),
                max_width=int(display_data.get("max_width", defaults.max_width)),
                format=str(display_data.get("format", defaults.format)),
                column_separator=display_data.get("column_separator", defaults.column_separator),
                row_separator=display_data.get("row_separator"),
                ellipsis=display_data.get("ellipsis"),
                symbols=display_data.get("symbols", defaults.symbols),
            ),
            logging=LoggingConfig(
                level=str(logging_data.get("level", "WARNING")).upper(),
                file=logging_data.get("file"),
            )
        )

    def validate(self) -> Optional[str]:
        """First validation error across sections, or None."""
        return self.display.validate() or self.logging.validate()


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment variables
      2. Project config (.numvec/config.yaml)
      3. User config (~/.numvec/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".numvec"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".numvec"
    PROJECT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        for env_key, (section, setting, parse) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_key)
            if not raw:
                continue
            try:
                config_data.setdefault(section, {})[setting] = parse(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r: not a valid %s", env_key, raw, parse.__name__)

        try:
            self._config = Config.from_dict(config_data)
        except (TypeError, ValueError) as e:
            logger.warning("Invalid configuration values, using defaults: %s", e)
            self._config = Config()
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML layer. Missing or malformed files contribute nothing."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Skipping malformed config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Skipping config %s: expected a mapping", path)
            return {}
        logger.debug("Loaded config layer %s", path)
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self.project_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.project_config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)

        self._config = config

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self.user_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.user_config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)

        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "display.max_width")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        # Rejected values must not reach the loaded config
        config = copy.deepcopy(self.load())

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'display.max_width')"

        section, setting = parts

        if section == "display":
            if setting in ("max_per_column", "max_width"):
                try:
                    setattr(config.display, setting, int(value))
                except ValueError:
                    return f"{setting} must be an integer, got '{value}'"
            elif setting in ("format", "column_separator", "symbols"):
                setattr(config.display, setting, value)
            elif setting in ("row_separator", "ellipsis"):
                setattr(config.display, setting, value or None)
            else:
                return (f"Unknown display setting: {setting}. Valid: max_per_column, max_width, "
                        f"format, column_separator, row_separator, ellipsis, symbols")
            error = config.display.validate()
            if error:
                return error

        elif section == "logging":
            if setting == "level":
                config.logging.level = value.upper()
            elif setting == "file":
                config.logging.file = value or None
            else:
                return f"Unknown logging setting: {setting}. Valid: level, file"
            error = config.logging.validate()
            if error:
                return error
        else:
            return f"Unknown section: {section}. Valid: display, logging"

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts
        values = config.to_dict().get(section, {})
        if setting not in values or values[setting] is None:
            return None
        return str(values[setting])

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)
        ellipsis = config.display.ellipsis or f"{symbols.ellipsis} (from symbols)"
        row_separator = repr(config.display.row_separator) if config.display.row_separator else "platform default"

        lines = [
            "Configuration:",
            "",
            "Display:",
            f"  Max per column: {config.display.max_per_column}",
            f"  Max width: {config.display.max_width}",
            f"  Format: {config.display.format}",
            f"  Column separator: {config.display.column_separator!r}",
            f"  Row separator: {row_separator}",
            f"  Ellipsis: {ellipsis}",
            f"  Symbols: {config.display.symbols}",
            "",
            "Logging:",
            f"  Level: {config.logging.level}",
            f"  File: {config.logging.file or '(none)'}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
