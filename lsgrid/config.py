"""
Configuration handling for lsgrid.

This module provides functionality for loading and managing configuration.
"""

import copy
import os
import sys
from pathlib import Path

import yaml

from lsgrid.layout import FillOrder, MIN_COL_SIZE

COLOR_CHOICES = ("auto", "always", "never")


class ConfigValidationError(ValueError):
    """Raised when a configuration value is out of range or of the wrong type."""


class Config:
    """Configuration manager for lsgrid."""

    # Default configuration
    DEFAULT_CONFIG = {
        "color": "auto",
        "show_hidden": False,
        "fill_order": FillOrder.DOWN_COLUMNS.value,
        "min_column_width": MIN_COL_SIZE,
        "column_separator": 2,
        "width": None,  # Use the terminal width
        "numeric_ids": False,
    }

    def __init__(self, config_path=None):
        """Initialize configuration.

        Args:
            config_path: Optional path to configuration file.
                If not provided, will look in default locations.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_file_found = False

        # Load configuration from file
        config_file = self._find_config_file(config_path)
        if config_file:
            self.config_file_found = self._load_config_file(config_file)

        # Apply environment variable overrides
        self._apply_env_overrides()

    @staticmethod
    def default_config_path():
        return Path.home() / ".config" / "lsgrid" / "config.yml"

    def _find_config_file(self, config_path=None):
        """Find configuration file.

        Args:
            config_path: Optional explicit path to configuration file.

        Returns:
            Path object to configuration file, or None if not found.
        """
        if config_path:
            path = Path(config_path)
            if path.exists():
                return path
            return None

        # 1. ~/.lsgrid/config.yml
        home_config = Path.home() / ".lsgrid" / "config.yml"
        if home_config.exists():
            return home_config

        # 2. ~/.config/lsgrid/config.yml
        xdg_config = self.default_config_path()
        if xdg_config.exists():
            return xdg_config

        return None

    def _load_config_file(self, config_file):
        """Load configuration from file.

        Args:
            config_file: Path to configuration file.

        Returns:
            bool: True if the file was read and merged.
        """
        try:
            with open(config_file, 'r') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Error loading configuration file: {e}", file=sys.stderr)
            return False

        if file_config:
            if not isinstance(file_config, dict):
                print(f"Error loading configuration file: {config_file} is not a mapping",
                      file=sys.stderr)
                return False
            self._update_config(self.config, file_config)
        return True

    def _update_config(self, base_config, new_config):
        """Recursively update configuration.

        Args:
            base_config: Base configuration to update.
            new_config: New configuration values.
        """
        for key, value in new_config.items():
            if isinstance(value, dict) and key in base_config and isinstance(base_config[key], dict):
                self._update_config(base_config[key], value)
            else:
                base_config[key] = value

    def _apply_env_overrides(self):
        """Apply environment variable overrides to configuration."""
        if "LSGRID_COLOR" in os.environ:
            self.config["color"] = os.environ["LSGRID_COLOR"]

        if "LSGRID_FILL_ORDER" in os.environ:
            self.config["fill_order"] = os.environ["LSGRID_FILL_ORDER"]

        # Integers are checked later by validate()
        if "LSGRID_MIN_COLUMN_WIDTH" in os.environ:
            self.config["min_column_width"] = os.environ["LSGRID_MIN_COLUMN_WIDTH"]

        if "LSGRID_WIDTH" in os.environ:
            self.config["width"] = os.environ["LSGRID_WIDTH"]

    def validate(self):
        """Check every value and normalize integers given as strings.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        if self.config["color"] not in COLOR_CHOICES:
            raise ConfigValidationError(
                f"color must be one of {', '.join(COLOR_CHOICES)}, got {self.config['color']!r}"
            )

        try:
            FillOrder(self.config["fill_order"])
        except ValueError:
            choices = ", ".join(order.value for order in FillOrder)
            raise ConfigValidationError(
                f"fill_order must be one of {choices}, got {self.config['fill_order']!r}"
            ) from None

        for key in ("min_column_width", "column_separator", "width"):
            value = self.config[key]
            if value is None and key == "width":
                continue
            self.config[key] = self._to_non_negative_int(key, value)

    @staticmethod
    def _to_non_negative_int(key, value):
        if isinstance(value, bool):
            raise ConfigValidationError(f"{key} must be an integer, got {value!r}")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigValidationError(f"{key} must be an integer, got {value!r}") from None
        if number < 0:
            raise ConfigValidationError(f"{key} must not be negative, got {number}")
        return number

    def get_color(self):
        """Get the color policy.

        Returns:
            str: One of ``auto``, ``always`` or ``never``.
        """
        return self.config["color"]

    def get_fill_order(self):
        """Get the default grid fill order.

        Returns:
            FillOrder: Configured fill order.
        """
        return FillOrder(self.config["fill_order"])

    def get_min_column_width(self):
        return int(self.config["min_column_width"])

    def get_column_separator(self):
        return int(self.config["column_separator"])

    def get_width(self):
        """Get the configured output width.

        Returns:
            int or None: Width in characters, or None to use the terminal width.
        """
        width = self.config["width"]
        return int(width) if width is not None else None

    def show_hidden(self):
        return bool(self.config["show_hidden"])

    def numeric_ids(self):
        return bool(self.config["numeric_ids"])

    @classmethod
    def create_default_config(cls, path=None):
        """Write the default configuration to a file unless one already exists.

        Args:
            path: Optional destination; defaults to ``~/.config/lsgrid/config.yml``.

        Returns:
            Path: Location of the configuration file.
        """
        path = Path(path) if path else cls.default_config_path()
        if path.exists():
            print(f"Configuration file already exists: {path}")
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.safe_dump(cls.DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
        print(f"Created configuration file: {path}")
        return path
