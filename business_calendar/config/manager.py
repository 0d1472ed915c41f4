"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from business_calendar.data.schemas import Config

logger = logging.getLogger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Mapping of environment variables to config fields
    ENV_MAPPINGS = {
        "BUSINESS_CALENDAR_MODE": "calendar_mode",
        "BUSINESS_CALENDAR_OUTPUT_FORMAT": "output_format",
        "BUSINESS_CALENDAR_OUTPUT_DIRECTORY": "output_directory",
        "BUSINESS_CALENDAR_API_HOST": "api_host",
        "BUSINESS_CALENDAR_API_PORT": ("api_port", int),
        "BUSINESS_CALENDAR_LOG_LEVEL": "log_level",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If the YAML is malformed or a value is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logger.debug(f"Config file not found: {self.config_path}, using defaults")
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

        logger.debug(f"Loaded config from: {self.config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        # Handle calendar section
        if "calendar" in config:
            cal = config["calendar"] or {}
            if "mode" in cal:
                result["calendar_mode"] = cal["mode"]

        # Handle output section
        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        # Handle API section
        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        # Handle logging section
        if "logging" in config:
            log = config["logging"] or {}
            if "level" in log:
                result["log_level"] = log["level"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - BUSINESS_CALENDAR_MODE -> calendar_mode
        - BUSINESS_CALENDAR_OUTPUT_FORMAT -> output_format
        - BUSINESS_CALENDAR_OUTPUT_DIRECTORY -> output_directory
        - BUSINESS_CALENDAR_API_HOST -> api_host
        - BUSINESS_CALENDAR_API_PORT -> api_port
        - BUSINESS_CALENDAR_LOG_LEVEL -> log_level

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue

            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
                    continue
            else:
                config_key = mapping
                config_dict[config_key] = env_value
            logger.debug(f"Override from env: {env_var} -> {config_key}")

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = Path(output_path) if output_path else self.config_path

        config_dict = {
            "calendar": {
                "mode": config.calendar_mode.value,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        # Ensure directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to: {output_path}")
