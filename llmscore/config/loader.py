"""Configuration loader for llmscore.

This module provides the ConfigLoader class for loading and merging YAML
scorer-suite configuration with a two-level priority hierarchy:
    override file > config/defaults.yaml
and a helper that applies the logging section.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from llmscore.config.constants import DEFAULT_CONFIG_FILE
from llmscore.config.models import ConfigurationError, LoggingConfig, ScorerSuiteConfig

logger = logging.getLogger(__name__)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Layer an override suite on top of its defaults.

    Scorer sections merge option by option, so an override can change one
    weight and keep the rest. Scalars and lists replace the default value.
    A null in the override keeps the default, so it never disables a
    section that the defaults enable.

    Args:
        base: Default suite data.
        override: Suite data layered on top.

    Returns:
        New merged mapping. Neither argument is modified.

    """
    merged = dict(base)

    for key, value in override.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value

    return merged


class ConfigLoader:
    """Load and merge scorer-suite configuration files.

    Supports a two-level priority hierarchy:
        1. config/defaults.yaml (optional - base configuration)
        2. an explicit override file (optional)

    Example:
        loader = ConfigLoader()
        config = loader.load("eval/scorers.yaml")
        scorers = build_scorers(config, llm=my_llm)

    """

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize the ConfigLoader.

        Args:
            base_path: Directory holding ``config/defaults.yaml`` and the
                root for relative override paths. Defaults to the working
                directory.

        """
        self.base_path = Path.cwd() if base_path is None else Path(base_path)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Read one suite file.

        An empty file is an empty suite. Anything other than a mapping at
        the top level is rejected.

        Raises:
            ConfigurationError: If the file is missing, unreadable, not
                valid YAML or not a mapping.

        """
        try:
            content = yaml.safe_load(path.read_text())
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except PermissionError as e:
            raise ConfigurationError(f"Permission denied reading: {path}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration in {path} must be a YAML mapping")
        return content

    def _load_yaml_optional(self, path: Path) -> dict[str, Any] | None:
        """Read a suite file that may be absent; None when it does not exist."""
        if not path.exists():
            return None
        return self._load_yaml(path)

    def load_defaults(self) -> dict[str, Any]:
        """Load config/defaults.yaml as raw data.

        Returns:
            Parsed defaults, or an empty dict if the file does not exist.

        """
        defaults_path = self.base_path / DEFAULT_CONFIG_FILE
        data = self._load_yaml_optional(defaults_path)
        if data is None:
            logger.debug(f"No defaults file at {defaults_path}")
            return {}
        return data

    def load(self, path: str | Path | None = None) -> ScorerSuiteConfig:
        """Load and merge a scorer-suite configuration.

        Args:
            path: Optional override file. Relative paths are resolved
                against ``base_path``.

        Returns:
            Validated ScorerSuiteConfig.

        Raises:
            ConfigurationError: If a file is missing, unreadable or invalid.

        """
        data = self.load_defaults()

        if path is not None:
            override_path = Path(path)
            if not override_path.is_absolute():
                override_path = self.base_path / override_path
            data = _deep_merge(data, self._load_yaml(override_path))

        return self.load_from_dict(data)

    def load_from_dict(self, data: dict[str, Any]) -> ScorerSuiteConfig:
        """Validate raw configuration data.

        Args:
            data: Mapping in the shape of the YAML file.

        Returns:
            Validated ScorerSuiteConfig.

        Raises:
            ConfigurationError: If validation fails.

        """
        try:
            config = ScorerSuiteConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scorer configuration: {e}") from e

        enabled = ', '.join(config.enabled_scorers()) or 'none'
        logger.debug(f"Loaded scorer configuration: {enabled}")
        return config


def configure_logging(config: LoggingConfig) -> None:
    """Apply a logging configuration to the root logger.

    Intended for applications and scripts; the library never configures
    handlers on its own.

    Args:
        config: Logging settings.

    """
    logging.basicConfig(level=getattr(logging, config.level), format=config.format)
