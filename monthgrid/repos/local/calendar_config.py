"""
Local YAML-based implementation of GridConfigurationRepository.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from monthgrid.domain import GridConfiguration
from monthgrid.errors import ConfigurationError
from monthgrid.repositories import GridConfigurationRepository

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/monthgrid/config.yaml"


class LocalGridConfigurationRepository(GridConfigurationRepository):
    """
    Local YAML file implementation of GridConfigurationRepository.

    Expects a ``grid`` mapping, for example::

        grid:
          grid_rows: 6
          first_weekday: 6
          timezone: Europe/Berlin

    A missing file yields the default configuration. A file that exists
    but cannot be parsed raises ConfigurationError.
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        """
        Initialize with path to configuration file.

        Args:
            config_path: Path to YAML configuration file, supports ~ expansion
        """
        self.config_path = Path(config_path).expanduser()
        logger.debug(
            f"Initialized LocalGridConfigurationRepository with path: "
            f"{self.config_path}"
        )

    def get_configuration(self) -> GridConfiguration:
        if not self.config_path.exists():
            logger.warning(
                f"Configuration file not found: {self.config_path}, "
                f"using defaults"
            )
            return GridConfiguration()

        try:
            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(
                f"Failed to load configuration from {self.config_path}: {e}"
            )
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_path}: {e}"
            ) from e

        if not config_data:
            logger.warning(
                f"Configuration file is empty: {self.config_path}, "
                f"using defaults"
            )
            return GridConfiguration()

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary: "
                f"{self.config_path}"
            )

        grid_data = config_data.get("grid", {})
        if not isinstance(grid_data, dict):
            raise ConfigurationError(
                f"'grid' must be a mapping in configuration file: "
                f"{self.config_path}"
            )

        try:
            configuration = GridConfiguration(**grid_data)
        except ValidationError as e:
            logger.error(
                f"Invalid grid configuration in {self.config_path}: {e}"
            )
            raise ConfigurationError(
                f"Invalid grid configuration in {self.config_path}: {e}"
            ) from e

        logger.info(
            f"Loaded grid configuration from {self.config_path}",
            extra={
                "grid_rows": configuration.grid_rows,
                "first_weekday": configuration.first_weekday,
                "timezone": configuration.timezone,
            },
        )
        return configuration
