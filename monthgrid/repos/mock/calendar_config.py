"""
Mock implementation of GridConfigurationRepository for testing and demos.
"""

import logging
from typing import Optional

from monthgrid.domain import GridConfiguration
from monthgrid.repositories import GridConfigurationRepository

logger = logging.getLogger(__name__)


class MockGridConfigurationRepository(GridConfigurationRepository):
    """Returns a fixed configuration without touching the filesystem."""

    def __init__(self, configuration: Optional[GridConfiguration] = None):
        self._configuration = configuration or GridConfiguration()

    def get_configuration(self) -> GridConfiguration:
        logger.debug(
            "MockGridConfigurationRepository: returning fixed configuration",
            extra={"grid_rows": self._configuration.grid_rows},
        )
        return self._configuration
