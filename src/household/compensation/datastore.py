#!/usr/bin/env python3
"""
Salary Configuration DataStore

Persists the two-earner salary configuration as a hand-editable YAML file.
"""

import logging
from pathlib import Path

import yaml

from ..core.dates import FinancialDate
from .models import SalaryConfig

logger = logging.getLogger(__name__)


class SalaryConfigStore:
    """
    YAML-backed store for SalaryConfig.

    Storage: <base_path>/salary_config.yaml
    """

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.config_file = base_path / "salary_config.yaml"

    def exists(self) -> bool:
        return self.config_file.exists()

    def load(self, today: FinancialDate | None = None) -> SalaryConfig:
        """
        Load the stored configuration, migrating legacy layouts.

        Returns the default configuration when nothing was saved yet.
        """
        if not self.exists():
            logger.debug(f"No salary configuration at {self.config_file}, using defaults")
            return SalaryConfig.default(today)

        with open(self.config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return SalaryConfig.from_dict(data, today)

    def save(self, config: SalaryConfig) -> None:
        """Save the configuration."""
        self.base_path.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=True)
        logger.info(f"Saved salary configuration to {self.config_file}")
