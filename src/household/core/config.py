#!/usr/bin/env python3
"""
Household Configuration

Settings come from environment variables (optionally through a .env file):

    HOUSEHOLD_ENV           development | test | production
    HOUSEHOLD_DATA_DIR      root of the stored salary, budget and portfolio data
    HOUSEHOLD_SHEET_URL     published CSV link of the balance sheet
    HOUSEHOLD_HTTP_TIMEOUT  seconds to wait for the sheet download
    DEBUG, LOG_LEVEL        logging verbosity
"""

import logging
import os
import tempfile
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HTTP_TIMEOUT = 30


class Environment(Enum):
    """Where the application is running."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class InvestmentsConfig:
    """Where portfolio snapshots come from and where they are kept."""

    data_dir: Path
    sheet_url: str | None = None
    http_timeout: int = DEFAULT_HTTP_TIMEOUT


@dataclass
class CompensationConfig:
    """Where the salary configuration is kept."""

    data_dir: Path


@dataclass
class BudgetConfig:
    """Where the expense and revenue ledger is kept."""

    data_dir: Path


@dataclass
class Config:
    """Resolved settings for one run of the application."""

    environment: Environment
    data_dir: Path
    investments: InvestmentsConfig
    compensation: CompensationConfig
    budget: BudgetConfig
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """
        Build the configuration from the process environment.

        The test environment keeps its data under the system temp directory
        unless HOUSEHOLD_DATA_DIR says otherwise. The data directory is
        created if missing.

        Raises:
            ValueError: If HOUSEHOLD_ENV or HOUSEHOLD_HTTP_TIMEOUT is not understood
        """
        env = Environment(os.getenv("HOUSEHOLD_ENV", "development"))

        data_dir = _data_dir_for(env)
        data_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            environment=env,
            data_dir=data_dir,
            investments=InvestmentsConfig(
                data_dir=data_dir / "investments",
                sheet_url=os.getenv("HOUSEHOLD_SHEET_URL") or None,
                http_timeout=_int_setting("HOUSEHOLD_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            ),
            compensation=CompensationConfig(data_dir=data_dir / "compensation"),
            budget=BudgetConfig(data_dir=data_dir / "budget"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the configuration is usable."""
        problems = []
        if not self.data_dir.is_dir():
            problems.append(f"Data directory is missing: {self.data_dir}")
        if self.investments.http_timeout <= 0:
            problems.append(f"HOUSEHOLD_HTTP_TIMEOUT must be positive, got {self.investments.http_timeout}")
        return problems

    def setup_logging(self) -> None:
        """Install the root log handler for this run."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.INFO)
        fmt = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
        logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")

        # Connection pool chatter drowns out the sync messages
        if self.environment != Environment.DEVELOPMENT:
            for noisy in ("urllib3", "requests"):
                logging.getLogger(noisy).setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Settings as plain JSON-compatible values, nested per component."""
        return _plain(self)


def _data_dir_for(env: Environment) -> Path:
    override = os.getenv("HOUSEHOLD_DATA_DIR")
    if env == Environment.TEST:
        return Path(override) if override else Path(tempfile.gettempdir()) / "test_household"
    return Path(override or "./data").expanduser().resolve()


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a whole number of seconds, got {raw!r}") from None


def _plain(value: Any) -> Any:
    if is_dataclass(value):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


_config: Config | None = None


def get_config() -> Config:
    """
    Process-wide configuration, built and validated on first use.

    Raises:
        ValueError: If the environment describes an unusable configuration
    """
    global _config
    if _config is None:
        config = Config.from_environment()
        problems = config.validate()
        if problems:
            raise ValueError("Invalid configuration: " + "; ".join(problems))
        config.setup_logging()
        _config = config
    return _config


def reload_config() -> Config:
    """Forget the cached configuration and read the environment again."""
    global _config
    _config = None
    return get_config()
