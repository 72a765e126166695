"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from rental_returns.version import __app_name__, __company__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "RentalReturns"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
CONFIG_FILENAME = "config.json"

DEFAULT_ORIGIN_NAME = "Locadora A"
DEFAULT_POLICY_KEY = "origin_only"


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for RentalReturns."""

    app_name: str = APP_NAME
    organization_name: str = __company__
