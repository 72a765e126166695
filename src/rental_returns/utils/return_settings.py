"""Persisted settings selecting the origin branch and return policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from rental_returns.config import DEFAULT_ORIGIN_NAME, DEFAULT_POLICY_KEY
from rental_returns.services.errors import ValidationError
from rental_returns.utils.config_store import load_config_data, save_config_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReturnSettings:
    """Effective return configuration."""

    origin_name: str = DEFAULT_ORIGIN_NAME
    policy_key: str = DEFAULT_POLICY_KEY

    def with_overrides(
        self,
        *,
        origin_name: Optional[str] = None,
        policy_key: Optional[str] = None,
    ) -> ReturnSettings:
        changes: dict[str, str] = {}
        if origin_name is not None:
            changes["origin_name"] = origin_name
        if policy_key is not None:
            changes["policy_key"] = policy_key
        return replace(self, **changes)


def load_return_settings(config_path: Path) -> ReturnSettings:
    """Load return settings from disk, falling back to defaults."""
    data = load_config_data(config_path)
    origin_name = data.get("origin_location", DEFAULT_ORIGIN_NAME)
    policy_key = data.get("return_policy", DEFAULT_POLICY_KEY)
    if not isinstance(origin_name, str):
        logger.warning("origin_location inválido em %s; usando padrão.", config_path)
        origin_name = DEFAULT_ORIGIN_NAME
    if not isinstance(policy_key, str):
        logger.warning("return_policy inválido em %s; usando padrão.", config_path)
        policy_key = DEFAULT_POLICY_KEY
    return ReturnSettings(origin_name=origin_name, policy_key=policy_key)


def save_return_settings(config_path: Path, settings: ReturnSettings) -> None:
    """Save return settings to disk, keeping unrelated keys."""
    payload = load_config_data(config_path)
    payload["origin_location"] = settings.origin_name
    payload["return_policy"] = settings.policy_key
    save_config_data(config_path, payload)


def require_name(value: str, field_label: str) -> str:
    """Reject blank names coming from the command line or config file."""
    if not value or not value.strip():
        raise ValidationError(f"Informe {field_label}.")
    return value
