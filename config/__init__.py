"""Settings for the contractor console.

``APP_ENV`` picks the defaults module (development, production, testing);
individual environment variables override single values. Bad values never
stop startup: they are reported and the module default is used instead.
"""
from __future__ import annotations

import importlib
import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ENVIRONMENTS = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}
DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True)
class Settings:
    environment: str
    debug: bool
    log_level: str
    currency_symbol: str
    max_attempts: Optional[int]


def resolve_environment(app_env: Optional[str]) -> str:
    """Map an ``APP_ENV`` value to a defaults module name."""
    key = (app_env or DEFAULT_ENVIRONMENT).strip().lower()
    return ENVIRONMENTS.get(key, ENVIRONMENTS[DEFAULT_ENVIRONMENT])


def load_settings() -> Settings:
    module_name = resolve_environment(os.getenv("APP_ENV"))
    defaults = importlib.import_module(module_name)

    return Settings(
        environment=module_name.rsplit(".", 1)[-1],
        debug=bool(defaults.DEBUG),
        log_level=_log_level(os.getenv("LOG_LEVEL"), defaults.LOG_LEVEL),
        currency_symbol=os.getenv("CURRENCY_SYMBOL") or defaults.CURRENCY_SYMBOL,
        max_attempts=_max_attempts(os.getenv("PROMPT_MAX_ATTEMPTS"), defaults.PROMPT_MAX_ATTEMPTS),
    )


def _log_level(raw: Optional[str], default: str) -> str:
    if raw is None:
        return default
    name = raw.strip().upper()
    # getLevelName() maps known names to their number, anything else to a string.
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Ignoring LOG_LEVEL=%r: unknown level, using %s", raw, default)
    return default


def _max_attempts(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None:
        return default
    if not re.fullmatch(r"[0-9]+", raw.strip()):
        logger.warning("Ignoring PROMPT_MAX_ATTEMPTS=%r: not a whole number, using %s", raw, default)
        return default
    # 0 keeps re-prompting forever
    return int(raw) or None
