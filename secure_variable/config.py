# secure_variable/config.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import logging, os

from .constants import DEFAULT_ALGORITHM, DEFAULT_LOG_LEVEL
from .crypto import resolve_algorithm
from .logger import LOG_LEVEL_ENV, ROOT_LOGGER, get_logger, parse_level


@dataclass(frozen=True)
class SecureVariableConfig:
    """
    Process-level settings, resolved once and passed explicitly.

    Containers never read this on their own; callers hand
    ``config.algorithm`` to SecureVariable / import_variable and apply
    ``config.log_level`` with configure_logging().
    """
    algorithm: str = DEFAULT_ALGORITHM
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config: Optional[dict] = None) -> SecureVariableConfig:
    """
    Resolve settings from an explicit dict, then the environment, then defaults.

        - algorithm  / SECURE_VARIABLE_ALGORITHM
        - log_level  / SECURE_VARIABLE_LOG_LEVEL
    """
    config = config or {}

    algorithm = config.get("algorithm") or os.getenv("SECURE_VARIABLE_ALGORITHM", DEFAULT_ALGORITHM)
    algorithm = resolve_algorithm(algorithm).name

    log_level = str(config.get("log_level") or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    if parse_level(log_level) is None:
        raise ValueError(f"Unknown log level: {log_level}")

    return SecureVariableConfig(algorithm=algorithm, log_level=log_level)


def configure_logging(config: SecureVariableConfig) -> logging.Logger:
    """Apply ``config.log_level`` to the package logger and its children."""
    return get_logger(ROOT_LOGGER, level=config.log_level)
