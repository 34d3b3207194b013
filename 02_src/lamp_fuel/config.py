"""Environment-backed settings for the solver CLI."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    max_passes: Optional[int] = None
    output_path: Optional[str] = None


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    log_level: Optional[str] = None,
    max_passes: Optional[int] = None,
) -> Settings:
    """Read settings from ``environ``, or from the process env plus ``.env``.

    Explicit ``log_level`` and ``max_passes`` replace their environment
    variables, which are then not parsed at all.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        log_level=(
            parse_log_level(log_level)
            if log_level is not None
            else parse_log_level(environ.get("LAMP_FUEL_LOG_LEVEL", "WARNING"))
        ),
        max_passes=(
            max_passes
            if max_passes is not None
            else _parse_max_passes(environ.get("LAMP_FUEL_MAX_PASSES"))
        ),
        output_path=environ.get("LAMP_FUEL_OUTPUT_PATH") or None,
    )


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def _parse_max_passes(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError as error:
        raise ConfigError(f"LAMP_FUEL_MAX_PASSES is not an integer: {raw!r}") from error
    if value < 1:
        raise ConfigError(f"LAMP_FUEL_MAX_PASSES must be positive, got {value}")
    return value
