"""Runtime settings read from the environment (and an optional .env file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from .errors import ConfigurationError

T = TypeVar("T")

DEFAULT_LOGLEVEL = "INFO"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 4
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: T, convert: Callable[[str], T]) -> T:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return convert(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name}={value!r} is not a valid {convert.__name__}") from exc


@dataclass(frozen=True)
class Settings:
    loglevel: str = DEFAULT_LOGLEVEL
    asset_dir: Optional[Path] = None
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from ``SLICEDECK_*`` environment variables.

        Raises:
            ConfigurationError: If a setting holds an invalid value
        """
        if dotenv:
            load_dotenv()

        loglevel = os.getenv("SLICEDECK_LOGLEVEL", DEFAULT_LOGLEVEL).upper()
        if loglevel not in LOG_LEVELS:
            raise ConfigurationError(f"SLICEDECK_LOGLEVEL={loglevel!r} is not one of {', '.join(LOG_LEVELS)}")

        asset_dir = os.getenv("SLICEDECK_ASSET_DIR")
        return cls(
            loglevel=loglevel,
            asset_dir=Path(asset_dir) if asset_dir else None,
            http_timeout=_env("SLICEDECK_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float),
            max_workers=_env("SLICEDECK_MAX_WORKERS", DEFAULT_MAX_WORKERS, int),
        )
