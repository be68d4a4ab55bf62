"""
Runtime configuration for the contact book.

Values come from environment variables (a .env file is loaded by main.py).

File: config.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

log = logging.getLogger(__name__)

ENV_PREFIX = "CONTACTBOOK_"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning(f"Ignoring invalid {key}={raw!r}, using {default}")
        return default


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """Configuration for the interactive contact book."""

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None  # None logs to stderr

    # Display
    header_width: int = 50
    clear_screen: bool = True

    def __post_init__(self):
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        self.log_level = self.log_level.upper()
        if self.header_width < 1:
            self.header_width = 50

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build config from CONTACTBOOK_* environment variables."""
        if env is None:
            env = os.environ

        log_file = env.get(f"{ENV_PREFIX}LOG_FILE") or None
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING",
            log_file=Path(log_file) if log_file else None,
            header_width=_env_int(env, f"{ENV_PREFIX}HEADER_WIDTH", 50),
            clear_screen=_env_bool(env, f"{ENV_PREFIX}CLEAR_SCREEN", True),
        )

    def configure_logging(self) -> None:
        """Set up root logging."""
        level = getattr(logging, self.log_level, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING

        kwargs = {"level": level, "format": LOG_FORMAT}
        if self.log_file is not None:
            kwargs["filename"] = str(self.log_file)
        logging.basicConfig(**kwargs)
