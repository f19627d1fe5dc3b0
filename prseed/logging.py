"""Logging from config and env.

Levels (inclusive):
- ERROR: critical errors only
- WARNING: failed gh/git calls that the run recovers from, and ERROR
- INFO: pushes, created PRs and labels, WARNING, and ERROR
- DEBUG: commands run and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
Records go to stderr so they never interleave with the transcript on stdout.
"""

import logging
import sys
from typing import TextIO

from prseed.config import LoggingConfig

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class PRSeedLogging:
    """Root logger setup for a prseed run (LoggingConfig from YAML + env)."""

    def __init__(self, config: LoggingConfig, stream: TextIO | None = None) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._stream = stream

    def setup(self) -> None:
        """Replace root handlers with one stream handler at the configured
        level."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=self._stream or sys.stderr,
            force=True,
        )

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)
